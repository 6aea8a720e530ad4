from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # .env wird automatisch gelesen
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "DriftAPI"
    environment: str = "dev"
    log_level: str = "INFO"

    # Default: Docker-Host "db"
    # Lokal: wird durch .env / Env-Var DATABASE_URL überschrieben
    database_url: str = "postgresql+psycopg://drift:drift@db:5432/drift_db"

    # Liest OPENAI_API_KEY; None -> das SDK fällt auf die Umgebung zurück
    openai_api_key: str | None = None

    llm_model_name: str = "gpt-4o-mini"
    llm_max_tokens: int = 800
    llm_temperature: float = 0.0

    # Obergrenze für drift_items im Prompt (wird vom Core nicht erzwungen)
    max_drift_items: int = 5
    latest_limit: int = 5


settings = Settings()
