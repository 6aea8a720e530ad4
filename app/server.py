from dotenv import load_dotenv
import logging
import os

load_dotenv()
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.routes import router as api_router
from app.core.config import settings
from app.db.postgres.persistence import ensure_schema
from app.db.postgres.session import engine

logger = logging.getLogger(__name__)

TEST_MODE = os.getenv("TEST_MODE") == "1"


def configure_logging():
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def validate_startup_config():
    """Validiert kritische Umgebungsvariablen beim Startup (fail-fast)."""
    errors = []

    # Prüfe OPENAI_API_KEY (wird für LLM-Calls benötigt)
    if not (settings.openai_api_key or os.getenv("OPENAI_API_KEY")):
        errors.append(
            "OPENAI_API_KEY is not set. "
            "Set it in .env file or as environment variable. "
            "Required for drift analysis."
        )

    # Prüfe DATABASE_URL (wird für Postgres benötigt)
    database_url = os.getenv("DATABASE_URL") or settings.database_url
    if not database_url or database_url.strip() == "":
        errors.append(
            "DATABASE_URL is not set or empty. "
            "Set it in .env file or as environment variable. "
            "Required for database persistence."
        )

    if errors:
        error_msg = "Startup validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ValueError(error_msg)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    if not TEST_MODE:
        validate_startup_config()
        ensure_schema(engine)
    logger.info("%s started (model=%s)", settings.app_name, settings.llm_model_name)
    yield


app = FastAPI(title=settings.app_name, lifespan=lifespan)
app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": "Drift API running"}
