from typing import Any

from openai import OpenAI
from app.llm.llm_client import LLMClient


class OpenAIClient(LLMClient):
    def __init__(
        self,
        model_name: str = "gpt-4o-mini",
        max_tokens: int = 800,
        temperature: float = 0.0,
        api_key: str | None = None,
    ):
        self.model_name = model_name
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.api_key = api_key
        self._client: OpenAI | None = None

    @property
    def client(self) -> OpenAI:
        # Erst beim ersten Call erzeugen, damit der Import ohne Key nicht scheitert.
        # Ohne api_key liest das SDK OPENAI_API_KEY aus der Umgebung.
        if self._client is None:
            self._client = OpenAI(api_key=self.api_key) if self.api_key else OpenAI()
        return self._client

    def complete(self, prompt: str, **kwargs: Any) -> str:
        response = self.client.chat.completions.create(
            model=kwargs.get("model", self.model_name),
            messages=[{"role": "user", "content": prompt}],
            temperature=kwargs.get("temperature", self.temperature),
            max_tokens=kwargs.get("max_tokens", self.max_tokens),
        )

        return response.choices[0].message.content or ""
