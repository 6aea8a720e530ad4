from typing import Any
from app.llm.llm_client import LLMClient


class FakeLLMClient(LLMClient):
    def complete(self, prompt: str, **kwargs: Any) -> str:
        # Völlig deterministische Antwort mit einem klaren Bedeutungsfehler.
        return """
        {
          "source_language": "English",
          "translation_language": "German",
          "drift_items": [
            {
              "category": "Meaning",
              "severity": "High",
              "description": "The cat is translated as a dog.",
              "source_snippet": "cat",
              "translation_snippet": "Hund"
            }
          ]
        }
        """
