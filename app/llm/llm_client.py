from abc import ABC, abstractmethod
from typing import Any


class LLMClient(ABC):
    """Minimale Schnittstelle zum Analyse-Provider (Text rein, Text raus)."""

    @abstractmethod
    def complete(self, prompt: str, **kwargs: Any) -> str:
        """Schickt den Drift-Prompt an ein LLM und liefert den rohen Antworttext."""
        raise NotImplementedError
