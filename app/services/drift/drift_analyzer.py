import logging
import os

from app.core.config import Settings
from app.llm.fake_client import FakeLLMClient
from app.llm.llm_client import LLMClient
from app.llm.openai_client import OpenAIClient
from app.models.pydantic import DriftAnalysis
from app.services.drift.parsing import parse_drift_json
from app.services.drift.prompts import build_drift_prompt

logger = logging.getLogger(__name__)

TEST_MODE = os.getenv("TEST_MODE") == "1"


class DriftAnalyzer:
    def __init__(self, llm_client: LLMClient, max_items: int = 5):
        """
        Fragt das LLM nach Drift zwischen Quelltext und Übersetzung.

        Fehler des LLM-Clients werden nicht abgefangen; ein unparsbares
        Ergebnis führt zu DriftParseError.
        """
        self.llm = llm_client
        self.max_items = max_items

    def analyse(self, source_text: str, translation_text: str) -> tuple[DriftAnalysis, dict]:
        """
        :return: (validierte DriftAnalysis, rohes JSON-Dict zum Speichern)
        """
        prompt = build_drift_prompt(source_text, translation_text, self.max_items)
        raw = self.llm.complete(prompt)
        data = parse_drift_json(raw)

        analysis = DriftAnalysis.from_raw(data)
        logger.info(
            "Drift analysis done: %s -> %s, %d items",
            analysis.source_language or "?",
            analysis.translation_language or "?",
            len(analysis.drift_items),
        )
        return analysis, data


class DriftPipeline:
    def __init__(self, config: Settings) -> None:
        # LLM-Client einmal zentral instanziieren
        if TEST_MODE:
            self.llm_client: LLMClient = FakeLLMClient()
        else:
            self.llm_client = OpenAIClient(
                model_name=config.llm_model_name,
                max_tokens=config.llm_max_tokens,
                temperature=config.llm_temperature,
                api_key=config.openai_api_key,
            )

        self.model_name = config.llm_model_name
        self.analyzer = DriftAnalyzer(self.llm_client, max_items=config.max_drift_items)

    def run(self, source_text: str, translation_text: str) -> tuple[DriftAnalysis, dict]:
        return self.analyzer.analyse(source_text, translation_text)
