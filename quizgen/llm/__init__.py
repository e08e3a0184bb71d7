"""
Text model abstraction: generate(prompt) -> reply text.
Gemini by default (GEN_MODEL_NAME, GEMINI_API_KEY); LLM_PROVIDER=mock for local runs.
"""
import logging

from quizgen.config import Settings, settings as default_settings
from quizgen.llm.base import TextModel

logger = logging.getLogger(__name__)


def get_text_model(config: Settings | None = None) -> TextModel:
    """Return the configured text model. Raises ConfigError if the provider is unknown or has no API key."""
    cfg = config or default_settings
    cfg.require_model_credentials()
    if cfg.llm_provider == "mock":
        logger.warning("LLM_PROVIDER=mock; quizzes will contain placeholder questions.")
        from quizgen.llm.mock_impl import get_mock_text_model
        return get_mock_text_model()
    from quizgen.llm.gemini_impl import GeminiTextModel
    model = GeminiTextModel(cfg)
    logger.info("Using LLM: %s (Gemini)", model.model_name)
    return model


__all__ = ["TextModel", "get_text_model"]
