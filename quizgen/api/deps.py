"""
Shared dependencies: settings, quiz store, text model and pipeline.
Overridden in tests via app.dependency_overrides.
"""
from fastapi import Depends

from quizgen.config import Settings, settings
from quizgen.database import SessionLocal
from quizgen.llm import TextModel, get_text_model
from quizgen.services.quiz_pipeline import QuizPipeline
from quizgen.services.quiz_store import SqlQuizStore


def get_settings() -> Settings:
    return settings


def get_quiz_store() -> SqlQuizStore:
    return SqlQuizStore(SessionLocal)


def get_model(config: Settings = Depends(get_settings)) -> TextModel:
    """Raises ConfigError if the provider has no API key."""
    return get_text_model(config)


def get_pipeline(
    config: Settings = Depends(get_settings),
    model: TextModel = Depends(get_model),
    store: SqlQuizStore = Depends(get_quiz_store),
) -> QuizPipeline:
    return QuizPipeline(config, model, store)
