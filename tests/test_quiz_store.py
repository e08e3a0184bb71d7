"""SqlQuizStore against an in-memory SQLite database."""
import uuid

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from quizgen.database import init_db
from quizgen.models.quiz import QuizRecord
from quizgen.schemas.quiz import Answer, Question, Quiz
from quizgen.services.quiz_store import SqlQuizStore


@pytest.fixture
def session_factory():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    init_db(engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def _quiz() -> Quiz:
    return Quiz(questions=[
        Question(question_text="Q1", answers=[
            Answer(answer_text="a", is_correct=False),
            Answer(answer_text="b", is_correct=True),
        ]),
        Question(question_text="Q2", answers=[]),
        Question(question_text="Q3", answers=[Answer(answer_text="c", is_correct=True)]),
    ])


def test_save_returns_id_and_roundtrips_order(session_factory):
    store = SqlQuizStore(session_factory)
    saved = store.save(_quiz())
    assert isinstance(saved.id, uuid.UUID)
    loaded = store.get(saved.id)
    assert loaded == _quiz()
    assert loaded.name == ""
    assert loaded.description == ""


def test_get_unknown_id(session_factory):
    assert SqlQuizStore(session_factory).get(uuid.uuid4()) is None


def test_each_save_gets_new_id(session_factory):
    store = SqlQuizStore(session_factory)
    assert store.save(_quiz()).id != store.save(_quiz()).id
    db = session_factory()
    try:
        assert db.query(QuizRecord).count() == 2
    finally:
        db.close()
