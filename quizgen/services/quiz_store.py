"""
Quiz persistence: save an aggregated quiz in one transaction and return its generated id.
"""
import logging
import uuid
from dataclasses import dataclass
from typing import Callable, Protocol

from sqlalchemy.orm import Session

from quizgen.models.quiz import QuizAnswer, QuizQuestion, QuizRecord
from quizgen.schemas.quiz import Answer, Question, Quiz

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SavedQuiz:
    id: uuid.UUID


class QuizStore(Protocol):
    def save(self, quiz: Quiz) -> SavedQuiz:
        ...


def _quiz_to_record(quiz: Quiz) -> QuizRecord:
    record = QuizRecord(id=uuid.uuid4(), name=quiz.name, description=quiz.description)
    for qi, q in enumerate(quiz.questions):
        question = QuizQuestion(sort_order=qi, question_text=q.question_text)
        for ai, a in enumerate(q.answers):
            question.answers.append(QuizAnswer(sort_order=ai, answer_text=a.answer_text, is_correct=a.is_correct))
        record.questions.append(question)
    return record


def _record_to_quiz(record: QuizRecord) -> Quiz:
    return Quiz(
        name=record.name or "",
        description=record.description or "",
        questions=[
            Question(
                question_text=q.question_text,
                answers=[Answer(answer_text=a.answer_text, is_correct=a.is_correct) for a in q.answers],
            )
            for q in record.questions
        ],
    )


class SqlQuizStore:
    """SQLAlchemy-backed store. session_factory is usually quizgen.database.SessionLocal."""

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def save(self, quiz: Quiz) -> SavedQuiz:
        db = self._session_factory()
        try:
            record = _quiz_to_record(quiz)
            db.add(record)
            db.commit()
            logger.info("Saved quiz %s with %s questions", record.id, len(quiz.questions))
            return SavedQuiz(id=record.id)
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def get(self, quiz_id: uuid.UUID) -> Quiz | None:
        db = self._session_factory()
        try:
            record = db.query(QuizRecord).filter(QuizRecord.id == quiz_id).first()
            if not record:
                return None
            return _record_to_quiz(record)
        finally:
            db.close()
