"""
SQLAlchemy models. Import here so init_db and the app can use them.
"""
from quizgen.models.quiz import QuizAnswer, QuizQuestion, QuizRecord

__all__ = ["QuizRecord", "QuizQuestion", "QuizAnswer"]
