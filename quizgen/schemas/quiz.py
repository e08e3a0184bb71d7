"""
Quiz schemas: Answer, Question, Quiz. JSON field names are camelCase (answerText, isCorrect, questionText)
as the model is asked to produce them; Python attributes are snake_case.
"""
from pydantic import BaseModel, ConfigDict, Field


class Answer(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    answer_text: str = Field(alias="answerText")
    # Any number of answers may be marked correct; accepted as-is from model output.
    is_correct: bool = Field(alias="isCorrect")


class Question(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    question_text: str = Field(alias="questionText")
    answers: list[Answer] = Field(default_factory=list)


class Quiz(BaseModel):
    """Aggregate quiz. name/description are not filled by aggregation and stay empty."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    description: str = ""
    questions: list[Question] = Field(default_factory=list)


# Per-segment decode target; same shape as Quiz.
QuizFragment = Quiz


class GenerateQuizResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    quiz_id: str = Field(alias="quizzId")


class ErrorResponse(BaseModel):
    error: str
