"""
Decode a cleaned model reply into a quiz fragment.
Invalid JSON or question items of the wrong shape are a soft failure (ParseFailed), never raised.
Valid JSON without a questions list contributes zero questions.
"""
import json
import logging

from pydantic import TypeAdapter, ValidationError

from quizgen.schemas.quiz import Question, QuizFragment
from quizgen.services.outcomes import FragmentParsed, ParseFailed, ParseOutcome

logger = logging.getLogger(__name__)

_QUESTIONS = TypeAdapter(list[Question])


def _str_field(data: dict, key: str) -> str:
    v = data.get(key)
    return v if isinstance(v, str) else ""


def parse_quiz_fragment(cleaned: str) -> ParseOutcome:
    """Return FragmentParsed or ParseFailed for one reply."""
    try:
        data = json.loads(cleaned)
    except (json.JSONDecodeError, RecursionError) as e:
        return ParseFailed(reason=f"invalid JSON: {e}", reply=cleaned)
    if not isinstance(data, dict):
        return FragmentParsed(QuizFragment())
    raw_questions = data.get("questions")
    if not isinstance(raw_questions, list):
        return FragmentParsed(QuizFragment(name=_str_field(data, "name"), description=_str_field(data, "description")))
    try:
        questions = _QUESTIONS.validate_python(raw_questions)
    except ValidationError as e:
        return ParseFailed(reason=f"unusable question shape: {e.error_count()} error(s)", reply=cleaned)
    return FragmentParsed(QuizFragment(
        name=_str_field(data, "name"),
        description=_str_field(data, "description"),
        questions=questions,
    ))
