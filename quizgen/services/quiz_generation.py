"""
Generation client adapter: build the quiz instruction for one segment, call the text model once,
strip code fences from the reply, and parse it. A failing model call is reported as GenerationFailed.
"""
import logging
import re

from quizgen.llm.base import TextModel
from quizgen.services.outcomes import GenerationFailed, SegmentOutcome
from quizgen.services.quiz_parser import parse_quiz_fragment

logger = logging.getLogger(__name__)

QUIZ_PROMPT = (
    "given the text which is a summary of the document, generate a quiz based on the text. "
    "Return json only that contains a quiz object with fields: name, description, and questions. "
    "The questions is an array of objects with fields: questionText, answers. "
    "The answers is an array of objects with fields: answerText, isCorrect.\n"
    "Text: {segment}"
)

# Opening or closing ``` with an optional language tag (```json, ```JSON, ```js ...).
_CODE_FENCE_RE = re.compile(r"```[\w+-]*")


def build_quiz_prompt(segment: str) -> str:
    return QUIZ_PROMPT.format(segment=segment)


def strip_code_fences(reply: str) -> str:
    """Remove every code-fence marker; models wrap JSON in markdown despite being asked not to."""
    return _CODE_FENCE_RE.sub("", reply or "").strip()


def generate_reply(model: TextModel, segment: str) -> str:
    """One model call for segment; returns the reply with fences stripped. Propagates model errors."""
    raw = model.generate(build_quiz_prompt(segment))
    logger.debug("Raw model reply len=%s", len(raw or ""))
    return strip_code_fences(raw)


def generate_segment(model: TextModel, segment: str) -> SegmentOutcome:
    """Generate and parse one segment into a tagged outcome."""
    try:
        cleaned = generate_reply(model, segment)
    except Exception as e:
        logger.exception("Model call failed for segment (len=%s)", len(segment))
        return GenerationFailed(e)
    return parse_quiz_fragment(cleaned)
