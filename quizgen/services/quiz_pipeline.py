"""
Quiz pipeline: text -> segments -> first N segments -> per segment (model call, parse, merge) -> persist.
Segments run strictly in order, one model call each. A failed model call aborts the run; a reply that
cannot be parsed is skipped. Nothing is persisted unless at least one question was produced.
"""
import logging
import time
import uuid

from quizgen import metrics
from quizgen.config import Settings
from quizgen.errors import EmptyQuizError, GenerationFailedError, MissingDocumentError
from quizgen.llm.base import TextModel
from quizgen.schemas.quiz import Quiz
from quizgen.services.aggregation import merge, new_accumulator
from quizgen.services.outcomes import FragmentParsed, GenerationFailed, ParseFailed
from quizgen.services.pdf_extract import extract_text_from_pdf
from quizgen.services.quiz_generation import generate_segment
from quizgen.services.quiz_store import QuizStore
from quizgen.services.segmenting import LengthFn, limit_segments, segment_text

logger = logging.getLogger(__name__)

# Max chars of an unparseable reply to include in the warning log
_LOG_REPLY_CHARS = 500


class QuizPipeline:
    """Chunk-and-aggregate quiz generation for one document at a time."""

    def __init__(
        self,
        config: Settings,
        text_model: TextModel,
        store: QuizStore,
        extract_text=extract_text_from_pdf,
        length_fn: LengthFn = len,
    ) -> None:
        self._config = config
        self._model = text_model
        self._store = store
        self._extract_text = extract_text
        self._length_fn = length_fn

    def segments_for(self, text: str) -> list[str]:
        segments = segment_text(text, self._config.segment_max_chars, length_fn=self._length_fn)
        limited = limit_segments(segments, self._config.max_segments)
        logger.info("Segmented text_len=%s into %s segments (using %s)", len(text), len(segments), len(limited))
        return limited

    def build_quiz(self, text: str) -> Quiz:
        """
        Run every segment through the model and merge parsed fragments.
        Raises GenerationFailedError on the first failed model call, EmptyQuizError if no questions result.
        """
        quiz = new_accumulator()
        segments = self.segments_for(text)
        skipped = 0
        for i, segment in enumerate(segments):
            outcome = generate_segment(self._model, segment)
            if isinstance(outcome, GenerationFailed):
                logger.error("Segment %s/%s: model call failed; aborting quiz generation", i + 1, len(segments))
                metrics.increment_generation_failures_total()
                raise GenerationFailedError() from outcome.error
            if isinstance(outcome, ParseFailed):
                skipped += 1
                metrics.increment_segment_parse_failures_total()
                logger.warning(
                    "Segment %s/%s: failed to parse reply (%s). reply (first %s chars): %s",
                    i + 1, len(segments), outcome.reason, _LOG_REPLY_CHARS, outcome.reply[:_LOG_REPLY_CHARS],
                )
            elif isinstance(outcome, FragmentParsed):
                logger.info("Segment %s/%s: %s questions", i + 1, len(segments), len(outcome.fragment.questions))
            quiz = merge(quiz, outcome)
        logger.info("build_quiz: segments=%s skipped=%s questions=%s", len(segments), skipped, len(quiz.questions))
        if not quiz.questions:
            raise EmptyQuizError()
        return quiz

    def run(self, text: str) -> uuid.UUID:
        """Build the quiz from extracted text and persist it; return the stored quiz id."""
        t_start = time.perf_counter()
        quiz = self.build_quiz(text)
        saved = self._store.save(quiz)
        logger.info("Quiz %s generated in %.2fs", saved.id, time.perf_counter() - t_start)
        return saved.id

    def run_document(self, payload: bytes | None) -> uuid.UUID:
        """Extract text from an uploaded document and run the pipeline on it."""
        if not payload:
            raise MissingDocumentError()
        return self.run(self._extract_text(payload))
