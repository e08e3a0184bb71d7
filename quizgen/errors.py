"""
Quiz generation error taxonomy. Each fatal outcome has its own category and a caller-safe message
(no document or prompt content). The HTTP layer maps categories to status codes.
"""

INPUT_MISSING = "input_missing"
INPUT_TOO_LARGE = "input_too_large"
GENERATION_FAILED = "generation_failed"
EMPTY_RESULT = "empty_result"
UNCLASSIFIED = "unclassified"


class ConfigError(RuntimeError):
    """Required configuration is absent or invalid."""


class QuizGenerationError(Exception):
    """Base for fatal pipeline outcomes."""

    category: str = UNCLASSIFIED
    default_message: str = "An unknown error occurred."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingDocumentError(QuizGenerationError):
    category = INPUT_MISSING
    default_message = "No document provided"


class GenerationFailedError(QuizGenerationError):
    """The model call itself failed for a segment; the whole run is aborted."""

    category = GENERATION_FAILED
    default_message = "Failed to generate quiz from AI."


class EmptyQuizError(QuizGenerationError):
    """Every segment was skipped (or there were none); nothing usable to persist."""

    category = EMPTY_RESULT
    default_message = "Failed to generate valid quiz data"


class DocumentTooLargeError(QuizGenerationError):
    """Upload exceeds MAX_UPLOAD_BYTES; rejected before extraction."""

    category = INPUT_TOO_LARGE
    default_message = "Document is too large"
