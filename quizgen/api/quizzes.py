"""
Quizzes API: generate a quiz from an uploaded PDF (form field "pdf"), get a stored quiz by id.
Errors are returned as {"error": message, "category": category}; no document content is echoed back.
"""
import logging
import uuid

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from quizgen.api.deps import get_pipeline, get_quiz_store, get_settings
from quizgen.config import Settings
from quizgen.errors import (
    EMPTY_RESULT,
    GENERATION_FAILED,
    INPUT_MISSING,
    INPUT_TOO_LARGE,
    UNCLASSIFIED,
    DocumentTooLargeError,
    QuizGenerationError,
)
from quizgen.schemas.quiz import ErrorResponse, GenerateQuizResponse, Quiz
from quizgen.services.quiz_pipeline import QuizPipeline
from quizgen.services.quiz_store import SqlQuizStore

router = APIRouter(prefix="/quizzes", tags=["quizzes"])
logger = logging.getLogger(__name__)

_STATUS_BY_CATEGORY = {
    INPUT_MISSING: status.HTTP_400_BAD_REQUEST,
    INPUT_TOO_LARGE: status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
    GENERATION_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    EMPTY_RESULT: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _error_response(message: str, category: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message, "category": category}, status_code=status_code)


@router.post(
    "/generate",
    response_model=GenerateQuizResponse,
    responses={400: {"model": ErrorResponse}, 413: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def generate_quiz(
    pdf: UploadFile | None = File(None),
    config: Settings = Depends(get_settings),
    pipeline: QuizPipeline = Depends(get_pipeline),
):
    """Upload a PDF; returns {"quizzId": ...} once the quiz is generated and stored."""
    try:
        # Read at most one byte past the limit so oversized uploads are never fully buffered.
        contents = pdf.file.read(config.max_upload_bytes + 1) if pdf is not None else None
        if contents and len(contents) > config.max_upload_bytes:
            logger.warning("Upload rejected: size=%s > max_upload_bytes=%s", len(contents), config.max_upload_bytes)
            raise DocumentTooLargeError()
        quiz_id = pipeline.run_document(contents)
    except QuizGenerationError as e:
        logger.warning("Quiz generation failed: category=%s message=%s", e.category, e.message)
        return _error_response(e.message, e.category, _STATUS_BY_CATEGORY.get(e.category, 500))
    except SQLAlchemyError:
        # Statement parameters carry generated question text; keep them in the log only.
        logger.exception("Database error in quiz generation route")
        return _error_response("Failed to save quiz", UNCLASSIFIED, 500)
    except Exception as e:
        logger.exception("Error in quiz generation route")
        return _error_response(str(e) or "An unknown error occurred.", UNCLASSIFIED, 500)
    return GenerateQuizResponse(quiz_id=str(quiz_id))


@router.get("/{quiz_id}", response_model=Quiz)
def get_quiz(quiz_id: uuid.UUID, store: SqlQuizStore = Depends(get_quiz_store)):
    quiz = store.get(quiz_id)
    if quiz is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Quiz not found")
    return quiz
