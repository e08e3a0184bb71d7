"""
FastAPI application entrypoint. Run with: uvicorn quizgen.main:app --reload --port 8000

Routes:
  - Quizzes: POST /quizzes/generate (multipart field "pdf"), GET /quizzes/{id}
  - Health:  GET /health
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from quizgen.api.quizzes import router as quizzes_router
from quizgen.config import settings
from quizgen.errors import UNCLASSIFIED, ConfigError

app = FastAPI(
    title="Quiz Generator API",
    description="Upload a document, get back a stored multiple-choice quiz generated segment by segment.",
    version="0.1.0",
)

_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins if _origins else ["http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(quizzes_router)


@app.exception_handler(ConfigError)
def config_error_handler(request, exc: ConfigError):
    """Missing API key etc. when a dependency builds the text model."""
    logging.getLogger("quizgen.main").error("Configuration error: %s", exc)
    return JSONResponse({"error": str(exc), "category": UNCLASSIFIED}, status_code=500)


@app.on_event("startup")
def startup():
    """Configure logging, fail fast on missing model credentials, create tables."""
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    _log = logging.getLogger("quizgen.main")
    settings.require_model_credentials()
    _log.info(
        "LLM provider=%s model=%s segment_max_chars=%s max_segments=%s",
        settings.llm_provider, settings.gen_model_name, settings.segment_max_chars, settings.max_segments,
    )
    from quizgen.database import init_db
    init_db()


@app.get("/health")
def health():
    """Health check (JSON)."""
    return {"status": "ok"}
