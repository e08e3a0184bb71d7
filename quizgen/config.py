"""
Application configuration from environment variables.
Loads .env from the project directory so API keys are found regardless of cwd.
"""
import os
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from quizgen.errors import ConfigError

# Default model for generateContent (v1beta).
_DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"

# Models that return 404 or are unsupported. Normalized at config load to _DEFAULT_GEMINI_MODEL.
_UNSUPPORTED_GEMINI_MODELS = frozenset({
    "gemini-1.5-flash-002", "gemini-1.5-flash-001", "gemini-1.5-flash",
    "gemini-1.5-pro", "gemini-1.5-pro-001", "gemini-1.5-pro-002",
    "gemini-2.0-flash", "gemini-2.0-flash-001", "gemini-2.0-flash-lite", "gemini-2.0-flash-lite-001",
})

LLM_PROVIDERS = ("gemini", "mock")


def normalize_gen_model(v: str) -> str:
    """Ensure gen_model_name is supported by generateContent (avoids 404 from old .env)."""
    s = (v or _DEFAULT_GEMINI_MODEL).strip()
    if not s:
        return _DEFAULT_GEMINI_MODEL
    if s in _UNSUPPORTED_GEMINI_MODELS or s.startswith("gemini-1.5-") or s.startswith("gemini-2.0-flash"):
        return _DEFAULT_GEMINI_MODEL
    return s


_PROJECT_DIR = Path(__file__).resolve().parent.parent
_ENV_FILE = _PROJECT_DIR / ".env"

if _ENV_FILE.exists():
    from dotenv import load_dotenv
    load_dotenv(_ENV_FILE, override=False)  # so Settings sees GEMINI_API_KEY from a worker or script too
else:
    _cwd_env = Path(os.getcwd()) / ".env"
    if _cwd_env.exists():
        from dotenv import load_dotenv
        load_dotenv(_cwd_env, override=False)


class Settings(BaseSettings):
    """Load and validate config from env."""

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE if _ENV_FILE.exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # LLM: "gemini" (needs GEMINI_API_KEY) or "mock" for local runs without a key.
    llm_provider: str = "gemini"
    gemini_api_key: str = ""
    gen_model_name: str = _DEFAULT_GEMINI_MODEL

    # generateContent parameters
    temperature: float = 1.0
    top_p: float = 0.95
    top_k: int = 64
    max_output_tokens: int = 8192
    response_mime_type: str = "text/plain"
    # Attempts per model call on 429/5xx. 1 = single call, no retry.
    llm_max_attempts: int = 1

    # Segmentation: character bound per segment (joined with single spaces) and max segments per document.
    segment_max_chars: int = 64
    max_segments: int = 10

    # Database: sqlite for local runs, postgresql in production
    database_url: str = "sqlite:///./quizgen_dev.db"

    max_upload_bytes: int = 20 * 1024 * 1024

    # CORS: comma-separated origins
    cors_origins: str = "http://localhost:3000"

    debug: bool = False

    @field_validator("gen_model_name", mode="before")
    @classmethod
    def _resolve_gen_model(cls, v: str) -> str:
        return normalize_gen_model(v) if isinstance(v, str) else _DEFAULT_GEMINI_MODEL

    @field_validator("llm_provider", mode="before")
    @classmethod
    def _normalize_provider(cls, v: str) -> str:
        return (v or "gemini").strip().lower() if isinstance(v, str) else "gemini"

    @field_validator("segment_max_chars", "max_segments", "llm_max_attempts")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("must be >= 1")
        return v

    def require_model_credentials(self) -> None:
        """Fail fast when the configured provider cannot be constructed. Never logs the key."""
        if self.llm_provider not in LLM_PROVIDERS:
            raise ConfigError(f"Unknown LLM_PROVIDER {self.llm_provider!r}; expected one of {', '.join(LLM_PROVIDERS)}")
        if self.llm_provider == "gemini" and not (self.gemini_api_key or "").strip():
            raise ConfigError("Gemini API key is missing. Set GEMINI_API_KEY in env or .env.")


settings = Settings()
