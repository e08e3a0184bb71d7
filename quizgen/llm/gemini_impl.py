"""
Gemini (Google) text model via google.genai (new SDK).
Uses GEN_MODEL_NAME (e.g. gemini-2.5-flash) and GEMINI_API_KEY.
Plain-text replies; optional tenacity retries on 429/500 (LLM_MAX_ATTEMPTS, default 1 = no retry).
"""
import logging
import time

from tenacity import retry, retry_if_exception, stop_after_attempt, wait_exponential

from quizgen.config import Settings, settings as default_settings
from quizgen.errors import ConfigError

logger = logging.getLogger(__name__)

# Default/fallback for generateContent (v1beta).
_UNSUPPORTED_MODEL_FALLBACK = "gemini-2.5-flash"
_UNSUPPORTED_MODEL_IDS = frozenset({
    "gemini-1.5-flash-002", "gemini-1.5-flash-001", "gemini-1.5-flash",
    "gemini-1.5-pro", "gemini-1.5-pro-001", "gemini-1.5-pro-002",
    "gemini-2.0-flash", "gemini-2.0-flash-001", "gemini-2.0-flash-lite", "gemini-2.0-flash-lite-001",
})


def _is_retryable(exc: BaseException) -> bool:
    """Retry on 429 (rate limit) and 5xx."""
    msg = str(exc).lower()
    if "429" in msg or "rate limit" in msg or "rate_limit" in msg:
        return True
    if "500" in msg or "502" in msg or "503" in msg or "resource exhausted" in msg:
        return True
    return False


def _resolve_model_name(name: str) -> str:
    """Return a model id that works with generateContent. Replace known-unsupported ids (e.g. from old .env)."""
    n = (name or "").strip()
    if not n:
        return _UNSUPPORTED_MODEL_FALLBACK
    if n in _UNSUPPORTED_MODEL_IDS or n.startswith("gemini-1.5-") or n.startswith("gemini-2.0-flash"):
        logger.info("Gemini: mapping unsupported model %s -> %s", n, _UNSUPPORTED_MODEL_FALLBACK)
        return _UNSUPPORTED_MODEL_FALLBACK
    return n


def _safety_settings_none():
    """Safety settings to avoid blocking study content (google.genai types)."""
    from google.genai import types
    return [
        types.SafetySetting(category="HARM_CATEGORY_HARASSMENT", threshold="BLOCK_NONE"),
        types.SafetySetting(category="HARM_CATEGORY_HATE_SPEECH", threshold="BLOCK_NONE"),
        types.SafetySetting(category="HARM_CATEGORY_SEXUALLY_EXPLICIT", threshold="BLOCK_NONE"),
        types.SafetySetting(category="HARM_CATEGORY_DANGEROUS_CONTENT", threshold="BLOCK_NONE"),
    ]


class GeminiTextModel:
    """Google Gemini implementation via google.genai SDK (generate_content). Each call is independent."""

    def __init__(self, config: Settings | None = None) -> None:
        from google import genai
        from google.genai import types
        cfg = config or default_settings
        key = (cfg.gemini_api_key or "").strip()
        if not key:
            raise ConfigError("Gemini API key is missing. Set GEMINI_API_KEY in env or .env.")
        self._client = genai.Client(api_key=key)
        self._model_name = _resolve_model_name(cfg.gen_model_name)
        self._max_attempts = max(1, cfg.llm_max_attempts)
        self._config = types.GenerateContentConfig(
            safety_settings=_safety_settings_none(),
            temperature=cfg.temperature,
            top_p=cfg.top_p,
            top_k=cfg.top_k,
            max_output_tokens=cfg.max_output_tokens,
            response_mime_type=cfg.response_mime_type,
        )

    @property
    def model_name(self) -> str:
        return self._model_name

    def generate(self, prompt: str) -> str:
        @retry(
            retry=retry_if_exception(_is_retryable),
            stop=stop_after_attempt(self._max_attempts),
            wait=wait_exponential(multiplier=1, min=1, max=8),
            reraise=True,
        )
        def _create():
            return self._client.models.generate_content(
                model=self._model_name,
                contents=prompt,
                config=self._config,
            )

        t_api_start = time.perf_counter()
        logger.info("Gemini API request: model=%s, prompt_len=%s", self._model_name, len(prompt))
        try:
            response = _create()
        except Exception as e:
            logger.warning("Gemini generate_content failed after %.2fs: %s", time.perf_counter() - t_api_start, e)
            raise
        logger.info("Gemini generate_content API %.2fs", time.perf_counter() - t_api_start)

        um = getattr(response, "usage_metadata", None)
        if um:
            inp = getattr(um, "prompt_token_count", 0) or 0
            out = getattr(um, "candidates_token_count", 0) or 0
            logger.info("Gemini API response: input_tokens=%s, output_tokens=%s", inp, out)
        return getattr(response, "text", None) or ""
