"""
Segmenting of extracted text for quiz generation.
Greedy packing of whitespace-separated words into segments bounded by a character length
(measured on the space-joined segment). A heuristic for the model's context, not a token count.
"""
import logging
from typing import Callable, Sequence

logger = logging.getLogger(__name__)

DEFAULT_SEGMENT_MAX_CHARS = 64
DEFAULT_MAX_SEGMENTS = 10

LengthFn = Callable[[str], int]


def segment_text(text: str, max_length: int = DEFAULT_SEGMENT_MAX_CHARS, length_fn: LengthFn = len) -> list[str]:
    """
    Split text into segments of whole words. Before adding a word, if the current segment joined with
    single spaces plus the word's length would exceed max_length, the segment is closed and the word
    starts a new one. A single word longer than max_length is still emitted as its own segment.
    length_fn measures both the joined segment and the word (default: characters).
    """
    if not text:
        return []
    segments: list[str] = []
    current: list[str] = []
    for word in text.split():
        if current and length_fn(" ".join(current)) + length_fn(word) > max_length:
            segments.append(" ".join(current))
            current = []
        current.append(word)
    if current:
        segments.append(" ".join(current))
    return segments


def limit_segments(segments: Sequence[str], max_count: int = DEFAULT_MAX_SEGMENTS) -> list[str]:
    """First max_count segments, order preserved. The rest are dropped to cap model calls."""
    if max_count < 0:
        max_count = 0
    kept = list(segments[:max_count])
    if len(segments) > len(kept):
        logger.debug("limit_segments: dropping %s of %s segments", len(segments) - len(kept), len(segments))
    return kept
