"""
Per-segment outcomes of generate + parse. The pipeline branches on these explicitly:
FragmentParsed is merged, ParseFailed is skipped (soft), GenerationFailed aborts the run (hard).
"""
from dataclasses import dataclass

from quizgen.schemas.quiz import QuizFragment


@dataclass(frozen=True)
class FragmentParsed:
    fragment: QuizFragment


@dataclass(frozen=True)
class ParseFailed:
    reason: str
    reply: str = ""


@dataclass(frozen=True)
class GenerationFailed:
    error: Exception


ParseOutcome = FragmentParsed | ParseFailed
SegmentOutcome = FragmentParsed | ParseFailed | GenerationFailed
