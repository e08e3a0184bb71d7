"""
Aggregation of per-segment fragments into one quiz, in segment order.
"""
from quizgen.schemas.quiz import Quiz
from quizgen.services.outcomes import FragmentParsed, ParseFailed, ParseOutcome


def new_accumulator() -> Quiz:
    return Quiz(name="", description="", questions=[])


def merge(accumulator: Quiz, outcome: ParseOutcome) -> Quiz:
    """
    Append a parsed fragment's questions to accumulator (in place) and return it.
    ParseFailed leaves accumulator unchanged. Fragment name/description are not copied.
    """
    if isinstance(outcome, ParseFailed):
        return accumulator
    if isinstance(outcome, FragmentParsed):
        accumulator.questions.extend(outcome.fragment.questions)
        return accumulator
    raise TypeError(f"cannot merge {type(outcome).__name__}")
