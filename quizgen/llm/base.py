"""
Text model interface: one stateless call, prompt in, reply text out.
No conversation history is kept between calls; each segment is sent on its own.
"""
from typing import Protocol


class TextModel(Protocol):
    """Abstract generative model used by the quiz pipeline."""

    def generate(self, prompt: str) -> str:
        """
        Return the model's raw reply text for prompt.
        Raises on transport, auth or quota errors; callers treat that as a hard failure.
        """
        ...
