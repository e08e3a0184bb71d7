"""
Mock text model: returns placeholder quiz JSON when LLM_PROVIDER=mock.
Lets the whole pipeline run locally without an API key.
"""
import hashlib
import json
import logging

logger = logging.getLogger(__name__)

DEFAULT_QUESTIONS_PER_CALL = 2


def _make_mock_quiz(prompt: str, num_questions: int) -> dict:
    """Deterministic placeholder quiz; seed taken from the prompt so different segments differ."""
    seed = hashlib.sha256(prompt.encode()).hexdigest()[:8]
    questions = []
    for i in range(num_questions):
        questions.append({
            "questionText": f"[Mock] Question {i + 1} (seed {seed}): What is the main idea of the given text?",
            "answers": [
                {"answerText": "Option A (mock)", "isCorrect": i % 2 == 0},
                {"answerText": "Option B (mock)", "isCorrect": i % 2 == 1},
                {"answerText": "Option C (mock)", "isCorrect": False},
            ],
        })
    return {"name": "Mock quiz", "description": "Set GEMINI_API_KEY for real generation.", "questions": questions}


class MockTextModel:
    """Returns a fenced JSON quiz, like a real model often does."""

    def __init__(self, questions_per_call: int = DEFAULT_QUESTIONS_PER_CALL) -> None:
        self.questions_per_call = max(0, questions_per_call)
        self.calls = 0

    def generate(self, prompt: str) -> str:
        self.calls += 1
        body = json.dumps(_make_mock_quiz(prompt, self.questions_per_call))
        return f"```json\n{body}\n```"


def get_mock_text_model() -> MockTextModel:
    return MockTextModel()
