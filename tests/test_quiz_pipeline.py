"""
Pipeline tests with fake text models and an in-memory store: ordering, soft/hard failures, empty result.
"""
import json
import uuid

import pytest

from quizgen import metrics
from quizgen.config import Settings
from quizgen.errors import EmptyQuizError, GenerationFailedError, MissingDocumentError
from quizgen.llm.mock_impl import MockTextModel
from quizgen.services.quiz_pipeline import QuizPipeline
from quizgen.services.quiz_store import SavedQuiz


def _reply(*question_texts: str) -> str:
    return json.dumps({
        "name": "ignored",
        "description": "ignored",
        "questions": [
            {"questionText": t, "answers": [{"answerText": "yes", "isCorrect": True}, {"answerText": "no", "isCorrect": False}]}
            for t in question_texts
        ],
    })


class ScriptedModel:
    """Returns (or raises) the scripted items in order, one per call."""

    def __init__(self, *script):
        self.script = list(script)
        self.prompts = []

    def generate(self, prompt):
        self.prompts.append(prompt)
        item = self.script[len(self.prompts) - 1]
        if isinstance(item, BaseException):
            raise item
        return item


class MemoryStore:
    def __init__(self):
        self.saved = []

    def save(self, quiz):
        self.saved.append(quiz)
        return SavedQuiz(id=uuid.uuid4())


def _settings(**overrides) -> Settings:
    values = {"llm_provider": "mock", "segment_max_chars": 64, "max_segments": 10}
    values.update(overrides)
    return Settings(**values)


TWO_SEGMENT_TEXT = "alpha beta gamma delta"  # with segment_max_chars=10 -> "alpha beta", "gamma delta"


def test_single_segment_for_short_text():
    model = ScriptedModel(_reply("Q1"))
    pipeline = QuizPipeline(_settings(segment_max_chars=100), model, MemoryStore())
    assert pipeline.segments_for("one two three") == ["one two three"]
    quiz = pipeline.build_quiz("one two three")
    assert len(model.prompts) == 1
    assert model.prompts[0].endswith("Text: one two three")
    assert [q.question_text for q in quiz.questions] == ["Q1"]


def test_garbage_reply_is_skipped():
    model = ScriptedModel("```json\n" + _reply("Q1", "Q2") + "\n```", "this is not json")
    store = MemoryStore()
    pipeline = QuizPipeline(_settings(segment_max_chars=10), model, store)
    failures_before = metrics.segment_parse_failures_total
    quiz_id = pipeline.run(TWO_SEGMENT_TEXT)
    assert metrics.segment_parse_failures_total == failures_before + 1
    assert isinstance(quiz_id, uuid.UUID)
    assert len(model.prompts) == 2
    assert len(store.saved) == 1
    assert [q.question_text for q in store.saved[0].questions] == ["Q1", "Q2"]


def test_model_error_aborts_run():
    model = ScriptedModel(ConnectionError("quota exceeded"), _reply("Q2"))
    store = MemoryStore()
    pipeline = QuizPipeline(_settings(segment_max_chars=10), model, store)
    with pytest.raises(GenerationFailedError) as exc_info:
        pipeline.run(TWO_SEGMENT_TEXT)
    assert len(model.prompts) == 1
    assert store.saved == []
    assert exc_info.value.category == "generation_failed"
    assert isinstance(exc_info.value.__cause__, ConnectionError)


def test_model_error_after_success_returns_no_partial_quiz():
    model = ScriptedModel(_reply("Q1"), RuntimeError("500 internal"))
    store = MemoryStore()
    pipeline = QuizPipeline(_settings(segment_max_chars=10), model, store)
    with pytest.raises(GenerationFailedError):
        pipeline.run(TWO_SEGMENT_TEXT)
    assert store.saved == []


def test_empty_questions_is_empty_result():
    model = ScriptedModel('{"questions": []}')
    store = MemoryStore()
    pipeline = QuizPipeline(_settings(), model, store)
    with pytest.raises(EmptyQuizError) as exc_info:
        pipeline.run("short text")
    assert exc_info.value.category == "empty_result"
    assert store.saved == []


def test_empty_text_makes_no_model_call():
    model = ScriptedModel()
    pipeline = QuizPipeline(_settings(), model, MemoryStore())
    with pytest.raises(EmptyQuizError):
        pipeline.run("   ")
    assert model.prompts == []


def test_all_segments_unparseable_is_empty_result():
    model = ScriptedModel("nope", "still nope")
    pipeline = QuizPipeline(_settings(segment_max_chars=10), model, MemoryStore())
    with pytest.raises(EmptyQuizError):
        pipeline.build_quiz(TWO_SEGMENT_TEXT)


def test_questions_follow_segment_order():
    model = ScriptedModel(_reply("a1", "a2"), "garbage", _reply("c1"), '{"questions": "bad"}', _reply("e1"))
    pipeline = QuizPipeline(_settings(segment_max_chars=5), model, MemoryStore())
    quiz = pipeline.build_quiz("aaaa bbbb cccc dddd eeee")
    assert [q.question_text for q in quiz.questions] == ["a1", "a2", "c1", "e1"]
    assert quiz.name == ""
    assert quiz.description == ""


def test_segments_limited_to_max_segments():
    model = MockTextModel(questions_per_call=1)
    pipeline = QuizPipeline(_settings(segment_max_chars=3, max_segments=4), model, MemoryStore())
    quiz = pipeline.build_quiz(" ".join(f"w{i}" for i in range(20)))
    assert model.calls == 4
    assert len(quiz.questions) == 4


def test_run_document_missing_payload():
    model = ScriptedModel()
    pipeline = QuizPipeline(_settings(), model, MemoryStore())
    with pytest.raises(MissingDocumentError):
        pipeline.run_document(None)
    with pytest.raises(MissingDocumentError):
        pipeline.run_document(b"")
    assert model.prompts == []


def test_run_document_uses_extractor():
    seen = []

    def fake_extract(payload):
        seen.append(payload)
        return "page one page two"

    store = MemoryStore()
    pipeline = QuizPipeline(_settings(), ScriptedModel(_reply("Q")), store, extract_text=fake_extract)
    quiz_id = pipeline.run_document(b"%PDF-fake")
    assert seen == [b"%PDF-fake"]
    assert isinstance(quiz_id, uuid.UUID)
    assert len(store.saved) == 1
