#!/usr/bin/env python3
"""
Try quiz generation on a local PDF without the API server.
Extracts text, runs the segment pipeline and prints the first questions; --save also stores the quiz.
Requires GEMINI_API_KEY in .env (or LLM_PROVIDER=mock). Run: python scripts/generate_quiz_from_pdf.py path/to/file.pdf
"""
import logging
import sys
from pathlib import Path


def main(argv: list[str]) -> int:
    args = [a for a in argv if not a.startswith("--")]
    save = "--save" in argv
    if not args:
        print("usage: generate_quiz_from_pdf.py <file.pdf> [--save]")
        return 1
    pdf_path = Path(args[0])
    if not pdf_path.exists():
        print("PDF not found:", pdf_path)
        return 1
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    from quizgen.config import settings
    from quizgen.database import SessionLocal, init_db
    from quizgen.errors import QuizGenerationError
    from quizgen.llm import get_text_model
    from quizgen.services.pdf_extract import extract_text_from_pdf
    from quizgen.services.quiz_pipeline import QuizPipeline
    from quizgen.services.quiz_store import SqlQuizStore

    text = extract_text_from_pdf(pdf_path.read_bytes())
    print(f"Extracted {len(text)} chars, {len(text.split())} words")

    init_db()
    pipeline = QuizPipeline(settings, get_text_model(settings), SqlQuizStore(SessionLocal))
    try:
        if save:
            quiz_id = pipeline.run(text)
            print("Saved quiz id:", quiz_id)
            return 0
        quiz = pipeline.build_quiz(text)
    except QuizGenerationError as e:
        print(f"Failed ({e.category}): {e.message}")
        return 2
    print(f"Result: {len(quiz.questions)} questions")
    for i, q in enumerate(quiz.questions[:3]):
        correct = [a.answer_text for a in q.answers if a.is_correct]
        print(f"  {i + 1}. {q.question_text[:80]} -> {', '.join(correct) or '(no correct answer)'}")
    if len(quiz.questions) > 3:
        print(f"  ... and {len(quiz.questions) - 3} more")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
