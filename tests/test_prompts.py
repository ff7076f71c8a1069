from __future__ import annotations

from flashcard_relay.study import prompts
from flashcard_relay.study.schemas import (
    ChatRequest,
    ExplainRequest,
    GenerateDescriptionRequest,
    GenerateFlashcardsRequest,
    GroupFlashcardsRequest,
    QuizRequest,
)


def test_quiz_prompt_contains_term_and_definition_verbatim():
    messages = prompts.build_quiz_messages(
        QuizRequest(term="Mitosis", definition="Cell division process")
    )

    assert [m.role for m in messages] == ["system", "user"]
    assert "Concept: Mitosis" in messages[1].content
    assert "Answer: Cell division process" in messages[1].content
    assert "raw JSON" in messages[0].content


def test_explain_prompt_uses_caller_question():
    messages = prompts.build_explain_messages(
        ExplainRequest(
            term="Mitosis",
            definition="Cell division process",
            question="How is it different from meiosis?",
        )
    )

    user = messages[1].content
    assert "Term: Mitosis" in user
    assert "Definition: Cell division process" in user
    assert "Student question: How is it different from meiosis?" in user


def test_explain_prompt_defaults_question():
    messages = prompts.build_explain_messages(
        ExplainRequest(term="Mitosis", definition="Cell division process")
    )

    assert messages[1].content.endswith(prompts.DEFAULT_EXPLAIN_QUESTION)


def test_flashcards_prompt_interpolates_count_and_text():
    text = "Line one.\nLine two with {braces} and \"quotes\"."
    messages = prompts.build_flashcards_messages(
        GenerateFlashcardsRequest(text=text, count=7)
    )

    assert "Generate exactly 7 flashcards" in messages[0].content
    assert messages[1].content == f"Create 7 flashcards from this content:\n\n{text}"


def test_description_prompt_defaults_title_and_samples_terms():
    cards = [{"term": f"Term {i}"} for i in range(20)]
    messages = prompts.build_description_messages(
        GenerateDescriptionRequest(flashcards=cards)
    )

    user = messages[1].content
    assert "Title: Study Set" in user
    assert "Number of cards: 20" in user
    expected_terms = ", ".join(f"Term {i}" for i in range(15))
    assert f"Sample terms: {expected_terms}" in user
    assert "Term 15" not in user


def test_grouping_prompt_enumerates_every_card():
    cards = [{"term": "Atom"}, {"term": "Ion", "definition": "Charged atom"}, {"term": "Bond"}]
    messages = prompts.build_grouping_messages(GroupFlashcardsRequest(flashcards=cards))

    assert messages[1].content.endswith("0: Atom\n1: Ion\n2: Bond")
    assert '"cardIndices"' in messages[0].content


def test_chat_messages_are_forwarded_in_order():
    request = ChatRequest(
        messages=[
            {"role": "system", "content": "Rules"},
            {"role": "user", "content": "Q1"},
            {"role": "assistant", "content": "A1"},
            {"role": "user", "content": "Q2"},
        ]
    )

    messages = prompts.build_chat_messages(request)

    assert [(m.role, m.content) for m in messages] == [
        ("system", "Rules"),
        ("user", "Q1"),
        ("assistant", "A1"),
        ("user", "Q2"),
    ]


def test_builders_are_deterministic():
    request = QuizRequest(term="Osmosis", definition="Diffusion of water")

    assert prompts.build_quiz_messages(request) == prompts.build_quiz_messages(request)
