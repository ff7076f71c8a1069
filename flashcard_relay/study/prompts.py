"""Fixed prompt templates for each study task.

Every builder is pure: it takes a validated request and returns the system
and user messages sent to the completion service. Caller-supplied values are
interpolated verbatim.
"""

from __future__ import annotations

from flashcard_relay.core.types import ChatMessage

from .schemas import (
    ChatRequest,
    ExplainRequest,
    GenerateDescriptionRequest,
    GenerateFlashcardsRequest,
    GroupFlashcardsRequest,
    QuizRequest,
)

DEFAULT_SET_TITLE = "Study Set"
DEFAULT_EXPLAIN_QUESTION = "Explain this concept in more detail with examples."
DESCRIPTION_SAMPLE_TERMS = 15

EXPLAIN_SYSTEM_PROMPT = (
    "You are a helpful tutor explaining concepts to students. "
    "Be clear, concise, and use examples when helpful."
)

DESCRIPTION_SYSTEM_PROMPT = (
    "You are a helpful assistant that writes brief, engaging descriptions for "
    "educational flashcard sets.\n"
    "Write a 1-2 sentence description that explains what the set covers and who "
    "it might be useful for.\n"
    "Be concise and informative. Do not use quotes or special formatting."
)

GROUPING_SYSTEM_PROMPT = """\
You are an expert at organizing educational content. Given a list of flashcard terms/questions, group them into logical categories or topics.

Return ONLY a JSON object with this structure:
{
  "groups": [
    {
      "title": "Category Name",
      "description": "Brief description of this category",
      "cardIndices": [0, 1, 2]
    }
  ]
}

Rules:
- Create 2-6 logical groups based on the content
- Each card index should appear in exactly one group
- Use clear, concise category titles
- Order groups from most foundational concepts to more advanced
- Do not include any markdown formatting, just the raw JSON"""

QUIZ_SYSTEM_PROMPT = (
    "You are a helpful tutor creating quiz questions. Generate a single multiple "
    "choice question to test understanding of the concept.\n"
    "Return ONLY a JSON object with these keys:\n"
    '- "question": the quiz question\n'
    '- "options": array of 4 options (a, b, c, d)\n'
    '- "correct": the letter of the correct answer\n'
    '- "explanation": brief explanation of why the answer is correct\n'
    "Do not include any markdown formatting, just the raw JSON."
)


def flashcards_system_prompt(count: int) -> str:
    return (
        "You are a helpful assistant that creates educational flashcards.\n"
        f"Generate exactly {count} flashcards from the provided content.\n"
        'Return ONLY a JSON array with objects containing "term" and "definition" keys.\n'
        "Make the terms clear questions or key concepts, and definitions should be "
        "concise but complete answers.\n"
        "Do not include any markdown formatting or code blocks, just the raw JSON array."
    )


def build_chat_messages(request: ChatRequest) -> list[ChatMessage]:
    return [message.to_message() for message in request.messages]


def build_flashcards_messages(request: GenerateFlashcardsRequest) -> list[ChatMessage]:
    return [
        ChatMessage(role="system", content=flashcards_system_prompt(request.count)),
        ChatMessage(
            role="user",
            content=f"Create {request.count} flashcards from this content:\n\n{request.text}",
        ),
    ]


def build_explain_messages(request: ExplainRequest) -> list[ChatMessage]:
    question = request.question or DEFAULT_EXPLAIN_QUESTION
    return [
        ChatMessage(role="system", content=EXPLAIN_SYSTEM_PROMPT),
        ChatMessage(
            role="user",
            content=(
                "The flashcard shows:\n"
                f"Term: {request.term}\n"
                f"Definition: {request.definition}\n\n"
                f"Student question: {question}"
            ),
        ),
    ]


def build_description_messages(request: GenerateDescriptionRequest) -> list[ChatMessage]:
    # Only a sample of terms is sent to bound the prompt size
    sample = request.flashcards[:DESCRIPTION_SAMPLE_TERMS]
    terms_summary = ", ".join(card.term for card in sample)
    title = request.title or DEFAULT_SET_TITLE

    return [
        ChatMessage(role="system", content=DESCRIPTION_SYSTEM_PROMPT),
        ChatMessage(
            role="user",
            content=(
                "Write a brief description for this flashcard set:\n"
                f"Title: {title}\n"
                f"Number of cards: {len(request.flashcards)}\n"
                f"Sample terms: {terms_summary}"
            ),
        ),
    ]


def build_grouping_messages(request: GroupFlashcardsRequest) -> list[ChatMessage]:
    terms_list = "\n".join(
        f"{index}: {card.term}" for index, card in enumerate(request.flashcards)
    )
    return [
        ChatMessage(role="system", content=GROUPING_SYSTEM_PROMPT),
        ChatMessage(
            role="user",
            content=f"Group these flashcard terms into logical categories:\n\n{terms_list}",
        ),
    ]


def build_quiz_messages(request: QuizRequest) -> list[ChatMessage]:
    return [
        ChatMessage(role="system", content=QUIZ_SYSTEM_PROMPT),
        ChatMessage(
            role="user",
            content=(
                "Create a quiz question for:\n"
                f"Concept: {request.term}\n"
                f"Answer: {request.definition}"
            ),
        ),
    ]
