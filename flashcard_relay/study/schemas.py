from __future__ import annotations

from typing import Annotated, Literal

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StrictInt

from flashcard_relay.core.types import ChatMessage


def _require_text(value: str) -> str:
    if not value.strip():
        raise ValueError("must be a non-empty string")
    return value


NonEmptyStr = Annotated[str, AfterValidator(_require_text)]


class ChatMessageIn(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str

    model_config = ConfigDict(extra="ignore")

    def to_message(self) -> ChatMessage:
        return ChatMessage(role=self.role, content=self.content)


class FlashcardIn(BaseModel):
    term: NonEmptyStr
    definition: str | None = None

    model_config = ConfigDict(extra="ignore")


class ChatRequest(BaseModel):
    messages: list[ChatMessageIn] = Field(min_length=1)
    model: str | None = None

    model_config = ConfigDict(extra="ignore")


class GenerateFlashcardsRequest(BaseModel):
    text: NonEmptyStr
    count: StrictInt = Field(default=10, ge=1, le=100)

    model_config = ConfigDict(extra="ignore")


class ExplainRequest(BaseModel):
    term: NonEmptyStr
    definition: NonEmptyStr
    question: str | None = None

    model_config = ConfigDict(extra="ignore")


class GenerateDescriptionRequest(BaseModel):
    title: str | None = None
    flashcards: list[FlashcardIn] = Field(min_length=1)

    model_config = ConfigDict(extra="ignore")


class GroupFlashcardsRequest(BaseModel):
    flashcards: list[FlashcardIn] = Field(min_length=1)

    model_config = ConfigDict(extra="ignore")


class QuizRequest(BaseModel):
    term: NonEmptyStr
    definition: NonEmptyStr

    model_config = ConfigDict(extra="ignore")
