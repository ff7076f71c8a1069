from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal

DEFAULT_MODEL_ID = "gpt-4o-mini"

Role = Literal["system", "user", "assistant"]


@dataclass(slots=True, frozen=True)
class ChatMessage:
    role: Role
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass(slots=True, frozen=True)
class Usage:
    prompt_tokens: int
    completion_tokens: int

    @property
    def total_tokens(self) -> int:
        return self.prompt_tokens + self.completion_tokens

    def to_dict(self) -> dict[str, int]:
        return {
            "prompt_tokens": self.prompt_tokens,
            "completion_tokens": self.completion_tokens,
            "total_tokens": self.total_tokens,
        }


@dataclass(slots=True)
class CompletionRequest:
    model: str | None
    messages: list[ChatMessage]
    temperature: float
    max_tokens: int | None = None


@dataclass(slots=True)
class CompletionResult:
    text: str
    usage: Usage
    model: str


class JSONShape(str, Enum):
    ARRAY = "array"
    OBJECT = "object"

    def matches(self, value: Any) -> bool:
        if self is JSONShape.ARRAY:
            return isinstance(value, list)
        return isinstance(value, dict)
