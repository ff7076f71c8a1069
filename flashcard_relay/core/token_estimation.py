from __future__ import annotations

import math
from typing import Iterable

from .types import ChatMessage


def estimate_tokens(text: str) -> int:
    if not text:
        return 0

    return max(1, math.ceil(len(text) / 4))


def estimate_prompt_tokens(messages: Iterable[ChatMessage]) -> int:
    return estimate_tokens("\n".join(message.content for message in messages if message.content))
