from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from flashcard_relay.config import Settings
from flashcard_relay.core.types import CompletionRequest, CompletionResult, Usage
from flashcard_relay.main import create_app


class FakeGateway:
    """Stands in for the completion gateway and records every request."""

    def __init__(self, text: str = "stub completion") -> None:
        self.text = text
        self.error: Exception | None = None
        self.requests: list[CompletionRequest] = []
        self.default_model = "gpt-4o-mini"

    async def complete(self, request: CompletionRequest) -> CompletionResult:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return CompletionResult(
            text=self.text,
            usage=Usage(prompt_tokens=12, completion_tokens=5),
            model=request.model or self.default_model,
        )

    async def aclose(self) -> None:
        return None

    @property
    def last_request(self) -> CompletionRequest:
        assert self.requests, "gateway was not called"
        return self.requests[-1]


@pytest.fixture()
def settings() -> Settings:
    return Settings(OPENAI_API_KEY="test-key", _env_file=None)


@pytest.fixture()
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture()
def client(settings: Settings, gateway: FakeGateway) -> TestClient:
    return TestClient(create_app(settings=settings, gateway=gateway))
