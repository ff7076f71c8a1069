from __future__ import annotations

from typing import Any

from fastapi import APIRouter
from starlette.exceptions import HTTPException as StarletteHTTPException

from flashcard_relay.dependencies import Gateway
from flashcard_relay.study.schemas import (
    ChatRequest,
    ExplainRequest,
    GenerateDescriptionRequest,
    GenerateFlashcardsRequest,
    GroupFlashcardsRequest,
    QuizRequest,
)
from flashcard_relay.study.service import (
    CHAT,
    EXPLAIN,
    GENERATE_DESCRIPTION,
    GENERATE_FLASHCARDS,
    GROUP_FLASHCARDS,
    QUIZ,
    TASKS,
    run_task,
)

router = APIRouter(prefix="/api", tags=["study"])


@router.post("/chat")
async def chat(payload: ChatRequest, gateway: Gateway) -> dict[str, Any]:
    return await run_task(CHAT, payload, gateway)


@router.post("/generate-flashcards")
async def generate_flashcards(
    payload: GenerateFlashcardsRequest,
    gateway: Gateway,
) -> dict[str, Any]:
    return await run_task(GENERATE_FLASHCARDS, payload, gateway)


@router.post("/explain")
async def explain(payload: ExplainRequest, gateway: Gateway) -> dict[str, Any]:
    return await run_task(EXPLAIN, payload, gateway)


@router.post("/generate-description")
async def generate_description(
    payload: GenerateDescriptionRequest,
    gateway: Gateway,
) -> dict[str, Any]:
    return await run_task(GENERATE_DESCRIPTION, payload, gateway)


@router.post("/group-flashcards")
async def group_flashcards(
    payload: GroupFlashcardsRequest,
    gateway: Gateway,
) -> dict[str, Any]:
    return await run_task(GROUP_FLASHCARDS, payload, gateway)


@router.post("/quiz")
async def quiz(payload: QuizRequest, gateway: Gateway) -> dict[str, Any]:
    return await run_task(QUIZ, payload, gateway)


async def method_not_allowed() -> None:
    raise StarletteHTTPException(status_code=405, headers={"Allow": "POST"})


# Answer other methods here so a frontend mounted at "/" never sees API paths
for _task_name in TASKS:
    router.add_api_route(
        f"/{_task_name}",
        method_not_allowed,
        methods=["GET", "HEAD", "PUT", "PATCH", "DELETE"],
        include_in_schema=False,
    )
