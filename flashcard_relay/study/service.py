from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from pydantic import BaseModel

from flashcard_relay.core.completion import CompletionGateway
from flashcard_relay.core.errors import NormalizationError, RelayError, TaskFailedError
from flashcard_relay.core.logging import get_logger
from flashcard_relay.core.normalization import extract_json
from flashcard_relay.core.types import (
    ChatMessage,
    CompletionRequest,
    CompletionResult,
    JSONShape,
)
from flashcard_relay.core.upstream_errors import map_upstream_error

from . import prompts
from .schemas import (
    ChatRequest,
    ExplainRequest,
    GenerateDescriptionRequest,
    GenerateFlashcardsRequest,
    GroupFlashcardsRequest,
    QuizRequest,
)

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class StudyTask:
    name: str
    request_model: type[BaseModel]
    build_messages: Callable[[Any], list[ChatMessage]]
    render: Callable[[CompletionResult], Any]
    result_key: str
    temperature: float
    failure_message: str
    max_tokens: int | None = None


def _assistant_message(result: CompletionResult) -> dict[str, str]:
    return {"role": "assistant", "content": result.text}


def _raw_text(result: CompletionResult) -> str:
    return result.text


def _trimmed_text(result: CompletionResult) -> str:
    return result.text.strip()


def _json_array(result: CompletionResult) -> Any:
    return extract_json(result.text, JSONShape.ARRAY)


def _json_object(result: CompletionResult) -> Any:
    return extract_json(result.text, JSONShape.OBJECT)


CHAT = StudyTask(
    name="chat",
    request_model=ChatRequest,
    build_messages=prompts.build_chat_messages,
    render=_assistant_message,
    result_key="message",
    temperature=0.7,
    failure_message="Failed to get AI response",
)

GENERATE_FLASHCARDS = StudyTask(
    name="generate-flashcards",
    request_model=GenerateFlashcardsRequest,
    build_messages=prompts.build_flashcards_messages,
    render=_json_array,
    result_key="flashcards",
    temperature=0.7,
    failure_message="Failed to generate flashcards",
)

EXPLAIN = StudyTask(
    name="explain",
    request_model=ExplainRequest,
    build_messages=prompts.build_explain_messages,
    render=_raw_text,
    result_key="explanation",
    temperature=0.7,
    failure_message="Failed to get explanation",
)

GENERATE_DESCRIPTION = StudyTask(
    name="generate-description",
    request_model=GenerateDescriptionRequest,
    build_messages=prompts.build_description_messages,
    render=_trimmed_text,
    result_key="description",
    temperature=0.7,
    max_tokens=100,
    failure_message="Failed to generate description",
)

GROUP_FLASHCARDS = StudyTask(
    name="group-flashcards",
    request_model=GroupFlashcardsRequest,
    build_messages=prompts.build_grouping_messages,
    render=_json_object,
    result_key="grouping",
    temperature=0.5,
    failure_message="Failed to group flashcards",
)

QUIZ = StudyTask(
    name="quiz",
    request_model=QuizRequest,
    build_messages=prompts.build_quiz_messages,
    render=_json_object,
    result_key="quiz",
    temperature=0.8,
    failure_message="Failed to generate quiz",
)

TASKS: dict[str, StudyTask] = {
    task.name: task
    for task in (
        CHAT,
        GENERATE_FLASHCARDS,
        EXPLAIN,
        GENERATE_DESCRIPTION,
        GROUP_FLASHCARDS,
        QUIZ,
    )
}


async def run_task(
    task: StudyTask,
    request: BaseModel,
    gateway: CompletionGateway,
) -> dict[str, Any]:
    """Run one validated request through the gateway and shape the envelope."""

    completion_request = CompletionRequest(
        # Only chat lets the caller pick a model
        model=getattr(request, "model", None),
        messages=task.build_messages(request),
        temperature=task.temperature,
        max_tokens=task.max_tokens,
    )

    try:
        result = await gateway.complete(completion_request)
        payload = task.render(result)
    except NormalizationError as exc:
        logger.error("%s: %s (%s)", task.name, exc.message, exc.details)
        raise _task_failed(task, exc) from exc
    except Exception as exc:
        mapped = map_upstream_error(exc)
        logger.error("%s: completion failed: %s", task.name, mapped, exc_info=exc)
        raise _task_failed(task, mapped) from exc

    logger.info(
        "%s: model=%s prompt_tokens=%d completion_tokens=%d",
        task.name,
        result.model,
        result.usage.prompt_tokens,
        result.usage.completion_tokens,
    )

    return {
        "success": True,
        task.result_key: payload,
        "usage": result.usage.to_dict(),
    }


def _task_failed(task: StudyTask, cause: RelayError) -> TaskFailedError:
    return TaskFailedError(
        status_code=cause.status_code,
        message=task.failure_message,
        details=cause.message,
        task=task.name,
    )
