"""Per-endpoint function handlers.

Each content endpoint can also be deployed as a standalone function that
receives the request method and the decoded JSON body and returns a status
code with an envelope. These handlers share validation, prompting and
normalization with the FastAPI routes.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable

from pydantic import ValidationError

from flashcard_relay.core.completion import CompletionGateway
from flashcard_relay.core.errors import RelayError, validation_failure_from_errors

from .service import TASKS, run_task

FunctionHandler = Callable[[str, Any], Awaitable[tuple[int, dict[str, Any]]]]

METHOD_NOT_ALLOWED = {"error": "Method not allowed"}


async def handle(
    task_name: str,
    method: str,
    body: Any,
    gateway: CompletionGateway,
) -> tuple[int, dict[str, Any]]:
    task = TASKS.get(task_name)
    if task is None:
        return 404, {"error": f"Unknown task '{task_name}'"}

    if method.upper() != "POST":
        return 405, dict(METHOD_NOT_ALLOWED)

    try:
        request = task.request_model.model_validate(body if body is not None else {})
    except ValidationError as exc:
        failure = validation_failure_from_errors(exc.errors())
        return failure.status_code, failure.to_envelope()

    try:
        return 200, await run_task(task, request, gateway)
    except RelayError as exc:
        return exc.status_code, exc.to_envelope()


def make_handler(task_name: str, gateway: CompletionGateway) -> FunctionHandler:
    if task_name not in TASKS:
        raise KeyError(f"Unknown task '{task_name}'")

    async def handler(method: str, body: Any) -> tuple[int, dict[str, Any]]:
        return await handle(task_name, method, body, gateway)

    return handler
