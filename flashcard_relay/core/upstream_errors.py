from __future__ import annotations

import openai

from .errors import RelayError, UpstreamError


def map_upstream_error(exc: Exception) -> RelayError:
    """Map completion SDK exceptions to relay errors."""

    if isinstance(exc, RelayError):
        return exc

    if isinstance(exc, openai.AuthenticationError):
        return _upstream(exc.message, code="authentication_error")

    if isinstance(exc, openai.PermissionDeniedError):
        return _upstream(exc.message, code="permission_denied")

    if isinstance(exc, openai.RateLimitError):
        return _upstream(exc.message, code="rate_limited")

    if isinstance(exc, openai.BadRequestError):
        return _upstream(exc.message, code="upstream_bad_request")

    if isinstance(exc, openai.NotFoundError):
        return _upstream(exc.message, code="model_not_found")

    if isinstance(exc, openai.APIStatusError):
        return _upstream(exc.message, code=f"upstream_status_{exc.status_code}")

    if isinstance(exc, openai.APITimeoutError):
        return _upstream(str(exc), code="timeout")

    if isinstance(exc, openai.APIConnectionError):
        return _upstream(str(exc), code="connection_error")

    if isinstance(exc, openai.OpenAIError):
        return _upstream(str(exc), code="upstream_error")

    return _upstream(f"Unexpected server error: {exc}", code="internal_error")


def _upstream(message: str, *, code: str) -> UpstreamError:
    return UpstreamError(status_code=500, message=message, code=code)
