"""Turn exceptions into categorized failures.

Library code raises; the edge of a component often wants a value instead:
expected failures become outcomes, and the caller decides what to do with
them. outcome_from_exception() picks the category from the exception type,
and capture() applies it to a whole function:

    @capture()
    async def fetch_profile(client: httpx.AsyncClient, user_id: str) -> Profile:
        response = await client.get(f"/users/{user_id}")
        response.raise_for_status()
        return Profile.model_validate(response.json())

    outcome = await fetch_profile(client, "u-1")  # Success[Profile] or Failure, never raises

A 404 becomes NotFound, a dropped connection NetworkError, a payload that
fails validation NotValid.
"""

from __future__ import annotations

import functools
import inspect
import logging
from collections.abc import Callable
from typing import Any

import httpx
import pydantic
from temporalio.exceptions import FailureError

from outcome_kit import vocabulary
from outcome_kit.errors import OutcomeError
from outcome_kit.models import Failure, Outcome
from outcome_kit.temporal import outcome_from_application_error

logger = logging.getLogger(__name__)

# Checked in order: subclasses before their bases (pydantic's ValidationError is
# a ValueError; FileNotFoundError, PermissionError and ConnectionError are OSErrors).
_BUILTIN_CATEGORIES: list[tuple[type[BaseException], str]] = [
    (pydantic.ValidationError, vocabulary.NOT_VALID),
    (PermissionError, vocabulary.NOT_AUTHORIZED),
    (FileNotFoundError, vocabulary.NOT_FOUND),
    (LookupError, vocabulary.NOT_FOUND),
    (ConnectionError, vocabulary.NETWORK_ERROR),
    (TimeoutError, vocabulary.NETWORK_ERROR),
    (ValueError, vocabulary.WRONG_ARGUMENTS),
    (TypeError, vocabulary.WRONG_ARGUMENTS),
]


def category_for_status(status_code: int) -> str | None:
    """The first registered error category whose HTTP status matches."""
    # Snapshot: a registration on another thread must not break the scan.
    for info in vocabulary.ERROR_CATEGORIES.copy().values():
        if info.http_status == status_code and info.http_status != 500:
            return info.name
    if status_code >= 500:
        return vocabulary.NETWORK_ERROR
    return None


def category_for_exception(exc: BaseException, default: str = vocabulary.UNKNOWN) -> str:
    """Pick the error category for an exception, falling back to default."""
    if isinstance(exc, OutcomeError):
        return exc.category
    if isinstance(exc, httpx.HTTPStatusError):
        return category_for_status(exc.response.status_code) or default
    if isinstance(exc, httpx.TransportError):
        return vocabulary.NETWORK_ERROR
    for exc_type, category in _BUILTIN_CATEGORIES:
        if isinstance(exc, exc_type):
            return category
    return default


def outcome_from_exception(
    exc: BaseException,
    default: str = vocabulary.UNKNOWN,
    message: str | None = None,
) -> Failure[Any]:
    """Convert an exception into a Failure.

    OutcomeError and Temporal failures convert losslessly (same category,
    message and id). Everything else is classified by type, with the
    exception as the cause; its message is used unless message is given.
    """
    if isinstance(exc, OutcomeError):
        return exc.to_outcome()
    if isinstance(exc, FailureError):
        return outcome_from_application_error(exc)
    category = category_for_exception(exc, default)
    return Outcome.failure(category, message, cause=exc)


def capture(category: str | None = None) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorate a function so it returns an Outcome instead of raising.

    Returned Outcomes pass through untouched; any other return value becomes
    the payload of a Success. An Exception becomes a Failure: category is
    used for exceptions that do not classify to anything more specific.
    BaseExceptions such as KeyboardInterrupt and CancelledError propagate.
    """
    default = category or vocabulary.UNKNOWN
    vocabulary.validate_error_category(default)

    def _wrap_value(value: Any) -> Outcome[Any]:
        if isinstance(value, Outcome):
            return value
        return Outcome.success(payload=value)

    def _wrap_error(func: Callable[..., Any], exc: Exception) -> Failure[Any]:
        failure = outcome_from_exception(exc, default)
        logger.info(
            f"{func.__qualname__} failed with {failure.error.category} "
            f"({failure.error.id}): {exc!r}"
        )
        return failure

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Outcome[Any]:
                try:
                    return _wrap_value(await func(*args, **kwargs))
                except Exception as e:
                    return _wrap_error(func, e)

            return async_wrapper

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Outcome[Any]:
            try:
                return _wrap_value(func(*args, **kwargs))
            except Exception as e:
                return _wrap_error(func, e)

        return wrapper

    return decorator
