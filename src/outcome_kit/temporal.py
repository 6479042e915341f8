"""Temporal boundary: outcomes in and out of ApplicationError.

Activities normally return outcomes as values. When a failure should fail the
activity instead (so Temporal records it, and retries it if the category is
retryable), convert it to an ApplicationError. The category becomes the error
`type`, which is what retry policies match on via non_retryable_error_types.

On the workflow side, outcome_from_application_error() turns the caught error
(ActivityError wrappers included) back into a Failure with the original
category, message and id.
"""

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from temporalio.exceptions import ApplicationError, FailureError

from outcome_kit import vocabulary
from outcome_kit.models import ErrorDetail, Failure, Outcome

logger = logging.getLogger(__name__)


def to_application_error(source: Outcome[Any] | ErrorDetail) -> ApplicationError:
    """Build the ApplicationError for a failed outcome (or its ErrorDetail).

    Raises:
        ValueError: source is a successful outcome.
    """
    detail = source if isinstance(source, ErrorDetail) else source.error
    if detail is None:
        raise ValueError("Only failed outcomes convert to ApplicationError")

    error = ApplicationError(
        detail.message if detail.message is not None else detail.category,
        {"error_id": str(detail.id), "message": detail.message},
        type=detail.category,
        non_retryable=not vocabulary.category_info(detail.category).retryable,
    )
    if detail.cause is not None:
        error.__cause__ = detail.cause
    return error


def ensure_activity_success(outcome: Outcome[Any]) -> Outcome[Any]:
    """Activity-side ensure_success(): raise ApplicationError on failure."""
    if outcome.error is not None:
        raise to_application_error(outcome)
    return outcome


def outcome_from_application_error(error: FailureError) -> Failure[Any]:
    """Convert a Temporal failure back into a Failure.

    ActivityError/ChildWorkflowError wrappers are unwrapped to the
    ApplicationError they carry. Types that are not registered categories
    become Unknown, keeping the upstream type in the message.
    """
    while not isinstance(error, ApplicationError) and isinstance(error.cause, FailureError):
        error = error.cause
    if not isinstance(error, ApplicationError):
        return Outcome.failure(vocabulary.UNKNOWN, error.message, cause=error)

    extras = error.details[0] if error.details and isinstance(error.details[0], dict) else {}
    message = extras.get("message") if "message" in extras else error.message
    category = error.type or vocabulary.UNKNOWN
    if not vocabulary.is_error_category(category):
        logger.warning(f"Unregistered ApplicationError type '{category}' mapped to Unknown")
        message = f"{category}: {message}" if message else category
        category = vocabulary.UNKNOWN

    fields: dict[str, Any] = {
        "category": category,
        "message": message,
        # our own errors chain the original cause; foreign ones are the cause
        "cause": error.__cause__ if extras else error,
    }
    if extras.get("error_id"):
        fields["id"] = UUID(extras["error_id"])
    return Failure(error=ErrorDetail(**fields))
