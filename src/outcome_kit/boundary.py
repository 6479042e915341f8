"""Helpers for the edge of the process, where outcomes become responses.

An API layer needs two things from an outcome: a status code and a body a
client may see. Bodies carry the category's symbolic name and the error id;
cause and trace stay internal unless OUTCOME_EXPOSE_DIAGNOSTICS is set (or the
caller asks explicitly). Whatever is withheld is logged here, keyed by id, so
a client reporting the id can be matched to the full failure.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic_core import to_jsonable_python

from outcome_kit import settings, vocabulary
from outcome_kit.models import ErrorDetail, Outcome

logger = logging.getLogger(__name__)


def http_status(outcome: Outcome[Any]) -> int:
    """The HTTP status registered for the outcome's tag or category."""
    if outcome.error is not None:
        return vocabulary.category_info(outcome.error.category).http_status
    return vocabulary.tag_info(outcome.success_tag).http_status


def error_body(detail: ErrorDetail, expose_diagnostics: bool | None = None) -> dict[str, Any]:
    """Render an ErrorDetail for an external client.

    Args:
        detail: The failure to render.
        expose_diagnostics: Include cause and trace. Defaults to the
            OUTCOME_EXPOSE_DIAGNOSTICS setting.
    """
    if expose_diagnostics is None:
        expose_diagnostics = settings.expose_diagnostics()

    body: dict[str, Any] = detail.model_dump(mode="json", exclude={"trace"})
    if expose_diagnostics:
        body["trace"] = detail.trace
        body["cause"] = _describe_cause(detail.cause)
    elif detail.cause is not None or detail.trace:
        logger.error(
            f"Failure {detail.id} [{detail.category}] {detail.message or ''}\n"
            f"cause: {_describe_cause(detail.cause)}\n{detail.trace or ''}"
        )
    return body


def outcome_body(outcome: Outcome[Any], expose_diagnostics: bool | None = None) -> dict[str, Any]:
    """Render a whole outcome: discriminant, tag or error, and payload."""
    body: dict[str, Any] = {"succeeded": outcome.succeeded}
    if outcome.error is not None:
        body["error"] = error_body(outcome.error, expose_diagnostics)
    else:
        body["tag"] = outcome.success_tag
    if outcome.payload is not None:
        body["payload"] = _render_payload(outcome.payload)
    return body


def _describe_cause(cause: BaseException | None) -> dict[str, str] | None:
    if cause is None:
        return None
    return {"type": type(cause).__name__, "message": str(cause)}


def _render_payload(payload: Any) -> Any:
    # Nested models, UUIDs and datetimes included.
    return to_jsonable_python(payload)
