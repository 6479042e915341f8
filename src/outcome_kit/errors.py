"""OutcomeError: a failed outcome in raisable form.

Code that prefers exceptions (fail-fast call sites, web handlers, Temporal
activities) raises OutcomeError; code that prefers values converts it back
with to_outcome(). The pair is lossless for category and message, keeps the
cause by identity, and keeps the failure id so both channels log the same id.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from uuid import UUID

from outcome_kit import vocabulary

if TYPE_CHECKING:
    from outcome_kit.models import Failure


class OutcomeError(Exception):
    """Raised by ensure_success()/ensure_payload() on a failed outcome.

    The underlying cause lives in ``__cause__``, so tracebacks show it as
    "The above exception was the direct cause of ...".
    """

    def __init__(
        self,
        category: str,
        message: str | None = None,
        cause: BaseException | None = None,
        error_id: UUID | None = None,
    ) -> None:
        vocabulary.validate_error_category(category)
        super().__init__(message if message is not None else category)
        self.category = category
        self.message = message
        self.error_id = error_id
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def __str__(self) -> str:
        if self.message:
            return f"[{self.category}] {self.message}"
        return f"[{self.category}]"

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.category, self.message, self.cause, self.error_id))

    def to_outcome(self) -> Failure[Any]:
        """Convert back into a failed outcome carrying the same error."""
        from outcome_kit.models import ErrorDetail, Failure

        fields: dict[str, Any] = {
            "category": self.category,
            "message": self.message,
            "cause": self.cause,
        }
        if self.error_id is not None:
            fields["id"] = self.error_id
        return Failure(error=ErrorDetail(**fields))
