"""Outcome models: the single return shape for operations.

Every operation returns an Outcome instead of a bare value-or-None, so callers
have one consistent way to check success without catching exceptions for
expected failures. An Outcome is one of two variants:

  Success[T]: succeeded=True, a success tag (Ok unless stated), optional payload
  Failure[T]: succeeded=False, an ErrorDetail, optional (partial) payload

`succeeded` is a Literal on each variant, so an outcome with both a tag and an
error (or neither) cannot be constructed. All models are frozen; operations
that "change" an outcome return a new one.

Usage:
    def find_customer(customer_id: str) -> Outcome[Customer]:
        row = repo.get(customer_id)
        if row is None:
            return Outcome[Customer].failure(NOT_FOUND, f"No customer '{customer_id}'")
        return Outcome[Customer].success(payload=Customer(**row))

    customer = find_customer("c-1").ensure_payload()  # raises OutcomeError on failure
"""

from __future__ import annotations

import logging
import traceback
from collections.abc import Iterable
from typing import Annotated, Any, Generic, Literal, TypeVar
from uuid import UUID, uuid4

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator

from outcome_kit import vocabulary
from outcome_kit.errors import OutcomeError

logger = logging.getLogger(__name__)

T = TypeVar("T")

SuccessTag = Annotated[str, AfterValidator(vocabulary.validate_success_tag)]
ErrorCategory = Annotated[str, AfterValidator(vocabulary.validate_error_category)]

Messages = str | Iterable[str] | None


def format_trace(cause: BaseException | None) -> str | None:
    """Render the cause's traceback, or None if it was never raised."""
    if cause is None or cause.__traceback__ is None:
        return None
    return "".join(traceback.format_exception(type(cause), cause, cause.__traceback__))


def _join_messages(messages: Messages) -> str | None:
    if messages is None or isinstance(messages, str):
        return messages
    return "\n".join(messages)


# ============================================================================
# Error detail
# ============================================================================


class ErrorDetail(BaseModel):
    """Structured description of a failure.

    The cause is kept for in-process diagnostics only: it is excluded from
    model_dump(), and boundary.error_body() withholds the trace unless
    diagnostics are exposed. The id correlates an external response with the
    internal log line.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    category: ErrorCategory
    message: str | None = None
    cause: BaseException | None = Field(default=None, exclude=True, repr=False)
    trace: str | None = None
    id: UUID = Field(default_factory=uuid4)

    @model_validator(mode="before")
    @classmethod
    def _derive_from_cause(cls, data: Any) -> Any:
        # Only a missing message falls back to the cause; an explicit None stays None.
        if not isinstance(data, dict) or data.get("cause") is None:
            return data
        cause = data["cause"]
        data = dict(data)
        if "message" not in data:
            data["message"] = str(cause) or None
        if data.get("trace") is None:
            data["trace"] = format_trace(cause)
        return data

    def to_exception(self) -> OutcomeError:
        """The raisable form of this failure."""
        return OutcomeError(self.category, self.message, cause=self.cause, error_id=self.id)


def _build_detail(category: str, messages: Messages, cause: BaseException | None) -> ErrorDetail:
    fields: dict[str, Any] = {"category": category, "cause": cause}
    if messages is not None:
        fields["message"] = _join_messages(messages)
    return ErrorDetail(**fields)


def _payload_type(cls: type[Outcome[Any]]) -> Any | None:
    args = cls.__pydantic_generic_metadata__["args"]
    return args[0] if args else None


def _variant(cls: type[Outcome[Any]], variant: type[Outcome[Any]]) -> type[Outcome[Any]]:
    """Parametrize a variant with the payload type of cls, if it has one."""
    payload_type = _payload_type(cls)
    return variant if payload_type is None else variant[payload_type]


# ============================================================================
# Outcome and its variants
# ============================================================================


class Outcome(BaseModel, Generic[T]):
    """Base of Success and Failure. Construct through the factories below."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    succeeded: bool
    success_tag: SuccessTag | None = None
    error: ErrorDetail | None = None
    payload: T | None = None

    @model_validator(mode="after")
    def _check_discriminant(self) -> Outcome[T]:
        if self.succeeded and (self.success_tag is None or self.error is not None):
            raise ValueError("A successful outcome needs a success tag and no error")
        if not self.succeeded and (self.error is None or self.success_tag is not None):
            raise ValueError("A failed outcome needs an error and no success tag")
        return self

    # -------- factories --------

    @classmethod
    def success(cls, tag: str = vocabulary.OK, payload: T | None = None) -> Success[T]:
        """A successful outcome, tagged Ok unless another tag is given."""
        return _variant(cls, Success)(success_tag=tag, payload=payload)

    @classmethod
    def failure(
        cls,
        category: str,
        messages: Messages | BaseException = None,
        cause: BaseException | None = None,
    ) -> Failure[T]:
        """A failed outcome.

        Args:
            category: A registered error category.
            messages: One message, or several joined with newlines in order.
                When omitted, the cause's own message is used. An exception
                passed here (with no cause) is taken as the cause.
            cause: The exception that triggered the failure. Its traceback
                becomes the detail's trace.
        """
        if isinstance(messages, BaseException) and cause is not None:
            raise TypeError("Pass the exception as cause or as messages, not both")
        if isinstance(messages, BaseException) and cause is None:
            messages, cause = None, messages
        return _variant(cls, Failure)(error=_build_detail(category, messages, cause))

    @classmethod
    def from_error(cls, error: ErrorDetail) -> Failure[T]:
        """Wrap an existing ErrorDetail, e.g. to pass a failure on under another payload type."""
        return _variant(cls, Failure)(error=error)

    # -------- fail-fast escape hatches --------

    def ensure_success(self) -> Outcome[T]:
        """Return self if succeeded, otherwise raise the error as OutcomeError."""
        if self.error is not None:
            logger.debug(f"Raising {self.error.category} failure {self.error.id}")
            raise self.error.to_exception()
        return self

    def ensure_payload(self) -> T:
        """Return the payload of a successful outcome, or raise OutcomeError.

        A success without a payload raises too (category Unknown), so callers
        relying on this can never observe None.
        """
        if self.succeeded and self.payload is not None:
            return self.payload
        if self.error is not None:
            logger.debug(f"Raising {self.error.category} failure {self.error.id}")
            raise self.error.to_exception()
        label = self._payload_label() or "Outcome"
        raise OutcomeError(vocabulary.UNKNOWN, f"{label} succeeded without a payload")

    # -------- derived outcomes --------

    def attach_payload(self, value: T) -> Outcome[T]:
        """Return a copy carrying value as its payload. Does not change succeeded."""
        return type(self).model_validate({**dict(self), "payload": value})

    def with_context(self, *labels: str) -> Outcome[T]:
        """Prefix a failure's message with the payload type name and labels.

        `Outcome[Customer]` failing with "timeout" and labels ("get", "id=5")
        becomes "Customer get, id=5, timeout". Successes are returned unchanged.
        """
        if self.error is None:
            return self
        context = " ".join(part for part in (self._payload_label(), ", ".join(labels)) if part)
        message = ", ".join(part for part in (context, self.error.message) if part)
        error = self.error.model_copy(update={"message": message})
        return self.model_copy(update={"error": error})

    def reassign_failure(
        self,
        category: str,
        messages: Messages,
        cause: BaseException | None = None,
    ) -> Failure[T]:
        """Return a failed copy of this outcome, discarding any success tag.

        Exists for build-then-decide call patterns; the receiver is not
        modified. The payload is carried over.
        """
        failure = _variant(type(self), Failure)(
            error=_build_detail(category, messages, cause),
            payload=self.payload,
        )
        logger.debug(f"Reassigned outcome to {category} failure {failure.error.id}")
        return failure

    def _payload_label(self) -> str | None:
        payload_type = _payload_type(type(self))
        if payload_type is None or isinstance(payload_type, TypeVar):
            return None
        return getattr(payload_type, "__name__", None) or str(payload_type)


class Success(Outcome[T], Generic[T]):
    """The operation completed as intended."""

    succeeded: Literal[True] = True
    success_tag: SuccessTag = vocabulary.OK
    error: None = None


class Failure(Outcome[T], Generic[T]):
    """The operation failed; error says how."""

    succeeded: Literal[False] = False
    success_tag: None = None
    error: ErrorDetail
