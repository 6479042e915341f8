"""Tests for OutcomeError and the outcome ↔ exception round trip.

Validates:
  - to_exception() → to_outcome() is lossless for category and message
  - The cause is preserved by identity and chained as __cause__
  - The failure id survives the round trip
  - Rendering and pickling
"""

import pickle

import pytest
from outcome_kit.errors import OutcomeError
from outcome_kit.models import Failure, Outcome
from outcome_kit.vocabulary import (
    CONFIGURATION_ERROR,
    ERROR_CATEGORIES,
    NO_AUTHENTICATION,
    NOT_FOUND,
    UNKNOWN,
)


class TestRoundTrip:
    @pytest.mark.parametrize("category", sorted(ERROR_CATEGORIES))
    @pytest.mark.parametrize("message", [None, "", "single", "line one\nline two"])
    def test_category_and_message_survive(self, category, message):
        detail = Outcome.failure(category, message).error
        back = detail.to_exception().to_outcome().error
        assert back.category == detail.category
        assert back.message == detail.message

    def test_cause_preserved_by_identity(self, raised_error):
        detail = Outcome.failure(UNKNOWN, "M", raised_error).error
        back = detail.to_exception().to_outcome().error
        assert back.cause is raised_error
        assert back.trace == detail.trace

    def test_id_preserved(self):
        detail = Outcome.failure(NOT_FOUND).error
        assert detail.to_exception().to_outcome().error.id == detail.id

    def test_to_outcome_is_failure(self):
        outcome = OutcomeError(NOT_FOUND, "gone").to_outcome()
        assert isinstance(outcome, Failure)
        assert outcome.succeeded is False


class TestOutcomeError:
    def test_category_only(self):
        err = OutcomeError(NO_AUTHENTICATION)
        assert err.category == NO_AUTHENTICATION
        assert err.message is None
        assert err.cause is None
        assert err.args == (NO_AUTHENTICATION,)
        assert str(err) == "[NoAuthentication]"

    def test_fresh_error_gets_new_id_on_outcome(self):
        err = OutcomeError(CONFIGURATION_ERROR, "missing DSN")
        assert err.error_id is None
        first = err.to_outcome().error.id
        second = err.to_outcome().error.id
        assert first != second

    def test_str_includes_category_and_message(self):
        assert str(OutcomeError(NOT_FOUND, "no such view")) == "[NotFound] no such view"

    def test_cause_is_chained(self, raised_error):
        err = OutcomeError(UNKNOWN, "wrapped", cause=raised_error)
        assert err.__cause__ is raised_error
        assert err.cause is raised_error

    def test_unregistered_category_rejected(self):
        with pytest.raises(ValueError, match="Unknown error category"):
            OutcomeError("Kaboom")

    def test_raised_from_ensure_success_is_catchable_by_category(self):
        try:
            Outcome.failure(NOT_FOUND, "gone").ensure_success()
        except OutcomeError as e:
            assert e.category == NOT_FOUND
        else:
            pytest.fail("ensure_success() did not raise")

    def test_pickles(self):
        err = OutcomeError(NOT_FOUND, "gone", cause=ValueError("x"))
        clone = pickle.loads(pickle.dumps(err))
        assert clone.category == NOT_FOUND
        assert clone.message == "gone"
        assert isinstance(clone.cause, ValueError)
