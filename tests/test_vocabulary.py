"""Tests for the success tag and error category registries.

Validates:
  - Built-in names and their symbolic values are stable
  - Registration extends (and replaces) entries, and models accept the new names
  - Environment-driven registration
"""

import pytest
from outcome_kit import vocabulary
from outcome_kit.models import Outcome


class TestBuiltins:
    def test_symbolic_names(self):
        assert vocabulary.OK == "Ok"
        assert vocabulary.NOT_FOUND == "NotFound"
        assert vocabulary.UNKNOWN == "Unknown"

    def test_builtin_tags(self):
        assert set(vocabulary.SUCCESS_TAGS) == {
            "Ok",
            "Created",
            "Updated",
            "Upserted",
            "Replaced",
            "Deleted",
        }

    def test_builtin_categories(self):
        assert set(vocabulary.ERROR_CATEGORIES) == {
            "NotFound",
            "WrongArguments",
            "NotValid",
            "NoAuthentication",
            "NotAuthorized",
            "Unknown",
            "ConfigurationError",
            "NetworkError",
        }

    def test_tags_and_categories_do_not_overlap(self):
        assert not set(vocabulary.SUCCESS_TAGS) & set(vocabulary.ERROR_CATEGORIES)

    def test_entries_are_keyed_by_their_name(self):
        for name, info in vocabulary.ERROR_CATEGORIES.items():
            assert info.name == name
        for name, info in vocabulary.SUCCESS_TAGS.items():
            assert info.name == name


class TestRegistration:
    def test_register_error_category(self):
        info = vocabulary.register_error_category("RateLimited", http_status=429, retryable=True)
        assert vocabulary.is_error_category("RateLimited")
        assert vocabulary.category_info("RateLimited") == info
        outcome = Outcome.failure("RateLimited", "slow down")
        assert outcome.error.category == "RateLimited"

    def test_register_success_tag(self):
        vocabulary.register_success_tag("Accepted", http_status=202)
        assert Outcome.success("Accepted").success_tag == "Accepted"
        assert vocabulary.tag_info("Accepted").http_status == 202

    def test_reregistering_replaces_metadata(self):
        vocabulary.register_error_category(vocabulary.NOT_FOUND, http_status=410)
        assert vocabulary.category_info(vocabulary.NOT_FOUND).http_status == 410

    def test_names_are_stripped(self):
        info = vocabulary.register_error_category("  Conflict ", http_status=409)
        assert info.name == "Conflict"
        assert vocabulary.is_error_category("Conflict")

    @pytest.mark.parametrize("bad", ["", "   ", None, 42])
    def test_invalid_names_rejected(self, bad):
        with pytest.raises(ValueError):
            vocabulary.register_error_category(bad)

    def test_unknown_lookup_raises_key_error(self):
        with pytest.raises(KeyError):
            vocabulary.category_info("Nope")

    def test_is_checks_reject_non_strings(self):
        assert not vocabulary.is_error_category(None)
        assert not vocabulary.is_success_tag(3)


class TestRegisterFromEnvironment:
    def test_registers_listed_categories(self, monkeypatch):
        monkeypatch.setenv("OUTCOME_EXTRA_ERROR_CATEGORIES", "RateLimited:429, Conflict:409,Gone")
        registered = vocabulary.register_from_environment()
        assert [info.name for info in registered] == ["RateLimited", "Conflict", "Gone"]
        assert vocabulary.category_info("RateLimited").http_status == 429
        assert vocabulary.category_info("Gone").http_status == 500

    def test_nothing_set_registers_nothing(self, monkeypatch):
        monkeypatch.delenv("OUTCOME_EXTRA_ERROR_CATEGORIES", raising=False)
        before = dict(vocabulary.ERROR_CATEGORIES)
        assert vocabulary.register_from_environment() == []
        assert vocabulary.ERROR_CATEGORIES == before
