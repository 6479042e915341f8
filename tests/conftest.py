"""Shared test fixtures for outcome-kit tests.

Provides:
  - A Customer payload model (the running example in the docs)
  - Exceptions that were actually raised, so they carry a traceback
  - A registry snapshot that undoes vocabulary registrations after each test
"""

from __future__ import annotations

import pytest
from outcome_kit import vocabulary
from pydantic import BaseModel


class Customer(BaseModel):
    """A payload type for Outcome[Customer]."""

    customer_id: str
    name: str


def raise_and_catch(exc: BaseException) -> BaseException:
    """Raise exc and return it, so __traceback__ is populated."""
    try:
        raise exc
    except BaseException as caught:
        return caught


@pytest.fixture
def customer() -> Customer:
    return Customer(customer_id="c-1", name="Ada Lovelace")


@pytest.fixture
def raised_error() -> BaseException:
    """A RuntimeError with message 'C' and a real traceback."""
    return raise_and_catch(RuntimeError("C"))


@pytest.fixture(autouse=True)
def restore_vocabulary():
    """Tests may register tags/categories; put the registries back afterwards."""
    tags = dict(vocabulary.SUCCESS_TAGS)
    categories = dict(vocabulary.ERROR_CATEGORIES)
    yield
    vocabulary.SUCCESS_TAGS.clear()
    vocabulary.SUCCESS_TAGS.update(tags)
    vocabulary.ERROR_CATEGORIES.clear()
    vocabulary.ERROR_CATEGORIES.update(categories)
