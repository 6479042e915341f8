"""Success tags and error categories: the registered vocabulary of outcomes.

Tags and categories are plain strings, and each string is its own stable
symbolic name. Serializers render the name, so clients depend on "NotFound",
never on an ordinal that shifts when someone inserts a new value.

The sets are open per deployment: the host application registers its own
names at start-up (in code, or via OUTCOME_EXTRA_ERROR_CATEGORIES). Models
validate against the registry, so a typo in a category fails at construction
instead of leaking an unknown name to clients.

Each entry also carries the metadata the boundaries need:

- http_status: what an API layer returns for this outcome
- retryable: whether a Temporal activity failing with this category may be retried
"""

from __future__ import annotations

from dataclasses import dataclass

from outcome_kit import settings

# Success tags
OK = "Ok"
CREATED = "Created"
UPDATED = "Updated"
UPSERTED = "Upserted"
REPLACED = "Replaced"
DELETED = "Deleted"

# Error categories: caller related
NOT_FOUND = "NotFound"
WRONG_ARGUMENTS = "WrongArguments"
NOT_VALID = "NotValid"

# Error categories: auth
NO_AUTHENTICATION = "NoAuthentication"
NOT_AUTHORIZED = "NotAuthorized"

# Error categories: logic related
UNKNOWN = "Unknown"
CONFIGURATION_ERROR = "ConfigurationError"
NETWORK_ERROR = "NetworkError"


@dataclass(frozen=True)
class TagInfo:
    """Metadata for a registered success tag."""

    name: str
    http_status: int = 200


@dataclass(frozen=True)
class CategoryInfo:
    """Metadata for a registered error category."""

    name: str
    http_status: int = 500
    retryable: bool = False


SUCCESS_TAGS: dict[str, TagInfo] = {
    OK: TagInfo(OK),
    CREATED: TagInfo(CREATED, http_status=201),
    UPDATED: TagInfo(UPDATED),
    UPSERTED: TagInfo(UPSERTED),
    REPLACED: TagInfo(REPLACED),
    DELETED: TagInfo(DELETED),
}

ERROR_CATEGORIES: dict[str, CategoryInfo] = {
    NOT_FOUND: CategoryInfo(NOT_FOUND, http_status=404),
    WRONG_ARGUMENTS: CategoryInfo(WRONG_ARGUMENTS, http_status=400),
    NOT_VALID: CategoryInfo(NOT_VALID, http_status=422),
    NO_AUTHENTICATION: CategoryInfo(NO_AUTHENTICATION, http_status=401),
    NOT_AUTHORIZED: CategoryInfo(NOT_AUTHORIZED, http_status=403),
    UNKNOWN: CategoryInfo(UNKNOWN, http_status=500, retryable=True),
    CONFIGURATION_ERROR: CategoryInfo(CONFIGURATION_ERROR, http_status=500),
    NETWORK_ERROR: CategoryInfo(NETWORK_ERROR, http_status=503, retryable=True),
}


def _check_name(name: str) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValueError(f"Vocabulary names must be non-empty strings, got {name!r}")
    return name.strip()


def register_success_tag(name: str, http_status: int = 200) -> TagInfo:
    """Add (or replace) a success tag. Returns the stored entry."""
    name = _check_name(name)
    info = TagInfo(name, http_status=http_status)
    SUCCESS_TAGS[name] = info
    return info


def register_error_category(
    name: str,
    http_status: int = 500,
    retryable: bool = False,
) -> CategoryInfo:
    """Add (or replace) an error category. Returns the stored entry."""
    name = _check_name(name)
    info = CategoryInfo(name, http_status=http_status, retryable=retryable)
    ERROR_CATEGORIES[name] = info
    return info


def register_from_environment() -> list[CategoryInfo]:
    """Register the extra categories named in OUTCOME_EXTRA_ERROR_CATEGORIES.

    Meant to be called once at start-up by the host application.
    """
    return [
        register_error_category(name, http_status=status)
        for name, status in settings.extra_error_categories()
    ]


def is_success_tag(name: object) -> bool:
    return isinstance(name, str) and name in SUCCESS_TAGS


def is_error_category(name: object) -> bool:
    return isinstance(name, str) and name in ERROR_CATEGORIES


def tag_info(name: str) -> TagInfo:
    """Look up a success tag. Raises KeyError for unregistered names."""
    return SUCCESS_TAGS[name]


def category_info(name: str) -> CategoryInfo:
    """Look up an error category. Raises KeyError for unregistered names."""
    return ERROR_CATEGORIES[name]


def validate_success_tag(name: str) -> str:
    """Pydantic validator: reject tags that were never registered."""
    if not is_success_tag(name):
        known = ", ".join(sorted(SUCCESS_TAGS))
        raise ValueError(f"Unknown success tag '{name}'. Registered: {known}")
    return name


def validate_error_category(name: str) -> str:
    """Pydantic validator: reject categories that were never registered."""
    if not is_error_category(name):
        known = ", ".join(sorted(ERROR_CATEGORIES))
        raise ValueError(f"Unknown error category '{name}'. Registered: {known}")
    return name
