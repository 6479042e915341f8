"""Environment-driven settings.

Two knobs, both read at call time so tests (and long-running workers) see
changes without re-importing:

- OUTCOME_EXPOSE_DIAGNOSTICS: when truthy, boundary helpers include cause and
  trace in externally-visible error bodies. Off by default: traces leak
  internals, and production responses carry only the error id.

- OUTCOME_EXTRA_ERROR_CATEGORIES: deployment-specific error categories, as
  comma-separated `Name` or `Name:status` entries, e.g.
  `RateLimited:429,Conflict:409`. Registered by
  vocabulary.register_from_environment().
"""

import os

_TRUTHY = {"1", "true", "yes", "on"}


def expose_diagnostics() -> bool:
    """Whether cause/trace may appear in externally-visible error bodies."""
    return os.environ.get("OUTCOME_EXPOSE_DIAGNOSTICS", "").strip().lower() in _TRUTHY


def extra_error_categories() -> list[tuple[str, int]]:
    """Parse OUTCOME_EXTRA_ERROR_CATEGORIES into (name, http_status) pairs.

    Entries without a status default to 500.

    Raises:
        ValueError: An entry has an empty name or a non-numeric status.
    """
    raw = os.environ.get("OUTCOME_EXTRA_ERROR_CATEGORIES", "")
    entries: list[tuple[str, int]] = []
    for chunk in raw.split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        name, _, status = chunk.partition(":")
        name = name.strip()
        if not name:
            raise ValueError(f"OUTCOME_EXTRA_ERROR_CATEGORIES has an entry without a name: '{chunk}'")
        status = status.strip()
        if status and not status.isdigit():
            raise ValueError(
                f"OUTCOME_EXTRA_ERROR_CATEGORIES entry '{chunk}' has a non-numeric status"
            )
        entries.append((name, int(status) if status else 500))
    return entries
