"""Flag token classification helpers."""

from __future__ import annotations

# Sentinel index returned by lookups that find nothing.
NOT_FOUND = -1

FLAG_PREFIX = "-"


def is_flag(token: str) -> bool:
    """Return True if token begins with one or more dashes."""
    return token.startswith(FLAG_PREFIX)


def flag_name(token: str) -> str:
    """Return token with all leading dashes stripped.

    Single- and double-dash forms share one name: ``-v`` and ``--v`` both give ``v``.
    """
    return token.lstrip(FLAG_PREFIX)


def split_assignment(name: str) -> tuple[str, str] | None:
    """Split a stripped flag name of the form ``key=value``.

    Returns None when there is no ``=`` or the key would be empty.
    Only the first ``=`` separates; later ones belong to the value.
    """
    key, sep, value = name.partition("=")
    if not sep or not key:
        return None
    return key, value
