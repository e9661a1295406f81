"""
Access helpers for raw token entries.

A spectrum token entry is an object with either a 'value' or a 'sets'
mapping of variant name -> entry:

    {"value": "rgb(255, 255, 255)"}
    {"sets": {"light": {"value": "..."}, "dark": {"value": "..."}}}
"""

from __future__ import annotations

from typing import Any

from spectrum_tokens.constants import ErrorMessages
from spectrum_tokens.errors import MalformedTokenEntry


def has_sets(entry: Any) -> bool:
    """Check whether an entry is a variant set."""
    return isinstance(entry, dict) and "sets" in entry


def entry_value(key: str, entry: Any) -> Any:
    """Get the plain 'value' of an entry."""
    if not isinstance(entry, dict):
        raise MalformedTokenEntry(ErrorMessages.NOT_AN_OBJECT.format(key=key))
    if "value" not in entry:
        raise MalformedTokenEntry(ErrorMessages.MISSING_VALUE.format(key=key))
    return entry["value"]


def set_value(key: str, entry: dict[str, Any], name: str) -> Any:
    """Get the 'value' of one variant of a set entry."""
    sets = entry.get("sets")
    if not isinstance(sets, dict) or name not in sets:
        raise MalformedTokenEntry(ErrorMessages.MISSING_SET.format(key=key, name=name))
    return entry_value(key, sets[name])
