"""
Key ordering within a token file.

Keys are split into (prefix, numeric suffix) so numbered variants sort
numerically: gray, gray-2, gray-10. This only fixes the discovery order
fed to the topological sort; it is a deterministic tie-break, not the
final output order.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from functools import cmp_to_key

NUMBERED_KEY_PATTERN = re.compile(r"^(.+)-(\d+)$")


def split_key(key: str) -> tuple[str, int]:
    """
    Split a key into its prefix and numeric suffix.

    Keys without a '-<digits>' suffix get -1, so 'gray' sorts before 'gray-0'.
    """
    match = NUMBERED_KEY_PATTERN.match(key)
    if match is None:
        return key, -1
    return match.group(1), int(match.group(2))


def cmpkeys(a: str, b: str) -> int:
    """
    Compare two token keys.

    Returns:
        -1, 0 or 1: prefix compared lexicographically, then suffix numerically
    """
    a_prefix, a_num = split_key(a)
    b_prefix, b_num = split_key(b)
    if a_prefix != b_prefix:
        return -1 if a_prefix < b_prefix else 1
    if a_num != b_num:
        return -1 if a_num < b_num else 1
    return 0


def sort_keys(keys: Iterable[str]) -> list[str]:
    """Sort keys with cmpkeys."""
    return sorted(keys, key=cmp_to_key(cmpkeys))
