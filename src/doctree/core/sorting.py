"""Ordering of directory children.

Authors steer the navigation order through naming conventions:

- ``+name`` / ``+2_name`` pull an entry to the front
- ``index`` / ``_index`` follow right after the pulled entries
- ``10_name`` places an entry by number
- plain names are ordered alphabetically
- ``-name`` / ``-1_name`` push an entry to the back

Numbered entries are grouped by magnitude (``2_y`` before ``10_x``), every
group is ordered case-insensitively by name and equal names keep their
original relative order.
"""

import logging
import re
from collections.abc import Iterable
from enum import IntEnum
from typing import Protocol, TypeVar

logger = logging.getLogger(__name__)

INDEX_NAMES = frozenset({"index", "_index"})

_DIGITS = frozenset("0123456789")
_MAGNITUDE_PATTERN = re.compile(r"[-+]?([0-9]+)")


class Bucket(IntEnum):
    """Naming-convention classes, valued by their position in the final order."""

    UP_NUMERIC = 0
    UP = 1
    INDEX = 2
    NUMERIC = 3
    NORMAL = 4
    DOWN_NUMERIC = 5
    DOWN = 6


NUMERIC_BUCKETS = frozenset({Bucket.UP_NUMERIC, Bucket.NUMERIC, Bucket.DOWN_NUMERIC})


class Named(Protocol):
    """Anything carrying the name and title of a tree entry."""

    @property
    def name(self) -> str: ...

    @property
    def title(self) -> str: ...


E = TypeVar("E", bound=Named)


def display_name(key: str, entry: Named) -> str:
    """Return the name an entry is ordered by.

    Falls back from the entry name to its title and then to its key, since
    generated pages may have no name at all.

    Args:
        key: Key of the entry in its directory
        entry: The entry itself

    Returns:
        The first non-empty candidate, or an empty string
    """
    return entry.name or entry.title or key


def classify(name: str) -> Bucket:
    """Classify a display name into its bucket.

    Args:
        name: Non-empty display name

    Returns:
        Bucket the name belongs to
    """
    if name in INDEX_NAMES:
        return Bucket.INDEX

    sign = name[0]
    if sign == "-":
        return Bucket.DOWN_NUMERIC if name[1:2] in _DIGITS else Bucket.DOWN
    if sign == "+":
        return Bucket.UP_NUMERIC if name[1:2] in _DIGITS else Bucket.UP
    if sign in _DIGITS:
        return Bucket.NUMERIC
    return Bucket.NORMAL


def magnitude(name: str) -> int:
    """Extract the ordering number of a numbered name.

    The number is read from the segment before the first underscore, with
    the leading sign dropped: ``"+2_bar"`` gives 2, ``"10_intro"`` gives 10.

    Args:
        name: Display name classified into a numeric bucket

    Returns:
        Unsigned magnitude, 0 when the name carries no number
    """
    head = name.split("_", 1)[0]
    match = _MAGNITUDE_PATTERN.match(head)
    if match is None:
        return 0
    return int(match.group(1))


def sort_key(name: str) -> tuple[int, int, str]:
    """Build the sort key for a display name."""
    bucket = classify(name)
    number = magnitude(name) if bucket in NUMERIC_BUCKETS else 0
    return (bucket, number, name.lower())


def order_entries(children: Iterable[tuple[str, E]]) -> list[tuple[str, E]]:
    """Order keyed entries by naming convention.

    Entries without any usable name are dropped from the result.

    Args:
        children: ``(key, entry)`` pairs in their current order

    Returns:
        ``(key, entry)`` pairs in navigation order
    """
    keyed: list[tuple[tuple[int, int, str], str, E]] = []
    for key, entry in children:
        name = display_name(key, entry)
        if not name:
            logger.warning(
                f"Dropping unnamed entry {entry!r} from navigation order",
            )
            continue
        keyed.append((sort_key(name), key, entry))

    # sorted() is stable, so equal names keep their original relative order
    keyed.sort(key=lambda item: item[0])
    return [(key, entry) for _, key, entry in keyed]
