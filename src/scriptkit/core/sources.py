"""Item sources — uniform ``(key, value)`` views over iteration targets.

:func:`to_source` is the only place that inspects the shape of a
caller-supplied target.  Strings and bytes are sequences in Python but
are rejected here: iterating a script argument character by character
is never what the caller meant.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator, Mapping, Sequence
from typing import Any

from scriptkit.core.protocols import ItemSource

_TEXT_TYPES: tuple[type, ...] = (str, bytes, bytearray, memoryview)


class SequenceSource:
    """Positional view: keys ``0..n-1`` in order."""

    __slots__ = ("_items",)

    def __init__(self, items: Sequence[Any]) -> None:
        self._items = items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[tuple[int, Any]]:
        return iter(enumerate(self._items))


class MappingSource:
    """Keyed view in the mapping's own iteration order.

    Pairs are snapshotted at construction so that a step mutating the
    mapping cannot change which items the current run visits.
    """

    __slots__ = ("_pairs",)

    def __init__(self, mapping: Mapping[Hashable, Any]) -> None:
        self._pairs: tuple[tuple[Hashable, Any], ...] = tuple(mapping.items())

    def __len__(self) -> int:
        return len(self._pairs)

    def __iter__(self) -> Iterator[tuple[Hashable, Any]]:
        return iter(self._pairs)


def to_source(target: object) -> ItemSource | None:
    """Wrap *target* in an :class:`ItemSource`, or return ``None``.

    Accepted: any :class:`~collections.abc.Mapping` and any non-text
    :class:`~collections.abc.Sequence` (lists, tuples, ranges).
    Everything else, including ``None``, numbers, strings, sets and
    generators, is invalid.
    """
    if isinstance(target, Mapping):
        return MappingSource(target)
    if isinstance(target, Sequence) and not isinstance(target, _TEXT_TYPES):
        return SequenceSource(target)
    return None
