"""Protocols (interfaces) consumed by the iteration controller.

The controller's loop is written once against :class:`ItemSource`; the
sequence-shaped and mapping-shaped adapters live in
:mod:`scriptkit.core.sources`.  Step functions satisfy
:class:`StepFunction` / :class:`AsyncStepFunction` structurally.
"""

from __future__ import annotations

from collections.abc import Awaitable, Hashable, Iterator
from typing import Any, Protocol

from scriptkit.core.models import Step


class ItemSource(Protocol):
    """Ordered, finite view of ``(key, value)`` pairs.

    Keys are ``int`` positions for sequences and the mapping's own keys
    for mappings.  Iterating twice must yield the same pairs in the same
    order.
    """

    def __len__(self) -> int:
        ...  # pragma: no cover

    def __iter__(self) -> Iterator[tuple[Hashable, Any]]:
        ...  # pragma: no cover


class StepFunction(Protocol):
    """Synchronous per-item callback.

    Return :attr:`Step.STOP` to end the run early; :attr:`Step.CONTINUE`
    or ``None`` advances to the next item.
    """

    def __call__(self, value: Any, key: Any, /) -> Step | None:
        ...  # pragma: no cover


class AsyncStepFunction(Protocol):
    """Per-item callback whose outcome may be awaited."""

    def __call__(self, value: Any, key: Any, /) -> Step | None | Awaitable[Step | None]:
        ...  # pragma: no cover
