"""Domain models for scriptkit.

All models are **frozen** dataclasses or enums, immutable value objects.
They carry zero I/O and zero dependencies on external packages.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

FlagValue = str | bool
"""A parsed ``--name=value`` value: ``"true"``/``"false"`` become ``bool``."""


# ---------------------------------------------------------------------------
# Parsed process arguments
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParsedArguments:
    """Classified start-up arguments.

    Construct through :func:`scriptkit.core.arguments.parse_arguments`,
    :meth:`from_tokens` or :meth:`from_process` so that :attr:`flags`
    is always the derived view of :attr:`raw_tokens`.
    """

    raw_tokens: tuple[str, ...]
    """Every token, unmodified, including interpreter/script entries."""

    flags: Mapping[str, FlagValue]
    """Flag name (``--`` stripped) to coerced value.  Read-only."""

    def __hash__(self) -> int:
        # flags is derived from raw_tokens and is not hashable itself.
        return hash(self.raw_tokens)

    @classmethod
    def from_tokens(cls, tokens: Iterable[str] | None) -> ParsedArguments:
        """Classify an explicit token list."""
        from scriptkit.core.arguments import parse_arguments

        return parse_arguments(tokens)

    @classmethod
    def from_process(cls) -> ParsedArguments:
        """Classify ``sys.argv``.  Call once at process entry."""
        from scriptkit.core.arguments import parse_process_arguments

        return parse_process_arguments()

    def get_flag(self, name: str | None) -> FlagValue | None:
        """Return the value parsed from ``--name=value``, or ``None``.

        Empty or absent names, and names only ever passed without ``=``,
        yield ``None``.  Never raises.
        """
        if not name:
            return None
        return self.flags.get(name)

    def has_bare_token(self, token: str) -> bool:
        """Return whether *token* appears verbatim in :attr:`raw_tokens`."""
        return token in self.raw_tokens

    def get_raw_tokens(self) -> tuple[str, ...]:
        return self.raw_tokens


# ---------------------------------------------------------------------------
# Iteration
# ---------------------------------------------------------------------------

class Step(enum.Enum):
    """Outcome returned by a step function to pace the controller."""

    CONTINUE = "continue"
    """Advance to the next item."""

    STOP = "stop"
    """End the run; no further items are visited."""


@dataclass(frozen=True, slots=True)
class IterationResult:
    """Summary of a single controller run."""

    processed: int
    """Number of times the step function was invoked."""

    total: int
    """Number of items the target offered (``0`` for invalid input)."""

    stopped: bool = False
    """``True`` when a step returned :attr:`Step.STOP`."""

    timed_out: bool = False
    """``True`` when a step exceeded the configured timeout."""

    rejected: bool = False
    """``True`` when the target or step was invalid and nothing ran."""

    @property
    def completed(self) -> bool:
        """Whether every item was visited and advanced."""
        if self.rejected or self.stopped or self.timed_out:
            return False
        return self.processed == self.total
