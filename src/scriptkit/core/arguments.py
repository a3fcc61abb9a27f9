"""Argument model — classify raw start-up tokens.

Tokens of the form ``--name=value`` populate the flag map; everything
else (including ``--name`` without ``=``) is only reachable as a bare
token through :meth:`ParsedArguments.has_bare_token`.

Guarantees
----------
* Pure: the same token list always yields the same flag map.
* Never raises for malformed tokens; they are simply not flags.
* No numeric coercion: only ``"true"`` and ``"false"`` are converted.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable
from types import MappingProxyType

from scriptkit.core.models import FlagValue, ParsedArguments

_FLAG_PREFIX = re.compile(r"^--", re.IGNORECASE)

_BOOLEAN_LITERALS: dict[str, bool] = {"true": True, "false": False}


def coerce_value(raw: str) -> FlagValue:
    """Map the literals ``"true"``/``"false"`` to ``bool``, else return *raw*."""
    return _BOOLEAN_LITERALS.get(raw, raw)


def split_flag_token(token: str) -> tuple[str, FlagValue] | None:
    """Return ``(name, value)`` for a flag token, ``None`` for a bare one.

    Only the text between the first and second ``=`` is taken as the
    value, so ``--a=b=c`` yields ``("a", "b")``.
    """
    parts = token.split("=")
    name = parts[0]
    if len(parts) < 2 or not name or not _FLAG_PREFIX.match(name):
        return None
    return _FLAG_PREFIX.sub("", name, count=1), coerce_value(parts[1])


def parse_arguments(tokens: Iterable[str] | None) -> ParsedArguments:
    """Classify *tokens* into a :class:`ParsedArguments` value.

    ``None`` is treated as an empty token list.  Later duplicates of a
    flag name overwrite earlier values.
    """
    raw_tokens = tuple(str(token) for token in tokens) if tokens is not None else ()

    flags: dict[str, FlagValue] = {}
    for token in raw_tokens:
        parsed = split_flag_token(token)
        if parsed is None:
            continue
        name, value = parsed
        flags[name] = value

    return ParsedArguments(raw_tokens=raw_tokens, flags=MappingProxyType(flags))


def parse_process_arguments() -> ParsedArguments:
    """Classify the full ``sys.argv``, interpreter/script entry included."""
    return parse_arguments([sys.executable, *sys.argv])
