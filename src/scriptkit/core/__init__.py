"""Core layer — argument classification and sequential iteration.

Rules
-----
* No ``print()`` calls.
* No filesystem, process or network I/O.
* No imports from ``cli`` or ``infra``.
* Public operations never raise for documented inputs.
"""

from scriptkit.core.arguments import parse_arguments, parse_process_arguments
from scriptkit.core.iteration import continuation_step, iterate, iterate_async
from scriptkit.core.models import FlagValue, IterationResult, ParsedArguments, Step
from scriptkit.core.protocols import AsyncStepFunction, ItemSource, StepFunction
from scriptkit.core.sources import MappingSource, SequenceSource, to_source

__all__: list[str] = [
    "AsyncStepFunction",
    "FlagValue",
    "ItemSource",
    "IterationResult",
    "MappingSource",
    "ParsedArguments",
    "SequenceSource",
    "Step",
    "StepFunction",
    "continuation_step",
    "iterate",
    "iterate_async",
    "parse_arguments",
    "parse_process_arguments",
    "to_source",
]
