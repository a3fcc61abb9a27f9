"""Sequential iteration controller.

Walks an ordered list or a mapping one item at a time, handing each
``(value, key)`` pair to a caller-supplied step function and waiting
for its :class:`~scriptkit.core.models.Step` outcome before moving on.

Two drivers share the same rules:

* :func:`iterate` — plain synchronous loop for synchronous steps.
* :func:`iterate_async` — coroutine that awaits each step, so a step
  may perform slow work (a subprocess, network call, timer) without
  blocking the event loop and without the next item starting early.

Rules
-----
* Strictly sequential: item *i+1* never starts before item *i* returned.
* ``done`` fires exactly once per run: after the last item, after a
  :attr:`Step.STOP`, or immediately on invalid input.
* Invalid input (a target that is neither a mapping nor a non-text
  sequence, or a non-callable step) is logged and performs zero steps.
* Exceptions raised by a step propagate unchanged; ``done`` is not
  called for that run.
* No retries, no parallelism, no shared state between runs.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from scriptkit.core.models import IterationResult, Step
from scriptkit.core.protocols import AsyncStepFunction, ItemSource, StepFunction
from scriptkit.core.sources import to_source

logger = logging.getLogger(__name__)

DoneCallback = Callable[[], object]


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _prepare(target: object, step: object) -> ItemSource | None:
    """Return the item source, or ``None`` after logging invalid input."""
    if not callable(step):
        logger.error(
            "Sequential iteration skipped: step %r is not callable", step,
        )
        return None

    source = to_source(target)
    if source is None:
        logger.error(
            "Sequential iteration skipped: expected a list or mapping, got %s",
            type(target).__name__,
        )
    return source


def _finish(done: object) -> None:
    if callable(done):
        done()


def _is_stop(outcome: object) -> bool:
    return outcome is Step.STOP


# ---------------------------------------------------------------------------
# Synchronous driver
# ---------------------------------------------------------------------------

def iterate(
    target: object,
    step: StepFunction,
    done: DoneCallback | None = None,
) -> IterationResult:
    """Invoke ``step(value, key)`` for each item of *target*, in order.

    Parameters
    ----------
    target:
        A list/tuple (keys are positions) or a mapping (keys are the
        mapping's keys, in its iteration order).
    step:
        Returns :attr:`Step.STOP` to end the run; anything else advances.
        Must not return an awaitable; use :func:`iterate_async` for
        coroutine steps.
    done:
        Called exactly once when the run ends.  ``None`` or any
        non-callable is ignored.

    Raises
    ------
    TypeError
        When *step* returns an awaitable.
    """
    source = _prepare(target, step)
    if source is None:
        _finish(done)
        return IterationResult(processed=0, total=0, rejected=True)

    processed = 0
    stopped = False
    for key, value in source:
        outcome = step(value, key)
        processed += 1
        if inspect.isawaitable(outcome):
            if inspect.iscoroutine(outcome):
                outcome.close()
            raise TypeError(
                "step returned an awaitable; drive it with iterate_async()",
            )
        if _is_stop(outcome):
            stopped = True
            break

    logger.debug("Sequential iteration finished: %d/%d item(s)", processed, len(source))
    _finish(done)
    return IterationResult(processed=processed, total=len(source), stopped=stopped)


# ---------------------------------------------------------------------------
# Asynchronous driver
# ---------------------------------------------------------------------------

async def iterate_async(
    target: object,
    step: AsyncStepFunction,
    done: DoneCallback | None = None,
    *,
    step_timeout: float | None = None,
) -> IterationResult:
    """Await ``step(value, key)`` for each item of *target*, in order.

    *step* may be a coroutine function or a plain function; when it
    returns an awaitable the controller suspends on it and resumes only
    once it resolves.  Only one item is ever in flight.

    Parameters
    ----------
    step_timeout:
        Seconds to wait for an awaitable step outcome.  ``None`` (the
        default) waits forever, so a step that never resolves leaves
        the run suspended.  When exceeded, the pending step is cancelled
        and the run ends as if it had returned :attr:`Step.STOP`, with
        :attr:`IterationResult.timed_out` set.
    """
    source = _prepare(target, step)
    if source is None:
        _finish(done)
        return IterationResult(processed=0, total=0, rejected=True)

    processed = 0
    stopped = False
    timed_out = False
    for key, value in source:
        outcome: Any = step(value, key)
        processed += 1
        if inspect.isawaitable(outcome):
            try:
                outcome = await _resolve(outcome, step_timeout)
            except _StepTimeout:
                logger.warning(
                    "Step for key %r did not finish within %.3gs; stopping",
                    key,
                    step_timeout,
                )
                timed_out = True
                break
        if _is_stop(outcome):
            stopped = True
            break

    logger.debug("Sequential iteration finished: %d/%d item(s)", processed, len(source))
    _finish(done)
    return IterationResult(
        processed=processed,
        total=len(source),
        stopped=stopped,
        timed_out=timed_out,
    )


class _StepTimeout(Exception):
    """A step outcome was not available within ``step_timeout``."""


async def _resolve(outcome: Awaitable[Any], timeout: float | None) -> Any:
    if timeout is None:
        return await outcome
    try:
        return await asyncio.wait_for(outcome, timeout)
    except asyncio.TimeoutError as exc:
        raise _StepTimeout from exc


# ---------------------------------------------------------------------------
# Continuation-style adapter
# ---------------------------------------------------------------------------

ContinuationStep = Callable[[Any, Any, Callable[[], None], Callable[[], None]], object]


def continuation_step(fn: ContinuationStep) -> Callable[[Any, Any], Awaitable[Step]]:
    """Adapt a callback-driven step to :func:`iterate_async`.

    *fn* is called as ``fn(value, key, advance, terminate)`` and may
    invoke either signal later, e.g. from ``loop.call_later`` or a
    subprocess completion callback.  The first signal wins; later calls
    are ignored.  Signals must be invoked on the event loop thread.
    """

    async def _step(value: Any, key: Any) -> Step:
        loop = asyncio.get_running_loop()
        future: asyncio.Future[Step] = loop.create_future()

        def _signal(outcome: Step) -> Callable[[], None]:
            def _fire() -> None:
                if not future.done():
                    future.set_result(outcome)

            return _fire

        fn(value, key, _signal(Step.CONTINUE), _signal(Step.STOP))
        return await future

    return _step
