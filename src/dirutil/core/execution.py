"""Execution contexts deciding where synchronous filesystem work runs.

Directory scans and copies are blocking by nature. Callers on an event loop
await them through an execution context, which either runs the work inline on
the calling thread or offloads it with ``asyncio.to_thread``. The filesystem
engine itself never starts threads.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from enum import Enum

from dirutil.core.cancellation import CancellationToken

logger = logging.getLogger(__name__)


class ExecutionMode(str, Enum):
    """Where an execution context runs work."""

    INLINE = "inline"
    OFFLOAD = "offload"


class InlineExecutionContext:
    """Runs work synchronously on the calling thread.

    Suitable for scripts and worker threads where blocking the caller is
    harmless. On an event loop this blocks the loop for the duration of the
    operation.
    """

    mode: ExecutionMode = ExecutionMode.INLINE

    async def run_inline_or_offload[S, R](
        self,
        work: Callable[[S], R],
        state: S,
        token: CancellationToken,
    ) -> R:
        token.raise_if_cancelled()
        return work(state)


class ThreadOffloadExecutionContext:
    """Runs work on the default thread pool via ``asyncio.to_thread``.

    Context variables (including the logging correlation ID) are copied into
    the worker. When the awaiting task is cancelled, ``token`` is cancelled so
    the worker stops at its next checkpoint instead of running to completion
    unobserved.
    """

    mode: ExecutionMode = ExecutionMode.OFFLOAD

    async def run_inline_or_offload[S, R](
        self,
        work: Callable[[S], R],
        state: S,
        token: CancellationToken,
    ) -> R:
        token.raise_if_cancelled()
        try:
            return await asyncio.to_thread(work, state)
        except asyncio.CancelledError:
            logger.debug("Awaiting task cancelled, signalling worker to stop")
            token.cancel()
            raise


def create_execution_context(
    mode: ExecutionMode | str = ExecutionMode.OFFLOAD,
) -> InlineExecutionContext | ThreadOffloadExecutionContext:
    """Create the execution context for ``mode``.

    Args:
        mode: Execution mode or its string value

    Returns:
        A new execution context

    Raises:
        ValueError: If ``mode`` is not a known execution mode
    """
    match ExecutionMode(mode):
        case ExecutionMode.INLINE:
            return InlineExecutionContext()
        case ExecutionMode.OFFLOAD:
            return ThreadOffloadExecutionContext()
