"""Protocol definitions for the collaborators the engine is written against.

The filesystem engine never mints temp paths or decides where work runs.
Those decisions belong to the implementations of the protocols below.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from dirutil.core.cancellation import CancellationToken


@runtime_checkable
class PathUtil(Protocol):
    """Protocol for the path-utility collaborator."""

    def get_unique_temp_directory(
        self,
        prefix: str | None,
        create: bool,
        token: CancellationToken | None = None,
    ) -> str:
        """Return a temp directory path that did not exist before the call.

        Args:
            prefix: Optional name prefix for the directory
            create: Whether to create the directory before returning
            token: Cancellation token checked between attempts

        Returns:
            Absolute path of the unique directory
        """
        ...


@runtime_checkable
class ExecutionContext(Protocol):
    """Protocol for deciding whether work runs inline or on a worker thread.

    Implementations must be agnostic of what ``work`` does; the engine is
    agnostic of which branch is taken.
    """

    async def run_inline_or_offload[S, R](
        self,
        work: Callable[[S], R],
        state: S,
        token: CancellationToken,
    ) -> R:
        """Run ``work(state)`` and return its result.

        Args:
            work: Synchronous callable performing the operation
            state: Argument bundle passed to ``work``
            token: Cancellation token of the operation

        Returns:
            Whatever ``work`` returns
        """
        ...
