"""Default path-utility collaborator: unique temp directories and well-known paths."""

from __future__ import annotations

import logging
import os
import sys
import tempfile
import uuid
from typing import Final

from dirutil.core.cancellation import CancellationToken, ensure_token

logger = logging.getLogger(__name__)

MAX_UNIQUE_ATTEMPTS: Final[int] = 100


def new_temp_directory_path(temp_root: str | None = None) -> str:
    """Return a fresh path under the temp directory without creating it."""
    return os.path.join(temp_root or tempfile.gettempdir(), str(uuid.uuid4()))


def working_directory() -> str:
    """Return the directory of the running program.

    Falls back to the process working directory for interactive sessions,
    where there is no program path.
    """
    program = sys.argv[0] if sys.argv else ""
    if program and program != "-c":
        return os.path.dirname(os.path.abspath(program))
    return os.getcwd()


class TempPathUtil:
    """Mints unique directories under a temp root."""

    def __init__(self, temp_root: str | None = None) -> None:
        """Initialize the path utility.

        Args:
            temp_root: Parent for new directories (defaults to the system temp directory)
        """
        self.temp_root: str = temp_root or tempfile.gettempdir()

    def get_unique_temp_directory(
        self,
        prefix: str | None = None,
        create: bool = True,
        token: CancellationToken | None = None,
    ) -> str:
        """Return a temp directory path that did not exist before the call.

        Args:
            prefix: Optional name prefix, joined with a hyphen
            create: Create the directory before returning
            token: Cancellation token checked between attempts

        Returns:
            Absolute path of the directory

        Raises:
            FileExistsError: If no unused name was found
        """
        cancel = ensure_token(token)

        for _ in range(MAX_UNIQUE_ATTEMPTS):
            cancel.raise_if_cancelled()

            name = uuid.uuid4().hex
            if prefix:
                name = f"{prefix}-{name}"
            candidate = os.path.join(self.temp_root, name)

            if not create:
                if not os.path.lexists(candidate):
                    return candidate
                continue

            try:
                os.makedirs(candidate)
            except FileExistsError:
                continue
            logger.debug("Created temp directory %s", candidate, extra={"path": candidate})
            return candidate

        raise FileExistsError(f"Could not find an unused temp directory name under {self.temp_root}")
