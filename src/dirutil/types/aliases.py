"""Type aliases using modern PEP 695 syntax."""

import os
from collections.abc import Callable

# Anything accepted where a directory or file path is expected
# Operations return plain strings regardless of what they were given
type PathInput = str | os.PathLike[str]

# Progress sink for size scans, called with the running byte total
type ProgressCallback = Callable[[int], None]
