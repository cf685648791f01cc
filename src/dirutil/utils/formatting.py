"""Pure formatting helpers for log output."""

# Binary unit constants (1024-based)
_UNITS: tuple[tuple[str, int], ...] = (
    ("TB", 1024**4),
    ("GB", 1024**3),
    ("MB", 1024**2),
    ("KB", 1024),
)


def format_size(bytes: int, *, precision: int = 1) -> str:
    """Convert a byte count to a human-readable size.

    Uses binary units (1024-based) for consistency with system tools.

    Args:
        bytes: Number of bytes to format (must be non-negative)
        precision: Decimal places for values of 1 KB and above

    Returns:
        Human-readable string representation of the size

    Examples:
        >>> format_size(512)
        '512 Bytes'
        >>> format_size(2048)
        '2.0 KB'
        >>> format_size(5767168)
        '5.5 MB'
    """
    if bytes < 0:
        msg = "bytes must be non-negative"
        raise ValueError(msg)

    for unit, factor in _UNITS:
        if bytes >= factor:
            return f"{bytes / factor:.{precision}f} {unit}"

    return f"{bytes} Bytes"


def format_count(count: int, noun: str) -> str:
    """Format a count with a naively pluralised noun.

    Examples:
        >>> format_count(1, "directory")
        '1 directory'
        >>> format_count(3, "file")
        '3 files'
    """
    if count == 1:
        return f"{count} {noun}"
    if noun.endswith("y"):
        return f"{count} {noun[:-1]}ies"
    return f"{count} {noun}s"
