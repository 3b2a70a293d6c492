"""Strict date string parsing."""

from datetime import datetime


def strict_strptime(value: str, fmt: str) -> datetime:
    """Parse ``value`` with ``fmt`` and require it to match the format exactly.

    Every numeric directive must be written at its full width, and ``%f``
    stands for exactly three digits of milliseconds.

    Raises:
        ValueError: If the value does not match the format
    """
    parsed = datetime.strptime(value, fmt)
    expected = parsed.strftime(fmt.replace("%f", f"{parsed.microsecond // 1000:03d}"))
    if expected != value or parsed.microsecond % 1000:
        raise ValueError(f"{value!r} does not match format {fmt!r} exactly")
    return parsed
