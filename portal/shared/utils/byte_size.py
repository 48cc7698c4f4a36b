"""Byte size strings as used by http.bodyLimit (e.g. '100kb')."""

import re

_SIZE_PATTERN = re.compile(r"^(\d+)(b|kb|mb)$", re.IGNORECASE)

_MULTIPLIERS = {
    "b": 1,
    "kb": 1024,
    "mb": 1024 * 1024,
}


def parse_byte_size(value: str) -> int:
    """Convert '<digits><b|kb|mb>' (case-insensitive) to a number of bytes.

    Args:
        value: Size string such as '512b', '100kb' or '2MB'.

    Returns:
        Size in bytes (kb = 1024, mb = 1024 * 1024).

    Raises:
        ValueError: If value does not match the size pattern.
    """
    match = _SIZE_PATTERN.match(value.strip())
    if match is None:
        raise ValueError(f"Invalid byte size: {value!r}")
    number, unit = match.groups()
    return int(number) * _MULTIPLIERS[unit.lower()]
