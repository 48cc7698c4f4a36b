"""Shared utilities: enums, telemetry, and cross-cutting helpers.

No business logic.
"""

from portal.shared.enums import Environment
from portal.shared.utils import parse_byte_size

__all__ = [
    "Environment",
    "parse_byte_size",
]
