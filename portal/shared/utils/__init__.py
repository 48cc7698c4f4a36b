"""Shared helper functions."""

from portal.shared.utils.byte_size import parse_byte_size

__all__ = ["parse_byte_size"]
