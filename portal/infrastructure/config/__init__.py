"""Configuration pipeline: INI loader, deep merge, schema, path resolution.

Composed by portal.core.config; nothing here holds process-wide state.
"""

from portal.infrastructure.config.loader import IniFileLoader, parse_ini
from portal.infrastructure.config.merge import deep_merge
from portal.infrastructure.config.paths import resolve_paths
from portal.infrastructure.config.schema import (
    HttpConfig,
    PathsConfig,
    RateLimitConfig,
    ResolvedConfig,
    SessionConfig,
    ValkeyConfig,
    validate_config,
)

__all__ = [
    "IniFileLoader",
    "parse_ini",
    "deep_merge",
    "resolve_paths",
    "validate_config",
    "ResolvedConfig",
    "HttpConfig",
    "RateLimitConfig",
    "SessionConfig",
    "PathsConfig",
    "ValkeyConfig",
]
