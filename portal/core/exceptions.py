"""Exceptions for the Portal application.

Configuration errors are fatal: they are raised from config.load() at startup
and never retried. The web layer maps PortalException to JSON responses
using message, error_code, and details.
"""

from typing import Any


class PortalException(Exception):
    """Base exception for all Portal application errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. path, field).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation (error, message, details)."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(PortalException):
    """Base exception for configuration loading failures."""


class MissingConfigFileError(ConfigurationError):
    """Raised when a required configuration file does not exist."""

    def __init__(self, path: str) -> None:
        """Initialize with the attempted file path.

        Args:
            path: Absolute path that was looked up.
        """
        super().__init__(
            f"Config file missing: {path}",
            "MISSING_CONFIG_FILE",
            {"path": path},
        )


class ConfigParseError(ConfigurationError):
    """Raised when a configuration file is not valid INI text."""

    def __init__(self, path: str, reason: str) -> None:
        """Initialize with file path and parser message.

        Args:
            path: Absolute path of the file that failed to parse.
            reason: Parser error description.
        """
        super().__init__(
            f"Failed to parse config file {path}: {reason}",
            "CONFIG_PARSE_ERROR",
            {"path": path, "reason": reason},
        )


class InvalidConfigurationError(ConfigurationError):
    """Raised when the merged configuration violates the schema.

    Carries every violation found in one validation pass, in schema order.
    """

    def __init__(self, violations: list[str]) -> None:
        """Initialize with the list of violation descriptions.

        Args:
            violations: One "<location>: <message>" entry per failed field.
        """
        self.violations = list(violations)
        lines = "\n".join(f"- {v}" for v in self.violations)
        super().__init__(
            f"Invalid configuration:\n{lines}",
            "INVALID_CONFIGURATION",
            {"violations": self.violations},
        )


class PathNotFoundError(ConfigurationError):
    """Raised when a configured filesystem path does not exist."""

    def __init__(self, field: str, path: str) -> None:
        """Initialize with the config field and its resolved path.

        Args:
            field: Dotted config key (e.g. 'paths.views').
            path: Resolved absolute path that was checked.
        """
        super().__init__(
            f"Configured path does not exist: {field} ({path})",
            "PATH_NOT_FOUND",
            {"field": field, "path": path},
        )
