"""Configuration schema and validation.

Pydantic models for the merged configuration tree. File keys are camelCase
(bodyLimit, rateLimit, viewsLayouts); Python attributes are snake_case.
Unknown keys are ignored and not carried into the result. All models are
frozen so the published configuration cannot be mutated.
"""

from typing import Any

from pydantic import (
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    SecretStr,
    ValidationError,
    field_validator,
)
from pydantic.alias_generators import to_camel

from portal.core.exceptions import InvalidConfigurationError
from portal.shared.enums import Environment

BODY_LIMIT_PATTERN = r"(?i)^\d+(b|kb|mb)$"


def _reject_bool(value: Any) -> Any:
    # INI "true" is already a bool here; pydantic would otherwise read it as 1.
    if isinstance(value, bool):
        raise ValueError("Input should be a valid integer, not a boolean")
    return value


class _Section(BaseModel):
    """Base for config sections: camelCase aliases, frozen, extras ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        frozen=True,
        extra="ignore",
    )


class HttpConfig(_Section):
    """HTTP listener settings."""

    port: int = Field(..., ge=1, le=65535)
    body_limit: str = Field(..., pattern=BODY_LIMIT_PATTERN)

    @field_validator("port", mode="before")
    @classmethod
    def _port_not_bool(cls, v: Any) -> Any:
        return _reject_bool(v)


class RateLimitConfig(_Section):
    """Request rate limit: at most `requests` per `minutes` window."""

    minutes: int = Field(..., ge=1)
    requests: int = Field(..., ge=1)

    @field_validator("minutes", "requests", mode="before")
    @classmethod
    def _counts_not_bool(cls, v: Any) -> Any:
        return _reject_bool(v)


class SessionConfig(_Section):
    """Cookie session settings."""

    secret: SecretStr = Field(..., min_length=32)


class PathsConfig(_Section):
    """Filesystem locations used by the web shell.

    All fields except default_layout are paths checked by resolve_paths;
    default_layout is a logical template name.
    """

    model_config = ConfigDict(str_min_length=1)

    static: str
    views: str
    views_layouts: str
    views_partials: str
    emails: str
    default_layout: str


class ValkeyConfig(_Section):
    """Valkey (Redis protocol) connection settings."""

    url: AnyUrl


class ResolvedConfig(_Section):
    """Validated configuration published by config.load()."""

    environment: Environment = Field(..., alias="NODE_ENV")
    http: HttpConfig
    rate_limit: RateLimitConfig
    session: SessionConfig
    paths: PathsConfig
    valkey: ValkeyConfig


def _format_violation(error: dict[str, Any]) -> str:
    """Format one pydantic error as '<dotted.location>: <message>'."""
    location = ".".join(str(part) for part in error["loc"]) or "<root>"
    return f"{location}: {error['msg']}"


def validate_config(tree: dict[str, Any]) -> ResolvedConfig:
    """Validate a merged ConfigTree against the schema.

    Numeric strings are coerced to integers before range checks. Every
    violation is collected; nothing stops at the first failure.

    Args:
        tree: Merged configuration tree.

    Returns:
        Frozen ResolvedConfig with only the recognized sections. Paths are
        not resolved yet.

    Raises:
        InvalidConfigurationError: One or more fields violate the schema.
    """
    try:
        return ResolvedConfig.model_validate(tree)
    except ValidationError as e:
        violations = [_format_violation(err) for err in e.errors()]
        raise InvalidConfigurationError(violations) from e
