"""Application configuration (layered INI files).

Single source of truth for all configuration. config/common.ini is always
loaded; config/<NODE_ENV>.ini is layered on top (required only in
production). The merged tree is validated, its paths are resolved against
the project root, and the frozen result is published once per process on
the module-level `config` object.
"""

from __future__ import annotations

import logging
from pathlib import Path
from threading import Lock
from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict

from portal.infrastructure.config.loader import IniFileLoader
from portal.infrastructure.config.merge import deep_merge
from portal.infrastructure.config.paths import resolve_paths
from portal.infrastructure.config.schema import ResolvedConfig, validate_config
from portal.shared.enums import Environment

logger = logging.getLogger(__name__)

# portal/core/config.py -> project root is two levels above the package.
PROJECT_ROOT = Path(__file__).resolve().parents[2]

CONFIG_DIR_NAME = "config"
COMMON_CONFIG_FILE = "common.ini"


class RuntimeSettings(BaseSettings):
    """Process environment consumed at startup.

    Only NODE_ENV is read; it selects the environment-specific file. The
    published environment still comes from the NODE_ENV key in the files.
    """

    node_env: str = Environment.DEVELOPMENT.value

    model_config = SettingsConfigDict(
        env_ignore_empty=True,
        extra="ignore",
        case_sensitive=False,
    )


class Config:
    """Process-wide configuration holder.

    load() runs the pipeline once and publishes a frozen ResolvedConfig;
    later calls return the published object without touching the files.
    Section attributes (http, paths, ...) are read from the published
    config. Environment predicates are False until loaded.
    """

    def __init__(
        self,
        project_root: str | Path | None = None,
        loader: IniFileLoader | None = None,
    ) -> None:
        """Initialize an unloaded configuration holder.

        Args:
            project_root: Anchor for relative paths; defaults to the repository root.
            loader: Optional file loader for testing or DI; defaults to <project_root>/config.
        """
        self._project_root = Path(project_root) if project_root else PROJECT_ROOT
        self._loader = loader or IniFileLoader(self._project_root / CONFIG_DIR_NAME)
        self._resolved: ResolvedConfig | None = None
        self._lock = Lock()

    @property
    def loaded(self) -> bool:
        """True once a configuration has been published."""
        return self._resolved is not None

    def load(self) -> ResolvedConfig:
        """Load, validate and publish configuration (first call only).

        Returns:
            The published ResolvedConfig (same object on every call).

        Raises:
            MissingConfigFileError: common.ini, or <env>.ini in production, is absent.
            ConfigParseError: A file is not valid INI.
            InvalidConfigurationError: The merged tree violates the schema.
            PathNotFoundError: A configured path does not exist.
        """
        resolved = self._resolved
        if resolved is not None:
            return resolved
        with self._lock:
            if self._resolved is None:
                self._resolved = self._build()
                logger.info("Configuration loaded (%s)", self._resolved.environment.value)
            return self._resolved

    def _build(self) -> ResolvedConfig:
        runtime = RuntimeSettings().node_env

        common = self._loader.load(COMMON_CONFIG_FILE, required=True)
        env_specific = self._loader.load(
            f"{runtime}.ini",
            required=runtime == Environment.PRODUCTION.value,
        )

        merged = deep_merge({}, common, env_specific)
        validated = validate_config(merged)
        paths = resolve_paths(validated.paths, self._project_root)
        return validated.model_copy(update={"paths": paths})

    def _is(self, environment: Environment) -> bool:
        resolved = self._resolved
        return resolved is not None and resolved.environment == environment

    def is_production(self) -> bool:
        return self._is(Environment.PRODUCTION)

    def is_development(self) -> bool:
        return self._is(Environment.DEVELOPMENT)

    def is_staging(self) -> bool:
        return self._is(Environment.STAGING)

    def is_testing(self) -> bool:
        return self._is(Environment.TESTING)

    def __getattr__(self, name: str) -> Any:
        # Only reached for names not defined on Config (http, paths, environment, ...).
        if name.startswith("_"):
            raise AttributeError(name)
        resolved = self.__dict__.get("_resolved")
        if resolved is None:
            raise AttributeError(f"Configuration not loaded; call config.load() before reading '{name}'")
        return getattr(resolved, name)


config = Config()


def get_config() -> ResolvedConfig:
    """Return the published configuration, loading it on first use.

    Usable as a FastAPI dependency. Validation runs on the first call, not
    at import time.

    Returns:
        Frozen ResolvedConfig.
    """
    return config.load()
