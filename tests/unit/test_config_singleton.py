"""Tests for Config: pipeline, load-once semantics, environment predicates."""

import logging
from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError

from portal.core.config import Config, config
from portal.core.exceptions import (
    ConfigParseError,
    InvalidConfigurationError,
    MissingConfigFileError,
    PathNotFoundError,
)
from portal.infrastructure.config.loader import IniFileLoader
from portal.shared.enums import Environment
from tests.conftest import COMMON_INI


class CountingLoader(IniFileLoader):
    """IniFileLoader that records every load() call."""

    def __init__(self, config_dir: Path) -> None:
        super().__init__(config_dir)
        self.calls: list[tuple[str, bool]] = []

    def load(self, filename: str, required: bool = False) -> dict[str, Any]:
        self.calls.append((filename, required))
        return super().load(filename, required)


def test_development_without_env_file_loads_with_warning(
    project_root: Path, write_config, caplog: pytest.LogCaptureFixture
) -> None:
    write_config("common.ini", COMMON_INI)
    cfg = Config(project_root=project_root)

    with caplog.at_level(logging.INFO):
        resolved = cfg.load()

    assert resolved.environment is Environment.DEVELOPMENT
    assert cfg.is_development()
    assert not cfg.is_production()
    assert not cfg.is_staging()
    assert not cfg.is_testing()
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert any("development.ini" in r.getMessage() for r in warnings)
    assert "Configuration loaded (development)" in caplog.text


def test_load_is_idempotent(project_root: Path, write_config) -> None:
    write_config("common.ini", COMMON_INI)
    loader = CountingLoader(project_root / "config")
    cfg = Config(project_root=project_root, loader=loader)

    first = cfg.load()
    second = cfg.load()

    assert first is second
    assert loader.calls == [("common.ini", True), ("development.ini", False)]


def test_predicates_are_false_before_load(project_root: Path) -> None:
    cfg = Config(project_root=project_root)
    assert not cfg.loaded
    assert not cfg.is_production()
    assert not cfg.is_development()
    assert not cfg.is_staging()
    assert not cfg.is_testing()


def test_section_access_before_load_raises(project_root: Path) -> None:
    cfg = Config(project_root=project_root)
    with pytest.raises(AttributeError, match="not loaded"):
        cfg.http


def test_section_access_after_load(project_root: Path, write_config) -> None:
    write_config("common.ini", COMMON_INI)
    cfg = Config(project_root=project_root)
    resolved = cfg.load()
    assert cfg.loaded
    assert cfg.http is resolved.http
    assert cfg.environment is Environment.DEVELOPMENT
    assert cfg.http.port == 3000


def test_environment_file_overrides_common(
    project_root: Path, write_config, monkeypatch: pytest.MonkeyPatch
) -> None:
    write_config("common.ini", COMMON_INI)
    write_config(
        "staging.ini",
        """
        NODE_ENV = staging

        [http]
        port = 8080

        [extra]
        ignored = yes
        """,
    )
    monkeypatch.setenv("NODE_ENV", "staging")
    cfg = Config(project_root=project_root)

    resolved = cfg.load()

    assert cfg.is_staging()
    assert resolved.http.port == 8080
    assert resolved.http.body_limit == "100kb"
    assert resolved.rate_limit.requests == 100


def test_environment_comes_from_files_not_process(
    project_root: Path, write_config, monkeypatch: pytest.MonkeyPatch
) -> None:
    """The NODE_ENV variable only selects the file; the files decide the predicate."""
    write_config("common.ini", COMMON_INI)
    write_config("testing.ini", "[http]\nport = 4000\n")
    monkeypatch.setenv("NODE_ENV", "testing")
    cfg = Config(project_root=project_root)
    cfg.load()
    assert cfg.is_development()
    assert cfg.http.port == 4000


def test_empty_node_env_defaults_to_development(
    project_root: Path, write_config, monkeypatch: pytest.MonkeyPatch
) -> None:
    write_config("common.ini", COMMON_INI)
    loader = CountingLoader(project_root / "config")
    monkeypatch.setenv("NODE_ENV", "")
    Config(project_root=project_root, loader=loader).load()
    assert loader.calls[1] == ("development.ini", False)


def test_production_without_env_file_raises(
    project_root: Path, write_config, monkeypatch: pytest.MonkeyPatch
) -> None:
    write_config("common.ini", COMMON_INI)
    monkeypatch.setenv("NODE_ENV", "production")
    cfg = Config(project_root=project_root)

    with pytest.raises(MissingConfigFileError) as exc_info:
        cfg.load()

    assert exc_info.value.details["path"] == str(project_root / "config" / "production.ini")
    assert not cfg.loaded
    assert not cfg.is_production()


def test_production_with_env_file_loads(
    project_root: Path, write_config, monkeypatch: pytest.MonkeyPatch
) -> None:
    write_config("common.ini", COMMON_INI)
    write_config("production.ini", "NODE_ENV = production\n")
    monkeypatch.setenv("NODE_ENV", "production")
    cfg = Config(project_root=project_root)
    cfg.load()
    assert cfg.is_production()
    assert not cfg.is_development()


def test_missing_common_file_raises(project_root: Path) -> None:
    with pytest.raises(MissingConfigFileError):
        Config(project_root=project_root).load()


def test_parse_error_propagates(project_root: Path, write_config) -> None:
    write_config("common.ini", "[http]\nnot an assignment\n")
    with pytest.raises(ConfigParseError):
        Config(project_root=project_root).load()


def test_invalid_configuration_propagates(project_root: Path, write_config) -> None:
    write_config("common.ini", COMMON_INI.replace("port = 3000", "port = 0"))
    with pytest.raises(InvalidConfigurationError) as exc_info:
        Config(project_root=project_root).load()
    assert exc_info.value.violations[0].startswith("http.port:")


def test_missing_views_path_raises(project_root: Path, write_config) -> None:
    """All schema fields valid, but paths.views points nowhere."""
    write_config("common.ini", COMMON_INI.replace("views = views", "views = gone"))
    with pytest.raises(PathNotFoundError) as exc_info:
        Config(project_root=project_root).load()
    assert exc_info.value.details["field"] == "paths.views"
    assert exc_info.value.details["path"] == str(project_root / "gone")


def test_paths_are_published_resolved(project_root: Path, write_config) -> None:
    write_config("common.ini", COMMON_INI)
    resolved = Config(project_root=project_root).load()
    assert resolved.paths.static == str(project_root / "public")
    assert resolved.paths.emails == str(project_root / "views" / "emails")
    assert resolved.paths.default_layout == "main"


def test_failed_load_can_be_retried(project_root: Path, write_config) -> None:
    cfg = Config(project_root=project_root)
    with pytest.raises(MissingConfigFileError):
        cfg.load()
    write_config("common.ini", COMMON_INI)
    assert cfg.load().environment is Environment.DEVELOPMENT


def test_published_config_is_immutable(project_root: Path, write_config) -> None:
    write_config("common.ini", COMMON_INI)
    resolved = Config(project_root=project_root).load()
    with pytest.raises(ValidationError):
        resolved.paths.views = "/tmp"  # type: ignore[misc]


def test_module_singleton() -> None:
    assert isinstance(config, Config)
