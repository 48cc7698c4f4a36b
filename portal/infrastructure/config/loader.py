"""INI configuration file loader.

Reads files from a fixed configuration directory and parses them into a
nested dict (ConfigTree). Keys before the first section header are top-level;
dotted section headers ([a.b]) nest. Values stay strings except quoted strings
(unquoted), true/false (bool) and null (None). A key ending in '[]' is a list
with one item per non-empty line of its value.
"""

from __future__ import annotations

import configparser
import logging
from pathlib import Path
from typing import Any

from portal.core.exceptions import ConfigParseError, MissingConfigFileError

logger = logging.getLogger(__name__)

# Synthetic header for keys that appear before the first section.
_ROOT_SECTION = "\x00root"
_LIST_SUFFIX = "[]"


def _convert_scalar(raw: str) -> Any:
    """Turn a raw INI value into str, bool or None."""
    text = raw.strip()
    if len(text) >= 2 and text[0] == text[-1] and text[0] in ("'", '"'):
        return text[1:-1]
    if text == "true":
        return True
    if text == "false":
        return False
    if text == "null":
        return None
    return text


def _convert_value(key: str, raw: str) -> tuple[str, Any]:
    """Return (key, value), expanding 'key[]' entries into lists."""
    if key.endswith(_LIST_SUFFIX):
        items = [_convert_scalar(line) for line in raw.splitlines() if line.strip()]
        return key[: -len(_LIST_SUFFIX)], items
    return key, _convert_scalar(raw)


def _section_node(tree: dict[str, Any], section: str) -> dict[str, Any]:
    """Return the dict for a dotted section name, creating parents as needed."""
    node = tree
    for part in section.split("."):
        part = part.strip()
        if not part:
            raise ValueError(f"empty name in section header [{section}]")
        child = node.setdefault(part, {})
        if not isinstance(child, dict):
            raise ValueError(f"section [{section}] collides with key '{part}'")
        node = child
    return node


def parse_ini(text: str) -> dict[str, Any]:
    """Parse INI text into a nested dict.

    Raises:
        configparser.Error: Malformed lines, duplicate keys or sections.
        ValueError: A section header collides with a scalar key.
    """
    parser = configparser.ConfigParser(
        delimiters=("=",),
        comment_prefixes=(";", "#"),
        inline_comment_prefixes=(";", "#"),
        interpolation=None,
        strict=True,
        default_section="\x00defaults",
    )
    parser.optionxform = str  # keep key case (bodyLimit)
    parser.read_string(f"[{_ROOT_SECTION}]\n{text}")

    tree: dict[str, Any] = {}
    for section in parser.sections():
        node = tree if section == _ROOT_SECTION else _section_node(tree, section)
        for raw_key, raw_value in parser.items(section, raw=True):
            key, value = _convert_value(raw_key, raw_value or "")
            if isinstance(node.get(key), dict):
                raise ValueError(f"key '{key}' collides with section [{key}]")
            node[key] = value
    return tree


class IniFileLoader:
    """Load INI files from a fixed configuration directory.

    Missing optional files yield an empty tree with a warning; missing
    required files and unparsable files raise ConfigurationError subclasses.
    """

    def __init__(self, config_dir: str | Path) -> None:
        """Initialize with the directory holding the .ini files.

        Args:
            config_dir: Absolute configuration directory.
        """
        self.config_dir = Path(config_dir)

    def load(self, filename: str, required: bool = False) -> dict[str, Any]:
        """Load and parse one configuration file.

        Args:
            filename: File name relative to config_dir (e.g. 'common.ini').
            required: Raise instead of warning when the file is absent.

        Returns:
            Parsed ConfigTree; empty when an optional file is missing.

        Raises:
            MissingConfigFileError: File absent and required.
            ConfigParseError: File content is not valid INI.
        """
        full_path = self.config_dir / filename

        if not full_path.is_file():
            if required:
                raise MissingConfigFileError(str(full_path))
            logger.warning("Config file missing: %s", full_path)
            return {}

        try:
            parsed = parse_ini(full_path.read_text(encoding="utf-8"))
        except (configparser.Error, ValueError) as e:
            raise ConfigParseError(str(full_path), str(e)) from e

        logger.info("Loaded config file: %s", full_path)
        return parsed
