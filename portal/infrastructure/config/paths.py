"""Resolution of configured filesystem paths against the project root."""

import os
from pathlib import Path

from portal.core.exceptions import PathNotFoundError
from portal.infrastructure.config.schema import PathsConfig

# Logical template name, not a filesystem path.
UNRESOLVED_PATH_FIELDS = frozenset({"default_layout"})


def resolve_paths(paths: PathsConfig, project_root: str | Path) -> PathsConfig:
    """Resolve every path field and check it exists, in declaration order.

    Relative values are joined to project_root; absolute values pass through.
    Results are absolute and normalised.
    Stops at the first missing path.

    Args:
        paths: Validated paths section.
        project_root: Directory relative paths are anchored to.

    Returns:
        New PathsConfig holding absolute paths; default_layout unchanged.

    Raises:
        PathNotFoundError: A resolved path does not exist.
    """
    root = Path(project_root)
    resolved: dict[str, str] = {}
    for name, field in PathsConfig.model_fields.items():
        if name in UNRESOLVED_PATH_FIELDS:
            continue
        full_path = os.path.abspath(root / getattr(paths, name))
        if not os.path.exists(full_path):
            raise PathNotFoundError(f"paths.{field.alias or name}", full_path)
        resolved[name] = full_path
    return paths.model_copy(update=resolved)
