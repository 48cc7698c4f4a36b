"""Load and validate the layered configuration, then print the result.

Usage:
    uv run python -m scripts.check_config
    NODE_ENV=production uv run python -m scripts.check_config

Runs the same pipeline as application startup (common.ini + <NODE_ENV>.ini,
schema validation, path checks). Prints the resolved configuration as JSON
with the session secret masked. Exits 0 on success, 1 on any configuration
error (printed as JSON to stderr).
"""

from __future__ import annotations

import json
import sys

from portal.core.config import config
from portal.core.exceptions import ConfigurationError
from portal.shared.telemetry.logging import setup_logging

SECRET_MASK = "********"


def main() -> int:
    setup_logging()
    try:
        resolved = config.load()
    except ConfigurationError as e:
        print(json.dumps(e.to_dict(), indent=2), file=sys.stderr)
        return 1

    data = resolved.model_dump(mode="json", by_alias=True)
    data["session"]["secret"] = SECRET_MASK
    print(json.dumps(data, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
