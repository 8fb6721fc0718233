"""Access to ``config.toml`` for the solver, loader and logging settings.

The file is looked up at the repository root unless ``SUDOKU_CONFIG`` names
another one.  It is parsed once and cached until :func:`reload` is called.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover - fallback for older Python
    import tomli as tomllib  # type: ignore[import-untyped]

_LOGGER = logging.getLogger(__name__)

CONFIG_ENV = "SUDOKU_CONFIG"
_DEFAULT_PATH = Path(__file__).resolve().parents[1] / "config.toml"


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV)
    return Path(override) if override else _DEFAULT_PATH


@lru_cache(maxsize=1)
def get_config() -> Dict[str, Any]:
    """Return the parsed configuration; ``{}`` when no file exists."""

    path = config_path()
    if not path.is_file():
        _LOGGER.debug("no configuration at %s; using built-in defaults", path)
        return {}
    with path.open("rb") as fh:
        return tomllib.load(fh)


def reload() -> None:
    get_config.cache_clear()


def get_section(path: str, default: Any = None) -> Any:
    """Look up a dotted key such as ``"solver.max_updates"``.

    Raises :class:`KeyError` for a missing key unless ``default`` is given.
    """

    node: Any = get_config()
    for key in path.split("."):
        if not isinstance(node, dict) or key not in node:
            if default is None:
                raise KeyError(f"Configuration path '{path}' not found")
            return default
        node = node[key]
    return node


__all__ = ["CONFIG_ENV", "config_path", "get_config", "get_section", "reload"]
