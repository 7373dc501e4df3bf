"""YAML-backed configuration store addressed by colon-separated keys."""

import logging
from collections.abc import Mapping
from datetime import date, datetime
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


def convert_entries(value: Any) -> Any:
    """Recursively turn every mapping key into a string.

    YAML happily produces int or bool keys (``1: foo``); plan options are
    string-keyed. Unquoted dates and timestamps come back as ISO strings
    so the options stay JSON-serializable.
    """
    if isinstance(value, Mapping):
        return {str(k): convert_entries(v) for k, v in value.items()}
    if isinstance(value, list):
        return [convert_entries(item) for item in value]
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value


class YamlConfigResolver:
    """Look up values in a nested configuration tree.

    ``get("volume-plans:plan1:docker")`` walks
    ``tree["volume-plans"]["plan1"]["docker"]``.
    """

    def __init__(self, data: Mapping[str, Any] | None = None):
        self._data = convert_entries(data or {})

    @classmethod
    def from_file(cls, path: str | Path) -> "YamlConfigResolver":
        """Load the tree from a YAML file. A missing file yields an empty tree."""
        path = Path(path)
        if not path.exists():
            logger.warning("Volume config file %s not found - no plans are configured", path)
            return cls({})
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, Mapping):
            raise ValueError(f"{path}: top level of the volume config must be a mapping")
        return cls(data)

    def get(self, key: str) -> Any:
        value: Any = self._data
        for part in key.split(":"):
            if not isinstance(value, Mapping) or part not in value:
                raise KeyError(key)
            value = value[part]
        return value
