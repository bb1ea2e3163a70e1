"""Language color lookup backed by a JSON table."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from .errors import ColorTableError
from .logging_config import get_logger

logger = get_logger(__name__)

FALLBACK_COLOR = "#7d7d7d"

BUNDLED_COLORS_PATH = Path(__file__).resolve().parent.parent / "data" / "colors.json"


class ColorLookup:
    """Read-only mapping from language name to a CSS color."""

    def __init__(self, table: Mapping[str, Any] | None = None):
        self._table = MappingProxyType(dict(table or {}))

    def __len__(self) -> int:
        return len(self._table)

    def color_for(self, name: str) -> str:
        """Return the registered color for ``name`` or the neutral fallback."""
        entry = self._table.get(name)
        if isinstance(entry, Mapping):
            color = entry.get("color")
            if isinstance(color, str) and color:
                return color
        return FALLBACK_COLOR


def load_color_table(path: Path | str | None = None) -> ColorLookup:
    """Load a ``{name: {"color": ...}}`` table from disk.

    Args:
        path: JSON file to read. Defaults to the table shipped with the package.

    Raises:
        ColorTableError: If the file is unreadable or not a JSON object
    """
    table_path = Path(path) if path else BUNDLED_COLORS_PATH
    try:
        with table_path.open("r", encoding="utf-8") as f:
            table = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ColorTableError(f"Failed to load color table {table_path}: {e}") from e

    if not isinstance(table, dict):
        raise ColorTableError(f"Color table {table_path} must be a JSON object")

    lookup = ColorLookup(table)
    logger.debug(
        "Loaded color table", extra={"path": str(table_path), "entries": len(lookup)}
    )
    return lookup
