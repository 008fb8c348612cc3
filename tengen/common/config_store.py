# tengen/common/config_store.py
"""Sectioned JSON settings file.

The file holds one JSON object whose values are the sections, each a dict
of settings. A store reads the file once when it is created; ``put`` rewrites
the whole file.

Usage:
    from tengen.common.config_store import JsonFileConfigStore

    store = JsonFileConfigStore("tengen.json")
    board_section = store.get("board", {})
    store.put("board", dim=9, history_window=8)
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from collections.abc import Iterator, Mapping
from datetime import datetime
from typing import Any


def _get_logger() -> logging.Logger:
    """Get module logger (lazy to avoid side effect at import time)."""
    return logging.getLogger(__name__)


def _quarantine(filename: str) -> None:
    """Move an unreadable settings file aside as ``<name>.corrupt.<timestamp>``."""
    target = f"{filename}.corrupt.{datetime.now():%Y%m%d-%H%M%S}"
    try:
        os.rename(filename, target)
    except OSError as e:
        _get_logger().warning("Could not move %s aside: %s", filename, e)


def read_sections(filename: str) -> dict[str, dict[str, Any]]:
    """Sections of ``filename``; an absent or unreadable file gives no sections.

    Values that are not objects are dropped with a warning.
    """
    if not os.path.exists(filename):
        return {}
    try:
        with open(filename, encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        _get_logger().warning("Unreadable config file %s, starting empty: %s", filename, e)
        _quarantine(filename)
        return {}
    if not isinstance(raw, dict):
        _get_logger().warning("Config file %s does not hold an object, ignoring it", filename)
        return {}
    sections = {}
    for name, section in raw.items():
        if isinstance(section, dict):
            sections[name] = section
        else:
            _get_logger().warning("Dropping config section %s (%s is not an object)", name, type(section).__name__)
    return sections


class JsonFileConfigStore(Mapping[str, dict[str, Any]]):
    """Read-mostly view of a settings file, one dict per section.

    Lookups hand out copies, so callers cannot change the stored sections
    except through :meth:`put`.

    Args:
        filename: Path to the JSON file; it need not exist yet.
        indent: Indentation used when the file is written.
    """

    def __init__(self, filename: str, indent: int = 4):
        self.filename = filename
        self.indent = indent
        self._sections = read_sections(filename)

    def put(self, section: str, **values: Any) -> None:
        """Replace ``section`` with ``values`` and write the file.

        The new content goes to a temporary file in the same directory which
        then replaces the old file, so readers never see a partial write.

        Raises:
            OSError: If the file cannot be written.
            TypeError: If a value is not JSON serializable.
        """
        sections = {**self._sections, section: dict(values)}
        directory = os.path.dirname(os.path.abspath(self.filename))
        os.makedirs(directory, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=directory, suffix=".tmp", delete=False
        ) as tmp:
            try:
                json.dump(sections, tmp, indent=self.indent, ensure_ascii=False)
            except TypeError:
                tmp.close()
                os.unlink(tmp.name)
                raise
        os.replace(tmp.name, self.filename)
        self._sections = sections
        _get_logger().debug("Wrote section %s to %s", section, self.filename)

    def __getitem__(self, section: str) -> dict[str, Any]:
        return dict(self._sections[section])

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._sections))

    def __len__(self) -> int:
        return len(self._sections)

    def __repr__(self) -> str:
        return f"JsonFileConfigStore({self.filename!r})"
