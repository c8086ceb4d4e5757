from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Protocol

from link_cards.errors import ParseError

logger = logging.getLogger(__name__)

NAME_KEY = "name"
PREVIEWS_KEY = "previews"


class StoragePort(Protocol):
    """Key/value string storage local to one device."""

    def get_item(self, key: str) -> Optional[str]:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...

    def remove_item(self, key: str) -> None:
        ...


class MemoryStorage:
    """In-process storage, used by tests and throwaway sessions."""

    def __init__(self, items: Optional[Dict[str, str]] = None) -> None:
        self.items: Dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)


class FileStorage:
    """Storage kept as a single JSON object of strings in a file on disk.

    The whole file is rewritten on every change through a temporary file,
    so readers see either the old or the new contents. Reading an
    unreadable file raises ``ParseError``; the next write moves it aside to
    ``<name>.corrupt`` and starts from an empty object.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path).expanduser()

    @property
    def corrupt_path(self) -> Path:
        return self.path.with_name(self.path.name + ".corrupt")

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise ParseError(f"Storage file {self.path} is unreadable") from exc
        if not isinstance(raw, dict):
            raise ParseError(f"Storage file {self.path} is not a JSON object")
        return {str(k): v for k, v in raw.items() if isinstance(v, str)}

    def _read_for_update(self) -> Dict[str, str]:
        try:
            return self._read()
        except ParseError:
            logger.warning(
                "Moving unreadable storage file %s to %s", self.path, self.corrupt_path
            )
            os.replace(self.path, self.corrupt_path)
            return {}

    def _write(self, items: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=self.path.name, suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(items, fh, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self.path)
        except BaseException:
            os.unlink(tmp_name)
            raise

    def get_item(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read_for_update()
        items[key] = value
        self._write(items)

    def remove_item(self, key: str) -> None:
        items = self._read_for_update()
        if items.pop(key, None) is not None:
            self._write(items)
