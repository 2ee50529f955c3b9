"""JSON-file implementation of :class:`~life_calc.core.protocols.DateStore`.

The store is a single flat JSON object on disk.  Every ``OSError`` and
decode failure is caught here and re-raised as
:class:`~life_calc.exceptions.StorageError` — nothing raw escapes the
infrastructure boundary.

Rules
-----
* Writes are atomic: temp file in the target directory, then ``os.replace``.
* A missing file is an empty store, not an error.
* No user-facing output.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from life_calc.exceptions import StorageError

logger = logging.getLogger(__name__)


class JsonDateStore:
    """Concrete :class:`DateStore` backed by a JSON file.

    Usage::

        store = JsonDateStore(Path("~/.life-calc/dates.json").expanduser())
        store.set("birthday", "1990-05-17")
        store.get("birthday")  # "1990-05-17"
    """

    def __init__(self, path: Path) -> None:
        self._path: Path = path

    @property
    def path(self) -> Path:
        return self._path

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def get(self, key: str) -> str | None:
        value = self._read().get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            logger.warning("Ignoring non-string value for %r in %s", key, self._path)
            return None
        return value

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)
        logger.debug("Stored %r in %s", key, self._path)

    def delete(self, key: str) -> None:
        data = self._read()
        if key not in data:
            return
        del data[key]
        self._write(data)
        logger.debug("Removed %r from %s", key, self._path)

    # ------------------------------------------------------------------
    # File handling
    # ------------------------------------------------------------------

    def _read(self) -> dict[str, object]:
        """Load the JSON object, or ``{}`` when the file does not exist."""
        if not self._path.exists():
            return {}
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise StorageError(
                f"Could not read date store: {exc}",
                hint=f"Fix or delete {self._path}, or run 'life-calc reset'.",
            ) from exc
        if not isinstance(raw, dict):
            raise StorageError(
                "Date store does not contain a JSON object.",
                hint=f"Fix or delete {self._path}, or run 'life-calc reset'.",
            )
        return raw

    def _write(self, data: dict[str, object]) -> None:
        text = json.dumps(data, ensure_ascii=False, indent=2)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(
                prefix="life_calc_",
                suffix=".tmp",
                dir=str(self._path.parent),
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(text)
                os.replace(tmp, self._path)
            finally:
                if os.path.exists(tmp):
                    os.remove(tmp)
        except OSError as exc:
            raise StorageError(
                f"Could not write date store: {exc}",
                hint=f"Check that {self._path.parent} is writable.",
            ) from exc
