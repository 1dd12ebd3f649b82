"""Read-modify-write access to the manifest and the entry point."""

from __future__ import annotations

import json
import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any, Sequence

from .exceptions import ManifestError, StructureMismatch

logger = logging.getLogger(__name__)

ENCODING = "utf-8"

REPOSITORY_URL = ("repository", "url")
PRIVATE = ("private",)
NAME = ("name",)


@dataclass
class ManifestWriter:
    """Applies key writes to the manifest, persisting each one immediately.

    Nothing is cached: every write loads the manifest from disk, assigns the
    value and writes the whole document back.
    """

    manifest_path: Path
    entry_point_path: Path

    def load(self) -> dict[str, Any]:
        try:
            text = self.manifest_path.read_text(encoding=ENCODING)
        except FileNotFoundError as exc:
            raise ManifestError(f"Manifest not found: {self.manifest_path}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise ManifestError(f"Cannot read manifest {self.manifest_path}: {exc}") from exc
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ManifestError(f"Manifest is not valid JSON: {self.manifest_path} ({exc})") from exc
        if not isinstance(data, dict):
            raise ManifestError(f"Manifest root is not an object: {self.manifest_path}")
        return data

    def write_key(self, path: str | Sequence[str], value: str | bool) -> None:
        keys = [path] if isinstance(path, str) else list(path)
        if not keys:
            raise ValueError("Key path cannot be empty")
        data = self.load()
        target = data
        for depth, key in enumerate(keys[:-1]):
            nested = target.get(key)
            if not isinstance(nested, dict):
                raise StructureMismatch(keys, depth)
            target = nested
        target[keys[-1]] = value
        logger.debug("Setting %s = %r in %s", ".".join(keys), value, self.manifest_path)
        self._persist(data)

    def set_repository_url(self, url: str) -> None:
        self.write_key(REPOSITORY_URL, url)

    def set_private(self, value: bool) -> None:
        self.write_key(PRIVATE, value)

    def set_name(self, name: str) -> None:
        self.write_key(NAME, name)

    def write_entry_point(self, source: str) -> None:
        logger.debug("Overwriting %s", self.entry_point_path)
        try:
            self.entry_point_path.write_text(source, encoding=ENCODING)
        except OSError as exc:
            raise ManifestError(f"Cannot write entry point {self.entry_point_path}: {exc}") from exc

    def _persist(self, data: dict[str, Any]) -> None:
        text = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
        try:
            self._replace(text)
        except OSError as exc:
            raise ManifestError(f"Cannot write manifest {self.manifest_path}: {exc}") from exc

    def _replace(self, text: str) -> None:
        # the temp file is created 0600; carry the manifest's own mode over
        mode = stat.S_IMODE(self.manifest_path.stat().st_mode)
        tmp = NamedTemporaryFile(
            "w",
            encoding=ENCODING,
            dir=self.manifest_path.parent,
            prefix=f".{self.manifest_path.name}.",
            suffix=".tmp",
            delete=False,
        )
        temp_path = Path(tmp.name)
        try:
            with tmp:
                tmp.write(text)
            os.chmod(temp_path, mode)
            os.replace(temp_path, self.manifest_path)
        except BaseException:
            temp_path.unlink(missing_ok=True)
            raise


__all__ = ["ManifestWriter"]
