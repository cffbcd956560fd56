"""Filesystem storage for named voice clips.

Each clip is one OGG/Opus file named after the command that replays it.
Names are validated before they ever reach the filesystem.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Final

from ..config import config
from ..models import VoiceClip

logger = logging.getLogger(__name__)

RESERVED_NAMES: Final[frozenset[str]] = frozenset(
    {"start", "help", "add", "list", "delete", "cancel"}
)


class VoiceStore:
    """Stores and looks up voice clips by name."""

    NAME_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[a-z0-9_]{1,32}$")
    SUFFIX: Final[str] = ".ogg"

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    @classmethod
    def normalize_name(cls, raw: str | None) -> str:
        """Turn user input into a clip name.

        Accepts ``name``, ``/name`` and ``/name@botname``.

        Raises:
            ValueError: If the name is empty, malformed or reserved.
        """
        if not raw:
            raise ValueError("empty clip name")

        name = raw.strip().lstrip("/").split("@", 1)[0].lower()
        if not cls.NAME_PATTERN.fullmatch(name):
            raise ValueError(f"invalid clip name: {raw!r}")
        if name in RESERVED_NAMES:
            raise ValueError(f"reserved clip name: {name!r}")
        return name

    def path_for(self, name: str) -> Path:
        """Return the file path for a clip, creating the store directory."""
        path = self._file_path(name)
        self.root.mkdir(parents=True, exist_ok=True)
        return path

    def exists(self, name: str) -> bool:
        try:
            return self._file_path(name).is_file()
        except ValueError:
            return False

    def get(self, name: str) -> VoiceClip | None:
        """Look up a clip, returning None for unknown or invalid names."""
        if not self.exists(name):
            return None
        return self._to_clip(self._file_path(name))

    def list(self) -> list[VoiceClip]:
        """All stored clips ordered by name."""
        if not self.root.is_dir():
            return []

        clips = [
            self._to_clip(path)
            for path in self.root.glob(f"*{self.SUFFIX}")
            if path.is_file() and self.NAME_PATTERN.fullmatch(path.stem)
        ]
        return sorted(clips, key=lambda clip: clip.name)

    def delete(self, name: str) -> bool:
        """Remove a clip.

        Returns:
            True if a file was removed, False if the clip did not exist.
        """
        if not self.exists(name):
            return False

        path = self._file_path(name)
        path.unlink()
        logger.info("Deleted voice clip %s", path)
        return True

    def _file_path(self, name: str) -> Path:
        return self.root / f"{self.normalize_name(name)}{self.SUFFIX}"

    @staticmethod
    def _to_clip(path: Path) -> VoiceClip:
        stat = path.stat()
        return VoiceClip(
            name=path.stem,
            path=path,
            size_bytes=stat.st_size,
            created_at=datetime.fromtimestamp(stat.st_mtime),
        )


voice_store = VoiceStore(Path(config.storage.voice_dir))
