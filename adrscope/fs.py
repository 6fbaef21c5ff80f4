"""
Filesystem access for ADRScope.

The catalog core never touches files; commands read sources and write
outputs through this class.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

from .errors import OutputWriteError, SourceReadError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class FileSystem:
    """Reads, writes and discovers files on the local disk."""

    def read_text(self, path: PathLike) -> str:
        """Read a UTF-8 file, tolerating a byte-order mark.

        Raises:
            SourceReadError: If the file cannot be read or decoded
        """
        try:
            return Path(path).read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceReadError(path, str(exc)) from exc

    def write_text(self, path: PathLike, content: str) -> None:
        """Write content, creating parent directories as needed.

        Raises:
            OutputWriteError: If the file cannot be written
        """
        target = Path(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise OutputWriteError(target, str(exc)) from exc
        logger.debug(f"Wrote {len(content)} chars to {target}")

    def glob(self, base: PathLike, pattern: str) -> List[Path]:
        """List files under base matching pattern, sorted by path."""
        base_dir = Path(base)
        if not base_dir.is_dir():
            return []
        return sorted(p for p in base_dir.glob(pattern) if p.is_file())

    def exists(self, path: PathLike) -> bool:
        return Path(path).exists()

    def create_dir(self, path: PathLike) -> None:
        try:
            Path(path).mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise OutputWriteError(path, str(exc)) from exc
