"""Scan configuration for LocalizationSession.initialize().

Provides a single frozen dataclass that encapsulates how pack files are
discovered and read: which extensions are considered, where relative scan
paths are anchored, and how large a pack file may be.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path

from langpacks.constants import MAX_PACK_FILE_SIZE, PACK_EXTENSIONS

__all__ = ["ScanConfig", "application_directory"]


def application_directory() -> Path:
    """Return the directory of the running program.

    Relative scan paths that do not exist under the working directory are
    retried under this directory, so packs shipped next to the program are
    found regardless of where it was started from.

    Returns:
        Directory of sys.argv[0], or the working directory for interactive
        sessions where no script path is available.
    """
    script = sys.argv[0] if sys.argv and sys.argv[0] else ""
    if not script or script == "-c":
        return Path.cwd()
    return Path(script).resolve().parent


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable configuration for pack discovery.

    All fields have sensible defaults; constructing ``ScanConfig()`` with
    no arguments produces a usable configuration.

    Attributes:
        extensions: File extensions picked up by the scanner, with leading
            dot. Compared case-insensitively (default: ".xml", ".json").
        base_dir: Anchor for relative scan paths that do not exist as given
            (default: directory of the running program).
        max_file_size: Largest pack file read, in bytes (default: 10 MB).
        recursive: Also scan subdirectories (default: False).

    Example:
        >>> config = ScanConfig(base_dir=Path("/opt/app"), recursive=True)
        >>> session.initialize("Assets", "en-us", config=config)
    """

    extensions: tuple[str, ...] = PACK_EXTENSIONS
    base_dir: Path = field(default_factory=application_directory)
    max_file_size: int = MAX_PACK_FILE_SIZE
    recursive: bool = False

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If extensions is empty or an extension lacks the
                leading dot, or if max_file_size is not positive.
        """
        if not self.extensions:
            msg = "extensions must not be empty"
            raise ValueError(msg)
        for extension in self.extensions:
            if not extension.startswith(".") or len(extension) < 2:
                msg = f"extension must start with '.', got {extension!r}"
                raise ValueError(msg)
        if self.max_file_size <= 0:
            msg = "max_file_size must be positive"
            raise ValueError(msg)
        object.__setattr__(
            self, "extensions", tuple(ext.lower() for ext in self.extensions)
        )
        object.__setattr__(self, "base_dir", Path(self.base_dir))
