"""Pack directory discovery.

Resolves the scan directory handed to initialize() and enumerates the pack
files inside it. Loading is left to langpacks.localization.loading.

Python 3.13+.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from langpacks.diagnostics import ErrorTemplate, LocalizationConfigError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from langpacks.localization.config import ScanConfig
    from langpacks.localization.types import PackPath

__all__ = [
    "files_by_extensions",
    "resolve_scan_path",
    "scan_pack_files",
]

logger = logging.getLogger(__name__)


def resolve_scan_path(path: PackPath, base_dir: Path) -> Path:
    """Resolve a scan directory.

    Tries path as given (absolute, or relative to the working directory),
    then relative to base_dir.

    Args:
        path: Directory to scan
        base_dir: Anchor for relative paths (usually the application directory)

    Returns:
        Existing directory

    Raises:
        LocalizationConfigError: If neither candidate is an existing directory
    """
    candidate = Path(path)
    if candidate.is_dir():
        return candidate

    anchored = base_dir / candidate
    if not candidate.is_absolute() and anchored.is_dir():
        return anchored

    raise LocalizationConfigError(ErrorTemplate.scan_path_not_found(str(path)))


def files_by_extensions(
    directory: Path, extensions: Iterable[str], *, recursive: bool = False
) -> list[Path]:
    """List files in directory whose extension is in extensions.

    Extensions are compared case-insensitively. Results are sorted so scans
    (and therefore last-writer-wins registration) are deterministic.

    Args:
        directory: Directory to list
        extensions: Allowed extensions with leading dot
        recursive: Descend into subdirectories

    Returns:
        Sorted list of matching files
    """
    allowed = {ext.lower() for ext in extensions}
    entries = directory.rglob("*") if recursive else directory.iterdir()
    return sorted(p for p in entries if p.is_file() and p.suffix.lower() in allowed)


def scan_pack_files(path: PackPath, config: ScanConfig) -> list[Path]:
    """Resolve path and list the pack files it contains.

    Raises:
        LocalizationConfigError: If path cannot be resolved to a directory
    """
    directory = resolve_scan_path(path, config.base_dir)
    files = files_by_extensions(directory, config.extensions, recursive=config.recursive)
    logger.debug("Found %d pack file(s) in %s", len(files), directory)
    return files
