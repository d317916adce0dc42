"""Pack loading infrastructure.

Provides the protocol for pack loaders, the XML/JSON/Null implementations,
extension-based dispatch, and result/summary data structures for tracking
load attempts.

Components:
    PackLoader - Protocol for turning a file into a LanguagePack (structural typing)
    XmlPackLoader - Markup packs
    JsonPackLoader - Object-of-objects-of-strings packs
    NullPackLoader - Unrecognized formats; loads nothing, raises nothing
    loader_for_path - Pure dispatch from file extension to loader
    PackLoadResult - Immutable result of a single load attempt
    LoadSummary - Immutable aggregate of all load results from a scan

Loaders are total: load() never raises. Read, parse and structure errors
are reported through PackLoadResult.status / PackLoadResult.error so a
directory holding one broken or incidental file does not abort a scan.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar, Protocol

from langpacks.constants import (
    FIELD_CULTURE_ID,
    FIELD_CULTURE_NAME,
    FIELD_DATA,
    FIELD_ENGLISH_NAME,
    FIELD_ID,
    FIELD_VERSION,
    JSON_EXTENSION,
    MAX_PACK_FILE_SIZE,
    XML_EXTENSION,
)
from langpacks.diagnostics import ErrorTemplate, PackLoadError
from langpacks.enums import LoadStatus, PackFormat
from langpacks.locale_utils import normalize_culture_id
from langpacks.localization.pack import LanguagePack

if TYPE_CHECKING:
    from langpacks.localization.types import CultureId, PackPath

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "PackLoader",
    # Concrete loaders
    "XmlPackLoader",
    "JsonPackLoader",
    "NullPackLoader",
    # Dispatch
    "loader_for_path",
    "load_pack",
    # Load result types
    "PackLoadResult",
    "LoadSummary",
]

logger = logging.getLogger(__name__)


class PackLoader(Protocol):
    """Protocol for loading a language pack from a file.

    Implementations must never raise from load(): every failure is
    reported in the returned PackLoadResult.

    This is a Protocol (structural typing) rather than ABC to allow
    maximum flexibility for users implementing custom loaders.

    Example:
        >>> class IniLoader:
        ...     format = "ini"
        ...     extensions = (".ini",)
        ...     def load(self, path):
        ...         ...
    """

    @property
    def format(self) -> PackFormat | str:
        """Format handled by this loader."""
        ...

    @property
    def extensions(self) -> tuple[str, ...]:
        """Lowercase file extensions (with leading dot) handled by this loader."""
        ...

    def load(self, path: PackPath) -> PackLoadResult:
        """Load the pack stored at path.

        Args:
            path: Pack file location

        Returns:
            PackLoadResult; result.pack is None unless the file described
            a pack with a culture identity
        """
        ...


@dataclass(frozen=True, slots=True)
class PackLoadResult:
    """Result of loading a single pack file.

    Attributes:
        path: Pack file location
        status: Load status (success, empty, unsupported, error)
        pack: Loaded pack (SUCCESS and EMPTY only)
        error: Exception if status is ERROR, None otherwise
    """

    path: Path
    status: LoadStatus
    pack: LanguagePack | None = None
    error: Exception | None = None

    @property
    def culture_id(self) -> CultureId | None:
        """Culture of the loaded pack, if any."""
        return self.pack.culture_id if self.pack is not None else None

    @property
    def is_success(self) -> bool:
        """Check if the file produced a registrable pack."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_empty(self) -> bool:
        """Check if the file parsed but held no items."""
        return self.status == LoadStatus.EMPTY

    @property
    def is_unsupported(self) -> bool:
        """Check if the file was skipped for its extension."""
        return self.status == LoadStatus.UNSUPPORTED

    @property
    def is_error(self) -> bool:
        """Check if the load failed with an error."""
        return self.status == LoadStatus.ERROR


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of pack load results from a directory scan.

    All statistics are computed properties derived from the ``results``
    tuple.

    Attributes:
        results: All individual load results (immutable tuple)

    Example:
        >>> summary = session.initialize("Assets", "en-us")
        >>> if summary.has_errors:
        ...     for result in summary.get_errors():
        ...         print(f"Failed: {result.path}: {result.error}")
    """

    results: tuple[PackLoadResult, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadSummary(total={self.total_attempted}, "
            f"ok={self.successful}, "
            f"empty={self.empty}, "
            f"unsupported={self.unsupported}, "
            f"errors={self.errors})"
        )

    @property
    def total_attempted(self) -> int:
        """Total number of load attempts."""
        return len(self.results)

    @property
    def successful(self) -> int:
        """Number of files that produced a registrable pack."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def empty(self) -> int:
        """Number of files that parsed to an empty pack."""
        return sum(1 for r in self.results if r.is_empty)

    @property
    def unsupported(self) -> int:
        """Number of files skipped for their extension."""
        return sum(1 for r in self.results if r.is_unsupported)

    @property
    def errors(self) -> int:
        """Number of load errors."""
        return sum(1 for r in self.results if r.is_error)

    @property
    def has_errors(self) -> bool:
        """Check if any file failed to load."""
        return self.errors > 0

    @property
    def all_successful(self) -> bool:
        """Check if every attempted file produced a registrable pack."""
        return self.successful == self.total_attempted

    def get_successful(self) -> tuple[PackLoadResult, ...]:
        """Get all successful load results."""
        return tuple(r for r in self.results if r.is_success)

    def get_errors(self) -> tuple[PackLoadResult, ...]:
        """Get all results with errors."""
        return tuple(r for r in self.results if r.is_error)

    def get_by_culture(self, culture_id: CultureId) -> tuple[PackLoadResult, ...]:
        """Get all results whose pack declares culture_id (case-insensitive)."""
        wanted = normalize_culture_id(culture_id)
        return tuple(
            r for r in self.results if r.pack is not None and r.pack.key == wanted
        )


# ============================================================================
# FILE LOADERS
# ============================================================================


class _FilePackLoader:
    """Shared read/validate/build pipeline for text-based pack formats.

    Subclasses implement _parse(), turning the raw file bytes into the header
    fields and the two-level table, raising PackLoadError on bad input.
    """

    __slots__ = ("_max_file_size",)

    format: ClassVar[PackFormat]
    extensions: ClassVar[tuple[str, ...]]

    def __init__(self, max_file_size: int = MAX_PACK_FILE_SIZE) -> None:
        """Initialize loader.

        Args:
            max_file_size: Largest file read, in bytes
        """
        self._max_file_size = max_file_size

    def __repr__(self) -> str:
        return f"{type(self).__name__}(max_file_size={self._max_file_size})"

    def load(self, path: PackPath) -> PackLoadResult:
        """Load the pack stored at path. Never raises."""
        file_path = Path(path)
        try:
            pack = self._build(file_path)
        except PackLoadError as e:
            logger.warning("Failed to load %s pack %s: %s", self.format, file_path, e)
            return PackLoadResult(path=file_path, status=LoadStatus.ERROR, error=e)

        if pack.is_empty:
            logger.debug("Pack %s (%s) holds no items", file_path, pack.culture_id)
            return PackLoadResult(path=file_path, status=LoadStatus.EMPTY, pack=pack)

        logger.debug(
            "Loaded pack %s: culture=%s, groups=%d, items=%d",
            file_path,
            pack.culture_id,
            len(pack.data),
            pack.item_count,
        )
        return PackLoadResult(path=file_path, status=LoadStatus.SUCCESS, pack=pack)

    def _build(self, path: Path) -> LanguagePack:
        source = self._read(path)
        header, data = self._parse(source, str(path))

        culture_id = (header.get(FIELD_CULTURE_ID) or "").strip()
        # "@x" or ".utf8" strip down to an empty registry key
        if not normalize_culture_id(culture_id):
            raise PackLoadError(ErrorTemplate.pack_identity_missing(str(path)))

        return LanguagePack(
            culture_id,
            data,
            culture_name=header.get(FIELD_CULTURE_NAME) or None,
            english_name=header.get(FIELD_ENGLISH_NAME) or None,
            version=header.get(FIELD_VERSION) or None,
        )

    def _read(self, path: Path) -> bytes:
        try:
            size = path.stat().st_size
            if size > self._max_file_size:
                raise PackLoadError(
                    ErrorTemplate.pack_too_large(str(path), size, self._max_file_size)
                )
            return path.read_bytes()
        except OSError as e:
            raise PackLoadError(ErrorTemplate.pack_read_failed(str(path), str(e))) from e

    def _parse(
        self, source: bytes, location: str
    ) -> tuple[dict[str, str], dict[str, dict[str, str]]]:
        raise NotImplementedError


class XmlPackLoader(_FilePackLoader):
    """Loader for markup packs.

    Format:
        <LanguagePack CultureId="id-id" CultureName="Indonesia"
                      EnglishName="Indonesian" Version="1.0">
          <Group Id="10">
            <Item Id="Header">Halo</Item>
          </Group>
          <Group Id="11" Title="Judul" />
        </LanguagePack>

    Header fields are attributes of the root element (its tag name is not
    checked). Every child element of the root is a group identified by its
    Id attribute. A group's items are its child elements (Id attribute,
    text content) plus its attributes other than Id.
    """

    __slots__ = ()

    format = PackFormat.XML
    extensions = (XML_EXTENSION,)

    def _parse(
        self, source: bytes, location: str
    ) -> tuple[dict[str, str], dict[str, dict[str, str]]]:
        try:
            # Bytes, so expat honours the declared encoding and any BOM
            root = ET.fromstring(source)
        except ET.ParseError as e:
            raise PackLoadError(ErrorTemplate.pack_parse_failed(location, str(e))) from e

        header = dict(root.attrib)
        data: dict[str, dict[str, str]] = {}
        for group in root:
            group_key = group.get(FIELD_ID)
            if not group_key:
                detail = f"<{group.tag}> element without {FIELD_ID} attribute"
                raise PackLoadError(ErrorTemplate.pack_shape_invalid(location, detail))

            items = data.setdefault(group_key, {})
            for name, value in group.attrib.items():
                if name != FIELD_ID:
                    items[name] = value
            for item in group:
                item_key = item.get(FIELD_ID)
                if not item_key:
                    detail = (
                        f"<{item.tag}> in group '{group_key}' without {FIELD_ID} attribute"
                    )
                    raise PackLoadError(ErrorTemplate.pack_shape_invalid(location, detail))
                items[item_key] = item.text or ""
        return header, data


class JsonPackLoader(_FilePackLoader):
    """Loader for JSON packs.

    Format:
        {
          "CultureId": "en-us",
          "CultureName": "English (United States)",
          "EnglishName": "English (United States)",
          "Version": "1.0",
          "Data": {"10": {"Header": "Hello"}}
        }

    Item values must be strings; numbers and booleans are kept as their
    JSON text ("42", "true"). Any other value is a structure error.
    """

    __slots__ = ()

    format = PackFormat.JSON
    extensions = (JSON_EXTENSION,)

    def _parse(
        self, source: bytes, location: str
    ) -> tuple[dict[str, str], dict[str, dict[str, str]]]:
        try:
            text = source.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise PackLoadError(ErrorTemplate.pack_read_failed(location, str(e))) from e
        try:
            document: Any = json.loads(text)
        except (json.JSONDecodeError, RecursionError) as e:
            raise PackLoadError(ErrorTemplate.pack_parse_failed(location, str(e))) from e

        if not isinstance(document, dict):
            detail = f"top level must be an object, got {type(document).__name__}"
            raise PackLoadError(ErrorTemplate.pack_shape_invalid(location, detail))

        header: dict[str, str] = {}
        for name in (FIELD_CULTURE_ID, FIELD_CULTURE_NAME, FIELD_ENGLISH_NAME, FIELD_VERSION):
            value = document.get(name)
            if value is not None:
                header[name] = self._scalar(value, name, location)

        groups = document.get(FIELD_DATA, {})
        if not isinstance(groups, dict):
            detail = f"'{FIELD_DATA}' must be an object, got {type(groups).__name__}"
            raise PackLoadError(ErrorTemplate.pack_shape_invalid(location, detail))

        data: dict[str, dict[str, str]] = {}
        for group_key, items in groups.items():
            if not isinstance(items, dict):
                detail = f"group '{group_key}' must be an object, got {type(items).__name__}"
                raise PackLoadError(ErrorTemplate.pack_shape_invalid(location, detail))
            data[group_key] = {
                item_key: self._scalar(value, f"{group_key}/{item_key}", location)
                for item_key, value in items.items()
            }
        return header, data

    @staticmethod
    def _scalar(value: object, name: str, location: str) -> str:
        match value:
            case str():
                return value
            case bool() | int() | float():
                return json.dumps(value)
            case _:
                detail = f"'{name}' must be a string, got {type(value).__name__}"
                raise PackLoadError(ErrorTemplate.pack_shape_invalid(location, detail))


class NullPackLoader:
    """Loader for unrecognized formats.

    load() performs no I/O and returns LoadStatus.UNSUPPORTED without a
    pack, so incidental files in a pack directory (README, images) are
    skipped instead of aborting the scan.
    """

    __slots__ = ()

    format = PackFormat.NULL
    extensions: tuple[str, ...] = ()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def load(self, path: PackPath) -> PackLoadResult:
        """Skip path. Never raises."""
        file_path = Path(path)
        logger.debug("Skipping %s: no loader for extension %r", file_path, file_path.suffix)
        return PackLoadResult(path=file_path, status=LoadStatus.UNSUPPORTED)


# ============================================================================
# DISPATCH
# ============================================================================


def loader_for_path(path: PackPath, max_file_size: int = MAX_PACK_FILE_SIZE) -> PackLoader:
    """Select the loader for path by file extension (case-insensitive).

    Pure function of the extension: no file system access.

    Args:
        path: Pack file location
        max_file_size: Largest file the returned loader reads, in bytes

    Returns:
        XmlPackLoader, JsonPackLoader, or NullPackLoader

    Example:
        >>> loader_for_path("Assets/en-us.JSON")
        JsonPackLoader(max_file_size=10485760)
        >>> loader_for_path("Assets/readme.txt")
        NullPackLoader()
    """
    match Path(path).suffix.lower():
        case ".xml":
            return XmlPackLoader(max_file_size)
        case ".json":
            return JsonPackLoader(max_file_size)
        case _:
            return NullPackLoader()


def load_pack(path: PackPath, max_file_size: int = MAX_PACK_FILE_SIZE) -> PackLoadResult:
    """Dispatch path to its loader and load it. Never raises."""
    return loader_for_path(path, max_file_size).load(path)
