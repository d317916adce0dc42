"""String-to-type conversion for pack values.

Pack values are always stored as strings. Typed lookups convert the raw
string into the requested type through a ConverterRegistry: a mapping from
target type to a callable accepting the raw string.

Built-in converters parse canonical (culture-invariant) forms:
    str              - returned unchanged
    int              - decimal, or hexadecimal with "0x" / "#" prefix
    float, Decimal   - Python literal syntax
    bool             - "true" / "false", case-insensitive
    date, datetime,
    time             - ISO 8601
    Path             - filesystem path
    babel.Locale     - culture identifier in any common spelling
    Enum subclasses  - member name (case-insensitive), then member value

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from enum import Enum
from functools import partial
from pathlib import Path
from typing import Any, TypeAlias

from langpacks.diagnostics import ConversionError, ErrorTemplate

__all__ = [
    "ANY_TYPES",
    "ConverterRegistry",
    "convert_string",
    "default_converters",
    "is_any_type",
]

Converter: TypeAlias = Callable[[str], object]
"""Callable turning a raw pack string into a typed value."""

# Target types meaning "no conversion requested": the raw string is returned.
ANY_TYPES: tuple[object, ...] = (object, Any)


def is_any_type(target_type: object) -> bool:
    """Check whether target_type requests the raw, unconverted string."""
    return any(target_type is candidate for candidate in ANY_TYPES)


def _to_int(raw: str) -> int:
    text = raw.strip()
    sign = ""
    if text[:1] in ("+", "-"):
        sign, text = text[0], text[1:]
    if text[:2].lower() == "0x":
        return int(sign + text[2:], 16)
    if text.startswith("#"):
        return int(sign + text[1:], 16)
    return int(sign + text)


def _to_bool(raw: str) -> bool:
    match raw.strip().lower():
        case "true":
            return True
        case "false":
            return False
        case _:
            msg = f"{raw!r} is not a valid value for bool"
            raise ValueError(msg)


def _to_decimal(raw: str) -> Decimal:
    try:
        return Decimal(raw.strip())
    except InvalidOperation as e:
        msg = f"{raw!r} is not a valid decimal"
        raise ValueError(msg) from e


def _to_locale(raw: str) -> object:
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    from langpacks.locale_utils import get_babel_locale  # noqa: PLC0415

    try:
        return get_babel_locale(raw)
    except UnknownLocaleError as e:
        msg = f"unknown locale {raw!r}"
        raise ValueError(msg) from e


def _to_enum(enum_type: type[Enum], raw: str) -> Enum:
    text = raw.strip()
    for member in enum_type:
        if member.name.lower() == text.lower():
            return member
    for member in enum_type:
        if str(member.value) == text:
            return member
    msg = f"{raw!r} is not a member of {enum_type.__name__}"
    raise ValueError(msg)


def default_converters() -> dict[type, Converter]:
    """Build the built-in converter table.

    Returns:
        Fresh dict mapping target types to converters
    """
    from babel import Locale  # noqa: PLC0415

    return {
        str: str,
        int: _to_int,
        float: lambda raw: float(raw.strip()),
        Decimal: _to_decimal,
        bool: _to_bool,
        date: lambda raw: date.fromisoformat(raw.strip()),
        datetime: lambda raw: datetime.fromisoformat(raw.strip()),
        time: lambda raw: time.fromisoformat(raw.strip()),
        Path: Path,
        Locale: _to_locale,
    }


class ConverterRegistry:
    """Registry of string converters keyed by target type.

    Lookup order for a target type:
    1. Exact registered type
    2. Enum subclasses (by member name, then value)
    3. Unsupported: ConversionError

    Matching is exact: bool is a subclass of int, and a pack value
    "1" requested as bool must not be parsed as an int.

    Example:
        >>> registry = ConverterRegistry()
        >>> registry.convert("42", int)
        42
        >>> registry.register(complex, complex)
        >>> registry.convert("1+2j", complex)
        (1+2j)
    """

    __slots__ = ("_converters",)

    def __init__(self, converters: dict[type, Converter] | None = None) -> None:
        """Initialize registry.

        Args:
            converters: Initial converter table. Defaults to the built-ins.
        """
        self._converters: dict[type, Converter] = (
            dict(converters) if converters is not None else default_converters()
        )

    def register(self, target_type: type, converter: Converter) -> None:
        """Register (or replace) the converter for target_type."""
        self._converters[target_type] = converter

    def supports(self, target_type: object) -> bool:
        """Check whether target_type can be produced by this registry."""
        if is_any_type(target_type):
            return True
        if not isinstance(target_type, type):
            return False
        return target_type in self._converters or issubclass(target_type, Enum)

    def convert(self, raw: str, target_type: object) -> Any:
        """Convert raw into target_type.

        Args:
            raw: Stored pack string
            target_type: Requested type; object / Any return raw unchanged

        Returns:
            Converted value

        Raises:
            ConversionError: If no converter exists or the converter fails
        """
        if is_any_type(target_type):
            return raw

        type_name = getattr(target_type, "__name__", repr(target_type))
        result_type = target_type if isinstance(target_type, type) else None
        try:
            converter = self._converters.get(target_type)  # type: ignore[arg-type]
        except TypeError:
            # Unhashable target (e.g. a list): never registered
            converter = None
        if converter is None:
            if isinstance(target_type, type) and issubclass(target_type, Enum):
                converter = partial(_to_enum, target_type)
            else:
                raise ConversionError(
                    ErrorTemplate.conversion_unsupported(type_name), target_type=result_type
                )

        try:
            return converter(raw)
        except Exception as e:  # pylint: disable=broad-exception-caught
            raise ConversionError(
                ErrorTemplate.conversion_failed(raw, type_name, str(e)), target_type=result_type
            ) from e


_DEFAULT_REGISTRY: ConverterRegistry | None = None


def _default_registry() -> ConverterRegistry:
    global _DEFAULT_REGISTRY  # noqa: PLW0603
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = ConverterRegistry()
    return _DEFAULT_REGISTRY


def convert_string(
    raw: str, target_type: object, registry: ConverterRegistry | None = None
) -> Any:
    """Convert raw into target_type using registry (or the shared built-ins).

    Raises:
        ConversionError: If no converter exists or the converter fails
    """
    return (registry or _default_registry()).convert(raw, target_type)
