"""Tests for conversion.py: ConverterRegistry and convert_string.

Python 3.13+.
"""

from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum, IntEnum
from pathlib import Path
from typing import Any

import pytest
from babel import Locale
from hypothesis import given
from hypothesis import strategies as st

from langpacks.conversion import ConverterRegistry, convert_string, is_any_type
from langpacks.diagnostics import ConversionError, DiagnosticCode


class Color(Enum):
    RED = "red"
    DARK_BLUE = "dark-blue"


class Level(IntEnum):
    LOW = 1
    HIGH = 2


class TestAnyType:
    """Raw string requests."""

    def test_object_and_any_are_raw(self) -> None:
        assert is_any_type(object)
        assert is_any_type(Any)
        assert not is_any_type(str)

    def test_any_returns_raw_unchanged(self) -> None:
        assert convert_string(" 42 ", object) == " 42 "


class TestBuiltinConverters:
    """Built-in canonical parsers."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("42", 42), (" -7 ", -7), ("0x1F", 31), ("#ff", 255), ("-0x10", -16)],
    )
    def test_int(self, raw: str, expected: int) -> None:
        assert convert_string(raw, int) == expected

    @pytest.mark.parametrize(("raw", "expected"), [("true", True), ("FALSE", False), (" True ", True)])
    def test_bool(self, raw: str, expected: bool) -> None:
        assert convert_string(raw, bool) is expected

    def test_bool_rejects_numbers(self) -> None:
        with pytest.raises(ConversionError):
            convert_string("1", bool)

    def test_float_and_decimal(self) -> None:
        assert convert_string("2.5", float) == 2.5
        assert convert_string("0.10", Decimal) == Decimal("0.10")

    def test_dates(self) -> None:
        assert convert_string("2024-03-01", date) == date(2024, 3, 1)
        assert convert_string("2024-03-01T10:30:00", datetime) == datetime(2024, 3, 1, 10, 30)
        assert convert_string("10:30", time) == time(10, 30)

    def test_path(self) -> None:
        assert convert_string("icons/flag.png", Path) == Path("icons/flag.png")

    def test_locale(self) -> None:
        locale = convert_string("id-ID", Locale)
        assert isinstance(locale, Locale)
        assert locale.language == "id"

    def test_unknown_locale_fails(self) -> None:
        with pytest.raises(ConversionError) as exc_info:
            convert_string("zz-zz", Locale)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.CONVERSION_FAILED

    @given(st.integers())
    def test_int_text_round_trips(self, value: int) -> None:
        assert convert_string(str(value), int) == value


class TestEnumConversion:
    """Enum subclasses convert without registration."""

    def test_member_name_case_insensitive(self) -> None:
        assert convert_string("dark_blue", Color) is Color.DARK_BLUE

    def test_member_value(self) -> None:
        assert convert_string("dark-blue", Color) is Color.DARK_BLUE

    def test_int_enum_value(self) -> None:
        assert convert_string("2", Level) is Level.HIGH

    def test_not_a_member(self) -> None:
        with pytest.raises(ConversionError):
            convert_string("green", Color)


class TestConverterRegistry:
    """Registration, support checks and failure reporting."""

    def test_unsupported_type(self) -> None:
        registry = ConverterRegistry()
        assert not registry.supports(complex)
        with pytest.raises(ConversionError) as exc_info:
            registry.convert("1+2j", complex)
        assert exc_info.value.target_type is complex
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.CONVERSION_UNSUPPORTED

    def test_register_custom(self) -> None:
        registry = ConverterRegistry()
        registry.register(complex, complex)
        assert registry.supports(complex)
        assert registry.convert("1+2j", complex) == complex(1, 2)

    def test_register_does_not_touch_shared_registry(self) -> None:
        ConverterRegistry().register(complex, complex)
        with pytest.raises(ConversionError):
            convert_string("1+2j", complex)

    def test_exact_match_only(self) -> None:
        """bool is an int subclass but never parsed as int."""
        registry = ConverterRegistry({int: int})
        assert not registry.supports(bool)

    def test_supports_enum_and_any(self) -> None:
        registry = ConverterRegistry({})
        assert registry.supports(Color)
        assert registry.supports(object)

    def test_failure_wraps_cause(self) -> None:
        with pytest.raises(ConversionError) as exc_info:
            convert_string("forty-two", int)
        assert isinstance(exc_info.value.__cause__, ValueError)
        assert "forty-two" in str(exc_info.value)

    def test_any_converter_exception_is_wrapped(self) -> None:
        def broken(raw: str) -> object:
            msg = f"cannot build from {raw!r}"
            raise RuntimeError(msg)

        registry = ConverterRegistry({complex: broken})
        with pytest.raises(ConversionError) as exc_info:
            registry.convert("1+2j", complex)
        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.CONVERSION_FAILED

    def test_unhashable_target_is_unsupported(self) -> None:
        registry = ConverterRegistry()
        assert not registry.supports([int])
        with pytest.raises(ConversionError) as exc_info:
            registry.convert("42", [int])
        assert exc_info.value.target_type is None
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.CONVERSION_UNSUPPORTED
