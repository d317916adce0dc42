"""Tests for PackRegistry: registration, replacement and resolution.

Python 3.13+.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest
from hypothesis import given

from langpacks.diagnostics import InvalidArgumentError
from langpacks.localization import LanguagePack, PackRegistry
from tests.strategies import culture_id_spellings


def _pack(culture_id: str, value: str = "v") -> LanguagePack:
    return LanguagePack(
        culture_id, {"g": {"i": value}}, culture_name=culture_id, english_name=culture_id
    )


class TestRegister:
    """register() and replacement."""

    def test_register_and_get(self, registry: PackRegistry) -> None:
        pack = _pack("en-us")
        registry.register(pack)
        assert registry.get("en-us") is pack
        assert len(registry) == 1
        assert "en-us" in registry

    def test_replacement_last_writer_wins(
        self, registry: PackRegistry, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.INFO, logger="langpacks.localization.registry")
        first, second = _pack("en-us", "old"), _pack("EN-US", "new")
        registry.register(first)
        registry.register(second)
        assert registry.get("en-us") is second
        assert len(registry) == 1
        assert "Replaced language pack" in caplog.text

    def test_register_none(self, registry: PackRegistry) -> None:
        with pytest.raises(InvalidArgumentError):
            registry.register(None)  # type: ignore[arg-type]

    def test_register_without_culture(self, registry: PackRegistry) -> None:
        with pytest.raises(InvalidArgumentError, match="culture id"):
            registry.register(LanguagePack("", {"g": {"i": "v"}}))

    def test_invalid_argument_is_value_error(self, registry: PackRegistry) -> None:
        with pytest.raises(ValueError):
            registry.register(None)  # type: ignore[arg-type]

    def test_iteration_in_registration_order(self, registry: PackRegistry) -> None:
        packs = [_pack("id-id"), _pack("en-us"), _pack("de-de")]
        for pack in packs:
            registry.register(pack)
        assert list(registry) == packs
        assert registry.cultures == ("id-id", "en-us", "de-de")


class TestResolve:
    """resolve() and the Default pack."""

    def test_unknown_culture_resolves_default(
        self, registry: PackRegistry, default_pack: LanguagePack
    ) -> None:
        registry.register(_pack("en-us"))
        assert registry.resolve("zz-ZZ") is default_pack
        assert registry.get("zz-ZZ") is None

    @pytest.mark.parametrize("culture_id", [None, "", 42])
    def test_absent_ids_resolve_default(
        self, registry: PackRegistry, default_pack: LanguagePack, culture_id: object
    ) -> None:
        assert registry.resolve(culture_id) is default_pack  # type: ignore[arg-type]
        assert culture_id not in registry

    def test_unregister(self, registry: PackRegistry) -> None:
        pack = _pack("en-us")
        registry.register(pack)
        assert registry.unregister("en_US") is pack
        assert registry.unregister("en-us") is None
        assert registry.resolve("en-us") is registry.default_pack

    def test_clear_keeps_default(self, registry: PackRegistry, default_pack: LanguagePack) -> None:
        registry.register(_pack("en-us"))
        registry.clear()
        assert len(registry) == 0
        assert registry.default_pack is default_pack

    def test_default_pack_from_host_culture(self) -> None:
        with patch(
            "langpacks.localization.pack.get_system_culture", return_value="de-de"
        ):
            registry = PackRegistry()
        assert registry.default_pack.culture_id == "de-de"
        assert registry.default_pack.english_name == "German (Germany)"
        assert registry.default_pack.is_empty

    @given(culture_id_spellings())
    def test_any_spelling_resolves_registered_pack(self, spellings: tuple[str, str]) -> None:
        canonical, spelling = spellings
        registry = PackRegistry(_pack("xx-xx"))
        pack = _pack(canonical)
        registry.register(pack)
        assert registry.resolve(spelling) is pack
        assert registry.resolve(canonical) is pack
