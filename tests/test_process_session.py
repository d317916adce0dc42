"""Tests for the process-wide session and the "group,item" shorthand.

Python 3.13+.
"""

from __future__ import annotations

from pathlib import Path

import pytest

import langpacks
from langpacks.localization import (
    LanguagePack,
    LocalizationSession,
    ScanConfig,
    get_current_session,
    get_string,
    initialize,
    localize,
    set_current_session,
)


class TestCurrentSession:
    """Lazy process-wide session."""

    def test_created_lazily_and_reused(self) -> None:
        set_current_session(None)
        try:
            first = get_current_session()
            assert get_current_session() is first
        finally:
            set_current_session(None)

    def test_installed_session_is_used(self, current_session: LocalizationSession) -> None:
        assert get_current_session() is current_session

    def test_initialize_and_get_string(
        self, current_session: LocalizationSession, assets_dir: Path, scan_config: ScanConfig
    ) -> None:
        summary = initialize(assets_dir, "id-id", config=scan_config)
        assert summary.successful == 2
        assert get_string("10", "Header", "x") == "Halo"
        assert get_string("10", "Missing", "x") == "x"
        assert current_session.culture == "id-id"

    def test_top_level_exports(
        self, current_session: LocalizationSession, en_pack: LanguagePack
    ) -> None:
        current_session.set_pack(en_pack)
        assert langpacks.get_string("10", "Header") == "Hello"
        assert langpacks.localize("10,Header") == "Hello"


class TestLocalize:
    """Shorthand lookups."""

    def test_shorthand_hit(
        self, current_session: LocalizationSession, en_pack: LanguagePack
    ) -> None:
        current_session.set_pack(en_pack)
        assert localize("10,Header") == "Hello"

    def test_shorthand_miss_returns_fallback(
        self, current_session: LocalizationSession, en_pack: LanguagePack
    ) -> None:
        current_session.set_pack(en_pack)
        assert localize("10,Missing", "fb") == "fb"

    @pytest.mark.parametrize("text", ["", None])
    def test_empty_text_returns_empty_not_fallback(
        self, current_session: LocalizationSession, text: str | None
    ) -> None:
        assert localize(text, "fb") == ""

    def test_missing_separator_raises(self, current_session: LocalizationSession) -> None:
        with pytest.raises(IndexError):
            localize("10Header")

    def test_custom_separator(
        self, current_session: LocalizationSession, en_pack: LanguagePack
    ) -> None:
        current_session.set_pack(en_pack)
        assert localize("MainWindow|Title", separator="|") == "Main window"

    def test_extra_parts_ignored(
        self, current_session: LocalizationSession, en_pack: LanguagePack
    ) -> None:
        current_session.set_pack(en_pack)
        assert localize("10,Header,ignored") == "Hello"

    def test_explicit_session(self, en_pack: LanguagePack, session: LocalizationSession) -> None:
        session.set_pack(en_pack)
        assert localize("10,Count", session=session) == "42"
