"""Pytest configuration for the langpacks test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Shared fixtures build pack files in tmp_path and registries with a fixed
Default pack, so results do not depend on the host locale.
"""

from __future__ import annotations

import json
import os
from collections.abc import Iterator
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from langpacks.localization import (
    LanguagePack,
    LocalizationSession,
    PackRegistry,
    ScanConfig,
    set_current_session,
)
from tests.helpers.samples import EN_US_DATA, EN_US_JSON, ID_ID_XML

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

# Development profile: thorough local testing (500 examples, silent)
settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

# CI profile: fast feedback for GitHub Actions (50 examples)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

# Verbose profile: debug mode with progress visibility (100 examples)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# PACK FIXTURES
# =============================================================================


@pytest.fixture
def default_pack() -> LanguagePack:
    """Default pack independent of the host locale."""
    return LanguagePack("en-gb", culture_name="English (UK)", english_name="English (UK)")


@pytest.fixture
def en_pack() -> LanguagePack:
    """Pack matching EN_US_JSON, built in memory."""
    return LanguagePack(
        "en-us", EN_US_DATA, culture_name="English", english_name="English", version="1.0"
    )


@pytest.fixture
def registry(default_pack: LanguagePack) -> PackRegistry:
    return PackRegistry(default_pack)


@pytest.fixture
def session(registry: PackRegistry) -> LocalizationSession:
    return LocalizationSession(registry)


@pytest.fixture
def assets_dir(tmp_path: Path) -> Path:
    """Directory with an en-us JSON pack, an id-id XML pack and a stray file."""
    assets = tmp_path / "Assets"
    assets.mkdir()
    (assets / "en-us.json").write_text(json.dumps(EN_US_JSON), encoding="utf-8")
    (assets / "id-id.XML").write_text(ID_ID_XML, encoding="utf-8")
    (assets / "readme.txt").write_text("not a pack", encoding="utf-8")
    return assets


@pytest.fixture
def scan_config(tmp_path: Path) -> ScanConfig:
    """Scan configuration anchored at tmp_path instead of the pytest script dir."""
    return ScanConfig(base_dir=tmp_path)


@pytest.fixture
def current_session(session: LocalizationSession) -> Iterator[LocalizationSession]:
    """Install session as the process-wide session for one test."""
    set_current_session(session)
    yield session
    set_current_session(None)
