"""Hypothesis strategies for language pack property-based testing.

Provides reusable strategies for generating pack test data:
- Culture ids in BCP-47, POSIX and environment spelling
- Two-level translation tables
- JSON pack documents ready to be written to disk

Event-Emitting Strategies (HypoFuzz-Optimized):
- culture_id_spellings: Emits culture_spelling=bcp47|posix|env|upper
- pack_tables: Emits pack_shape=empty|single|multi

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn, SearchStrategy

# Real cultures with CLDR data, in canonical (registry key) spelling.
_CULTURE_POOL = [
    "en-us", "en-gb", "de-de", "de-at", "fr-fr", "fr-ca",
    "id-id", "ja-jp", "ko-kr", "pt-br", "es-mx", "lv-lv",
]  # fmt: skip

canonical_culture_ids: SearchStrategy[str] = st.sampled_from(_CULTURE_POOL)

pack_keys: SearchStrategy[str] = st.text(
    alphabet=st.characters(codec="utf-8"),
    min_size=1,
    max_size=12,
)

pack_values: SearchStrategy[str] = st.text(max_size=40)


@st.composite
def culture_id_spellings(draw: DrawFn) -> tuple[str, str]:
    """Generate (canonical id, alternative spelling of the same culture)."""
    canonical = draw(canonical_culture_ids)
    language, region = canonical.split("-")
    spelling = draw(st.sampled_from(["bcp47", "posix", "env", "upper"]))
    event(f"culture_spelling={spelling}")
    match spelling:
        case "bcp47":
            return canonical, f"{language}-{region.upper()}"
        case "posix":
            return canonical, f"{language}_{region.upper()}"
        case "env":
            return canonical, f"{language}_{region.upper()}.UTF-8"
        case _:
            return canonical, canonical.upper()


@st.composite
def pack_tables(draw: DrawFn, *, min_groups: int = 0) -> dict[str, dict[str, str]]:
    """Generate a two-level group -> item -> string table."""
    table = draw(
        st.dictionaries(
            pack_keys,
            st.dictionaries(pack_keys, pack_values, max_size=5),
            min_size=min_groups,
            max_size=5,
        )
    )
    items = sum(len(group) for group in table.values())
    event(f"pack_shape={'empty' if items == 0 else 'single' if items == 1 else 'multi'}")
    return table


@st.composite
def json_pack_documents(draw: DrawFn) -> dict[str, object]:
    """Generate a JSON pack document with a culture identity."""
    return {
        "CultureId": draw(canonical_culture_ids),
        "Version": draw(st.sampled_from(["1.0", "2.3.1"])),
        "Data": draw(pack_tables()),
    }
