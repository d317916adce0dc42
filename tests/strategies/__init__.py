"""Hypothesis strategies for langpacks property-based testing.

Usage:
    from tests.strategies import pack_tables, culture_id_spellings

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - culture_id_spellings, pack_tables
"""

from .packs import (
    canonical_culture_ids,
    culture_id_spellings,
    json_pack_documents,
    pack_keys,
    pack_tables,
    pack_values,
)

__all__ = [
    "canonical_culture_ids",
    "culture_id_spellings",
    "json_pack_documents",
    "pack_keys",
    "pack_tables",
    "pack_values",
]
