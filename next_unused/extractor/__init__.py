"""Module reference extraction."""

from __future__ import annotations

from next_unused.extractor.reference_extractor import ReferenceExtractor

__all__ = [
    "ReferenceExtractor",
]
