from __future__ import annotations

from .corpus import TERMINATORS, generate_corpus_files, generate_sources
from .locations import all_positions, collect_spans, walk_spans

__all__ = [
    "TERMINATORS",
    "all_positions",
    "collect_spans",
    "generate_corpus_files",
    "generate_sources",
    "walk_spans",
]
