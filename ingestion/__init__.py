"""Ingestion layer for the docco generator.

Handles language detection and comment/code sectioning.

Rules:
- MUST NOT highlight, render markup, or write files
- MUST NOT import highlighting, rendering, api
"""

from .languages import DEFAULT_REGISTRY, LanguageRegistry, build_language, lookup
from .models import Language, Section
from .sectionizer import Sectionizer, sectionize

__all__ = [
    # Models
    "Language",
    "Section",
    # Registry
    "LanguageRegistry",
    "DEFAULT_REGISTRY",
    "build_language",
    "lookup",
    # Sectioning
    "Sectionizer",
    "sectionize",
]
