"""Shared configuration and errors for the docco generator."""

from .config import DoccoConfig, load_config
from .exceptions import (
    DividerMismatchError,
    DoccoError,
    HighlighterError,
    OutputWriteError,
    SourceReadError,
)

__all__ = [
    "load_config",
    "DoccoConfig",
    "DoccoError",
    "SourceReadError",
    "HighlighterError",
    "DividerMismatchError",
    "OutputWriteError",
]
