"""Highlighting layer: batched code highlighting and comment markup.

Rules:
- MAY import ingestion (models) and shared
- MUST NOT import rendering or api
"""

from .bridge import HIGHLIGHT_END, HIGHLIGHT_START, BatchHighlighter, ProcessResult, run_process
from .markup import MarkupRenderer

__all__ = [
    "BatchHighlighter",
    "MarkupRenderer",
    "ProcessResult",
    "run_process",
    "HIGHLIGHT_START",
    "HIGHLIGHT_END",
]
