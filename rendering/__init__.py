"""Rendering layer: destination paths, page template, stylesheet.

Rules:
- MAY import ingestion (models)
- MUST NOT spawn processes or import api
"""

from .page import PageAssembler, PageContext, stylesheet
from .paths import STYLESHEET_NAME, depth, destination, relative_link, relative_source, stylesheet_path

__all__ = [
    "PageAssembler",
    "PageContext",
    "stylesheet",
    "STYLESHEET_NAME",
    "destination",
    "depth",
    "relative_link",
    "relative_source",
    "stylesheet_path",
]
