"""Destination path helpers for generated pages."""

import os
from typing import List


STYLESHEET_NAME = "docco.css"


def relative_source(source: str) -> str:
    """
    Normalise a source path so it can be mirrored below the output root.

    Absolute anchors and leading ".." components are dropped so pages never
    land outside the output directory.
    """
    _, tail = os.path.splitdrive(os.path.normpath(source))
    parts: List[str] = [part for part in tail.split(os.sep) if part not in ("", ".", "..")]
    return os.path.join(*parts) if parts else os.path.basename(source)


def destination(source: str, output_dir: str, dirs: bool = False) -> str:
    """
    Compute the HTML path for a source file.

    With dirs off, `lib/example.py` becomes `docs/example.html`; with dirs on
    it becomes `docs/lib/example.html`.
    """
    name = relative_source(source) if dirs else os.path.basename(source)
    stem = os.path.splitext(name)[0]
    return os.path.join(output_dir, stem + ".html")


def stylesheet_path(output_dir: str) -> str:
    return os.path.join(output_dir, STYLESHEET_NAME)


def relative_link(target: str, page: str) -> str:
    """Link from the page at `page` to the file at `target`, using forward slashes."""
    link = os.path.relpath(target, os.path.dirname(page) or ".")
    return link.replace(os.sep, "/")


def depth(page: str, output_dir: str) -> int:
    rel = os.path.relpath(os.path.dirname(page) or ".", output_dir)
    if rel == os.curdir:
        return 0
    return len(rel.split(os.sep))


__all__ = [
    "STYLESHEET_NAME",
    "destination",
    "depth",
    "relative_link",
    "relative_source",
    "stylesheet_path",
]
