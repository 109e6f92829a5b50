"""Comment markup rendering."""

from typing import Optional, Sequence

from markdown import markdown


class MarkupRenderer:
    """Render comment text as HTML through Python-Markdown."""

    def __init__(self, extensions: Optional[Sequence[str]] = None):
        self.extensions = list(extensions) if extensions is not None else ["tables", "fenced_code"]

    def render(self, text: str) -> str:
        if not text.strip():
            return ""
        return markdown(text, extensions=self.extensions)


__all__ = ["MarkupRenderer"]
