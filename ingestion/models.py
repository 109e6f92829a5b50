"""Data models for ingestion layer."""

from dataclasses import dataclass
from typing import Optional, Pattern


@dataclass(frozen=True)
class Language:
    """
    Static description of one supported source language.

    Every pattern is derived from the comment symbol when the registry is
    built; instances are never mutated afterwards.
    """

    extension: str
    name: str  # Pygments lexer name, e.g. "python", "coffee-script"
    symbol: str  # comment-line prefix, e.g. "#", "//", "--"
    comment_matcher: Pattern[str]
    comment_filter: Pattern[str]
    divider_text: str
    divider_pattern: Pattern[str]

    def is_comment(self, line: str) -> bool:
        return bool(self.comment_matcher.match(line)) and not self.comment_filter.search(line)

    def strip_comment(self, line: str) -> str:
        return self.comment_matcher.sub("", line, count=1)


@dataclass
class Section:
    """
    One comment run paired with the code run that follows it.

    docs_html/code_html stay None until the highlighting stage fills them.
    """

    docs_text: str = ""
    code_text: str = ""
    docs_html: Optional[str] = None
    code_html: Optional[str] = None


__all__ = ["Language", "Section"]
