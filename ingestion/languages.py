"""Registry of supported languages keyed by file extension."""

import html
import os
import re
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .models import Language


DIVIDER_WORD = "DIVIDER"

# (extension, Pygments lexer name, comment symbol)
LANGUAGE_TABLE: List[Tuple[str, str, str]] = [
    (".py", "python", "#"),
    (".rb", "ruby", "#"),
    (".coffee", "coffee-script", "#"),
    (".sh", "bash", "#"),
    (".pl", "perl", "#"),
    (".r", "r", "#"),
    (".js", "javascript", "//"),
    (".ts", "typescript", "//"),
    (".go", "go", "//"),
    (".java", "java", "//"),
    (".c", "c", "//"),
    (".h", "c", "//"),
    (".cpp", "cpp", "//"),
    (".rs", "rust", "//"),
    (".lua", "lua", "--"),
    (".hs", "haskell", "--"),
    (".sql", "sql", "--"),
]

DEFAULT_DIVIDER_CLASSES = ("c", "c1", "ch", "cm", "cs")


def divider_text(symbol: str) -> str:
    return f"\n{symbol}{DIVIDER_WORD}\n"


def divider_pattern(symbol: str, css_classes: Sequence[str] = DEFAULT_DIVIDER_CLASSES) -> "re.Pattern[str]":
    """Match the markup the highlighter wraps around one divider comment line."""
    classes = "|".join(re.escape(name) for name in css_classes)
    token = re.escape(html.escape(symbol + DIVIDER_WORD, quote=False))
    return re.compile(rf'\n*<span class="(?:{classes})">{token}</span>\n*')


def build_language(
    extension: str,
    name: str,
    symbol: str,
    css_classes: Sequence[str] = DEFAULT_DIVIDER_CLASSES,
) -> Language:
    escaped = re.escape(symbol)
    return Language(
        extension=extension,
        name=name,
        symbol=symbol,
        comment_matcher=re.compile(rf"^\s*{escaped}\s?"),
        # hashbang lines and "#{...}"-style interpolation stay code
        comment_filter=re.compile(rf"(^#![/]|^\s*{escaped}\{{)"),
        divider_text=divider_text(symbol),
        divider_pattern=divider_pattern(symbol, css_classes),
    )


class LanguageRegistry:
    """Map file extensions to Language descriptors."""

    def __init__(
        self,
        table: Iterable[Tuple[str, str, str]] = LANGUAGE_TABLE,
        css_classes: Sequence[str] = DEFAULT_DIVIDER_CLASSES,
    ):
        self._languages: Dict[str, Language] = {}
        for extension, name, symbol in table:
            self._languages[extension.lower()] = build_language(extension, name, symbol, css_classes)

    def lookup(self, extension: str) -> Optional[Language]:
        """
        Find the language for an extension such as ".py".

        Returns None for unsupported extensions; callers skip those files.
        """
        return self._languages.get(extension.lower())

    def for_path(self, path: str) -> Optional[Language]:
        return self.lookup(os.path.splitext(path)[1])

    def languages(self) -> List[Language]:
        return list(self._languages.values())

    def __contains__(self, extension: str) -> bool:
        return extension.lower() in self._languages


DEFAULT_REGISTRY = LanguageRegistry()


def lookup(extension: str) -> Optional[Language]:
    return DEFAULT_REGISTRY.lookup(extension)


__all__ = [
    "LANGUAGE_TABLE",
    "LanguageRegistry",
    "DEFAULT_REGISTRY",
    "build_language",
    "divider_pattern",
    "divider_text",
    "lookup",
]
