"""Batch syntax highlighting through one external Pygments process.

All code fragments of a file are joined with the language's divider
comment, highlighted in a single process round trip, and split back apart
on the divider markup. One spawn per file keeps lexer state intact across
fragment boundaries.
"""

import re
import subprocess
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from ingestion.models import Language, Section
from shared.config import DoccoConfig
from shared.exceptions import DividerMismatchError, HighlighterError

from .markup import MarkupRenderer


HIGHLIGHT_START = '<div class="highlight"><pre>'
HIGHLIGHT_END = "</pre></div>"

# Pygments >= 2.7 emits an empty span right after <pre>
WRAPPER_RE = re.compile(
    r'^\s*<div class="highlight"><pre>(?:<span></span>)?(?P<body>.*?)</pre></div>\s*$',
    re.S,
)


@dataclass
class ProcessResult:
    """Captured output of one highlighter invocation."""

    returncode: int
    stdout: bytes
    stderr: bytes


Runner = Callable[[List[str], bytes], ProcessResult]


def run_process(command: List[str], stdin: bytes) -> ProcessResult:
    """Run the highlighter, feeding stdin and collecting both output streams."""
    try:
        completed = subprocess.run(command, input=stdin, capture_output=True, check=False)
    except OSError as e:
        raise HighlighterError(f"could not start highlighter {command[0]!r}: {e}") from e
    return ProcessResult(completed.returncode, completed.stdout, completed.stderr)


class BatchHighlighter:
    """
    Fill in docs_html and code_html for a file's sections.

    Example:
        >>> highlighter = BatchHighlighter(config)
        >>> sections = highlighter.highlight(language, sectionize(language, text))
        >>> sections[0].code_html.startswith('<div class="highlight">')
        True
    """

    def __init__(
        self,
        config: Optional[DoccoConfig] = None,
        renderer: Optional[MarkupRenderer] = None,
        runner: Optional[Runner] = None,
    ):
        self.config = config or DoccoConfig()
        self.renderer = renderer or MarkupRenderer(self.config.markdown_extensions)
        self.runner = runner or run_process

    def command_for(self, language: Language) -> List[str]:
        return list(self.config.highlighter) + [
            "-l",
            language.name,
            "-f",
            "html",
            "-O",
            f"encoding={self.config.encoding}",
        ]

    def run(self, language: Language, text: str) -> str:
        """
        Highlight one combined blob and return the body inside the wrapper.

        Raises:
            HighlighterError: process failed, exited non-zero, or gave no usable output
        """
        encoding = self.config.encoding
        result = self.runner(self.command_for(language), text.encode(encoding))
        stderr = result.stderr.decode(encoding, errors="replace").strip()
        if result.returncode != 0:
            raise HighlighterError(
                f"highlighter exited with status {result.returncode} for {language.name}"
                + (f": {stderr}" if stderr else ""),
                stderr=stderr,
            )
        if stderr:
            print(f"[warn] highlighter: {stderr}")

        output = result.stdout.decode(encoding, errors="replace")
        if not output.strip():
            raise HighlighterError(f"highlighter produced no output for {language.name}", stderr=stderr)

        match = WRAPPER_RE.match(output)
        if not match:
            raise HighlighterError(
                f"unexpected highlighter output for {language.name}: {output[:80]!r}", stderr=stderr
            )
        return match.group("body")

    def highlight_code(self, language: Language, fragments: Sequence[str]) -> List[str]:
        """Highlight code fragments in one batch, returning one HTML block per fragment."""
        body = self.run(language, language.divider_text.join(fragments))
        pieces = language.divider_pattern.split(body)
        if len(pieces) != len(fragments):
            raise DividerMismatchError(language.name, len(fragments), len(pieces))
        return [HIGHLIGHT_START + piece + HIGHLIGHT_END for piece in pieces]

    def highlight(self, language: Language, sections: List[Section]) -> List[Section]:
        code_blocks = self.highlight_code(language, [section.code_text for section in sections])
        for section, code_html in zip(sections, code_blocks):
            section.code_html = code_html
            section.docs_html = self.renderer.render(section.docs_text)
        return sections

    def verify_divider(self, language: Language) -> bool:
        """
        Round-trip two fragments through the real highlighter.

        Raises DividerMismatchError when the divider markup is not recognised,
        which usually means DOCCO_DIVIDER_CLASSES needs the lexer's comment class.
        """
        self.highlight_code(language, ["first\n", "second\n"])
        return True


__all__ = [
    "BatchHighlighter",
    "ProcessResult",
    "Runner",
    "run_process",
    "HIGHLIGHT_START",
    "HIGHLIGHT_END",
]
