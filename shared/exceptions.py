"""Exception hierarchy shared by every layer."""

from typing import Optional


class DoccoError(Exception):
    """Base class for failures that abort a documentation run."""


class SourceReadError(DoccoError):
    """A source file could not be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"could not read {path}: {reason}")
        self.path = path


class HighlighterError(DoccoError):
    """The external highlighter could not be started or produced no output."""

    def __init__(self, message: str, stderr: Optional[str] = None):
        super().__init__(message)
        self.stderr = stderr


class DividerMismatchError(DoccoError):
    """
    Highlighted output did not split back into one fragment per section.

    Either a source line collided with the divider comment, or the
    highlighter wrapped the divider in a CSS class the divider pattern
    does not accept (see DOCCO_DIVIDER_CLASSES).
    """

    def __init__(self, language: str, expected: int, actual: int):
        super().__init__(
            f"{language}: highlighted output split into {actual} fragments, expected {expected}"
        )
        self.language = language
        self.expected = expected
        self.actual = actual


class OutputWriteError(DoccoError):
    """A generated page or stylesheet could not be written."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"could not write {path}: {reason}")
        self.path = path


__all__ = [
    "DoccoError",
    "SourceReadError",
    "HighlighterError",
    "DividerMismatchError",
    "OutputWriteError",
]
