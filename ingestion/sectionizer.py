"""Split source text into ordered comment/code sections."""

from typing import List

from .models import Language, Section


class Sectionizer:
    """
    Single forward pass classifier driven by a language's comment prefix.

    A new section opens only when a comment line follows at least one code
    line; consecutive comment lines share one docs block. The final state is
    always sealed, so the result is never empty.
    """

    def __init__(self, language: Language):
        self.language = language

    @staticmethod
    def split_lines(source: str) -> List[str]:
        source = source.replace("\r\n", "\n")
        lines = source.split("\n")
        # a final newline terminates the last line instead of adding an empty one
        if lines and lines[-1] == "":
            lines.pop()
        return lines

    def sectionize(self, source: str) -> List[Section]:
        sections: List[Section] = []
        has_code = False
        docs_text = ""
        code_text = ""

        for line in self.split_lines(source):
            if self.language.is_comment(line):
                if has_code:
                    sections.append(Section(docs_text=docs_text, code_text=code_text))
                    has_code = False
                    docs_text = ""
                    code_text = ""
                docs_text += self.language.strip_comment(line) + "\n"
            else:
                has_code = True
                code_text += line + "\n"

        sections.append(Section(docs_text=docs_text, code_text=code_text))
        return sections


def sectionize(language: Language, source: str) -> List[Section]:
    return Sectionizer(language).sectionize(source)


__all__ = ["Sectionizer", "sectionize"]
