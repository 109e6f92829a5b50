import html
import re

import pytest

from highlighting.bridge import ProcessResult


DIVIDER_LINE = re.compile(r"^(#|//|--)DIVIDER$")


class FakePygments:
    """
    Stand-in for the pygments process: escapes every line, wraps divider
    comments in the given CSS class, strips surrounding newlines like the
    real lexers do and adds the usual wrapper.
    """

    def __init__(self, css_class="c1", returncode=0, stdout=None, stderr=b""):
        self.css_class = css_class
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.calls = []

    def __call__(self, command, stdin):
        self.calls.append((command, stdin))
        if self.stdout is not None:
            return ProcessResult(self.returncode, self.stdout, self.stderr)
        text = stdin.decode("utf-8").strip("\n") + "\n"
        lines = []
        for line in text.split("\n"):
            if DIVIDER_LINE.match(line):
                lines.append(f'<span class="{self.css_class}">{html.escape(line)}</span>')
            else:
                lines.append(html.escape(line))
        body = "\n".join(lines)
        out = f'<div class="highlight"><pre><span></span>{body}</pre></div>\n'
        return ProcessResult(self.returncode, out.encode("utf-8"), self.stderr)


@pytest.fixture
def fake_pygments():
    return FakePygments()
