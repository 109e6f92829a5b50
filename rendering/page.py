"""Page assembly from highlighted sections."""

import os
from dataclasses import dataclass
from typing import Callable, List, Sequence

from jinja2 import Environment, PackageLoader, StrictUndefined
from pygments.formatters import HtmlFormatter

from ingestion.models import Section

from . import paths


TEMPLATE_NAME = "docco.jinja2"


@dataclass
class PageContext:
    """Everything the page template binds to."""

    title: str
    sections: List[Section]
    sources: List[str]
    destination: Callable[[str], str]
    depth: int = 0


def _environment() -> Environment:
    env = Environment(
        loader=PackageLoader("rendering", "resources"),
        autoescape=False,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )
    env.filters["basename"] = os.path.basename
    return env


class PageAssembler:
    """Render one source file's sections into a standalone HTML page."""

    def __init__(self, output_dir: str, dirs: bool = False):
        self.output_dir = output_dir
        self.dirs = dirs
        self.env = _environment()
        self.template = self.env.get_template(TEMPLATE_NAME)

    def page_path(self, source: str) -> str:
        return paths.destination(source, self.output_dir, self.dirs)

    def context(self, source: str, sections: List[Section], sources: Sequence[str]) -> PageContext:
        page = self.page_path(source)

        def link(other: str) -> str:
            return paths.relative_link(self.page_path(other), page)

        return PageContext(
            title=os.path.basename(source),
            sections=sections,
            sources=list(sources),
            destination=link,
            depth=paths.depth(page, self.output_dir),
        )

    def render(self, context: PageContext) -> str:
        return self.template.render(page=context, css_name=paths.STYLESHEET_NAME)

    def assemble(self, source: str, sections: List[Section], sources: Sequence[str]) -> str:
        return self.render(self.context(source, sections, sources))


def stylesheet() -> str:
    """Base layout rules followed by the Pygments colour scheme for `.highlight`."""
    env = _environment()
    base = env.loader.get_source(env, paths.STYLESHEET_NAME)[0]
    return base + "\n" + HtmlFormatter().get_style_defs(".highlight") + "\n"


__all__ = ["PageAssembler", "PageContext", "stylesheet"]
