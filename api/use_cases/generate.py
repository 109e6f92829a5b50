"""Documentation generation use case.

Drives the per-file pipeline strictly one file at a time:
read -> sectionize -> highlight -> assemble -> write.
"""

import os
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Optional, Sequence, Set

from highlighting import BatchHighlighter
from ingestion import LanguageRegistry, Section, sectionize
from rendering import PageAssembler, stylesheet, stylesheet_path
from shared.config import DoccoConfig
from shared.exceptions import OutputWriteError, SourceReadError


@dataclass
class RunContext:
    """State for one invocation, threaded through the driver.

    Attributes:
        config: Settings frozen for this run
        registry: Language registry built from the config's divider classes
        pending: Work queue of paths still to expand or document
        expanded: Resolved paths of directories already expanded
        sources: Supported source files, in processing order
        skipped: Paths dropped for having no registered language
        written: Output files written so far
    """

    config: DoccoConfig
    registry: LanguageRegistry
    pending: Deque[str] = field(default_factory=deque)
    expanded: Set[str] = field(default_factory=set)
    sources: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    written: List[str] = field(default_factory=list)

    @classmethod
    def create(cls, config: DoccoConfig, inputs: Sequence[str]) -> "RunContext":
        registry = LanguageRegistry(css_classes=config.divider_classes)
        return cls(config=config, registry=registry, pending=deque(inputs))

    def report(self, message: str) -> None:
        if not self.config.quiet:
            print(message)


@dataclass
class GenerateResult:
    """Result of a generation run.

    Attributes:
        sources: Source files documented
        pages: HTML pages written, parallel to sources
        skipped: Inputs skipped as unsupported
    """

    sources: List[str]
    pages: List[str]
    skipped: List[str]


class GenerateUseCase:
    """Turn source files into side-by-side HTML pages plus a shared stylesheet.

    Example:
        >>> use_case = GenerateUseCase(config)
        >>> result = use_case.execute(["src/", "bin/tool.py"])
    """

    def __init__(
        self,
        config: DoccoConfig,
        highlighter: Optional[BatchHighlighter] = None,
        assembler: Optional[PageAssembler] = None,
    ):
        self.config = config
        self.highlighter = highlighter or BatchHighlighter(config)
        self.assembler = assembler or PageAssembler(config.output_dir, config.dirs)

    def collect_sources(self, context: RunContext) -> List[str]:
        """
        Drain the work queue, expanding directories into their children.

        Children are appended to the end of the queue, so nested directories
        are expanded as they are reached. A directory reached twice (through a
        symlink, say) is expanded once. Unsupported files are skipped.
        """
        while context.pending:
            path = context.pending.popleft()
            if os.path.isdir(path):
                real = os.path.realpath(path)
                if real in context.expanded:
                    context.report(f"[skip] {path} (already expanded)")
                    continue
                context.expanded.add(real)
                children = sorted(os.listdir(path))
                context.pending.extend(os.path.join(path, name) for name in children)
                continue
            if context.registry.for_path(path) is None:
                context.skipped.append(path)
                context.report(f"[skip] {path} (unsupported language)")
                continue
            context.sources.append(path)
        return context.sources

    def read_source(self, path: str) -> str:
        try:
            with open(path, "r", encoding=self.config.encoding) as handle:
                return handle.read()
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(path, str(e)) from e

    def write_file(self, path: str, content: str) -> str:
        try:
            os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
            with open(path, "w", encoding="utf-8") as handle:
                handle.write(content)
        except OSError as e:
            raise OutputWriteError(path, str(e)) from e
        return path

    def build_sections(self, context: RunContext, source: str) -> List[Section]:
        language = context.registry.for_path(source)
        if language is None:
            return []
        sections = sectionize(language, self.read_source(source))
        return self.highlighter.highlight(language, sections)

    def document(self, context: RunContext, source: str) -> str:
        context.report(f"[parse] {source}")
        sections = self.build_sections(context, source)
        page = self.assembler.assemble(source, sections, context.sources)
        target = self.write_file(self.assembler.page_path(source), page)
        context.written.append(target)
        context.report(f"[ok] {source} -> {target} sections={len(sections)}")
        return target

    def execute(self, inputs: Sequence[str], context: Optional[RunContext] = None) -> GenerateResult:
        """Execute the pipeline over every input, one file at a time.

        Args:
            inputs: Files and directories to document

        Returns:
            GenerateResult listing what was documented and skipped

        Raises:
            DoccoError: on the first read, highlight, or write failure
        """
        context = context or RunContext.create(self.config, inputs)
        sources = self.collect_sources(context)
        if not sources:
            context.report("[warn] No supported source files")
            return GenerateResult(sources=[], pages=[], skipped=list(context.skipped))

        os.makedirs(self.config.output_dir, exist_ok=True)
        self.write_file(stylesheet_path(self.config.output_dir), stylesheet())

        pages = [self.document(context, source) for source in sources]
        context.report(f"[done] {len(pages)} pages written to {self.config.output_dir}")
        return GenerateResult(sources=list(sources), pages=pages, skipped=list(context.skipped))


__all__ = ["GenerateUseCase", "GenerateResult", "RunContext"]
