"""Command line driver for generating literate documentation.

Usage:
    python -m api.cli src/*.py
    python -m api.cli --dirs -o site/docs lib/
    python -m api.cli --self-test
"""

import argparse
from dataclasses import replace

from highlighting import BatchHighlighter
from ingestion import LanguageRegistry
from shared.config import DoccoConfig, load_config
from shared.exceptions import DoccoError

from ..use_cases import GenerateUseCase, SelfTestUseCase


def apply_overrides(config: DoccoConfig, args: argparse.Namespace) -> DoccoConfig:
    overrides = {}
    if args.output:
        overrides["output_dir"] = args.output
    if args.dirs is not None:
        overrides["dirs"] = args.dirs
    if args.quiet:
        overrides["quiet"] = True
    return replace(config, **overrides)


def list_languages(registry: LanguageRegistry) -> None:
    for language in registry.languages():
        print(f"{language.extension:<8} {language.name:<14} {language.symbol}")


def run_self_test(config: DoccoConfig, args: argparse.Namespace) -> int:
    registry = LanguageRegistry(css_classes=config.divider_classes)
    if args.inputs:
        languages = [lang for lang in (registry.for_path(p) for p in args.inputs) if lang]
    else:
        languages = registry.languages()
    outcomes = SelfTestUseCase(BatchHighlighter(config)).execute(languages)
    failed = 0
    for outcome in outcomes:
        if outcome.ok:
            print(f"[ok] {outcome.language.name}")
        else:
            failed += 1
            print(f"[ERR] {outcome.language.name}: {outcome.error}")
    return 2 if failed else 0


def run(args: argparse.Namespace) -> int:
    config = apply_overrides(load_config(), args)

    if args.languages:
        list_languages(LanguageRegistry(css_classes=config.divider_classes))
        return 0
    if args.self_test:
        return run_self_test(config, args)
    if not args.inputs:
        print("[WARN] No input files")
        return 2

    use_case = GenerateUseCase(config)
    try:
        use_case.execute(args.inputs)
    except DoccoError as e:
        print(f"[ERR] {e}")
        return 2
    return 0


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate side-by-side HTML documentation from commented source files"
    )
    parser.add_argument("inputs", nargs="*", help="Source files or directories")
    parser.add_argument("-o", "--output", help="Output directory (default: docs, or DOCCO_OUTPUT_DIR)")
    parser.add_argument("--dirs", dest="dirs", action="store_true", help="Mirror input directories under the output")
    parser.add_argument("--no-dirs", dest="dirs", action="store_false", help="Write every page flat into the output")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only print errors")
    parser.add_argument("--self-test", action="store_true", help="Check divider round trips against the highlighter")
    parser.add_argument("--languages", action="store_true", help="List supported extensions and exit")
    parser.set_defaults(dirs=None)
    return parser


__all__ = ["create_parser", "run"]
