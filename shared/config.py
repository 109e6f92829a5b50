import os
import sys
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv


DIVIDER_CLASSES_DEFAULT = "c,c1,ch,cm,cs"
MARKDOWN_EXTENSIONS_DEFAULT = "tables,fenced_code"


def default_highlighter() -> List[str]:
    return [sys.executable, "-m", "pygments"]


@dataclass
class DoccoConfig:
    """Configuration for a documentation run."""

    output_dir: str = "docs"
    dirs: bool = False
    highlighter: List[str] = field(default_factory=default_highlighter)
    encoding: str = "utf-8"
    divider_classes: List[str] = field(default_factory=lambda: _parse_list(DIVIDER_CLASSES_DEFAULT))
    markdown_extensions: List[str] = field(default_factory=lambda: _parse_list(MARKDOWN_EXTENSIONS_DEFAULT))
    quiet: bool = False


def _parse_bool(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return value.lower() in ("1", "true", "yes", "y", "on")


def _parse_list(value: Optional[str], default: Optional[List[str]] = None) -> List[str]:
    if value is None or value.strip() == "":
        return list(default or [])
    return [item.strip() for item in value.split(",") if item.strip()]


def load_config() -> DoccoConfig:
    """Load configuration from environment variables."""
    load_dotenv(find_dotenv(usecwd=True))

    highlighter = os.getenv("DOCCO_HIGHLIGHTER", "").split()

    config = DoccoConfig(
        output_dir=os.getenv("DOCCO_OUTPUT_DIR") or "docs",
        dirs=_parse_bool(os.getenv("DOCCO_DIRS"), False),
        highlighter=highlighter or default_highlighter(),
        encoding=os.getenv("DOCCO_ENCODING") or "utf-8",
        divider_classes=_parse_list(
            os.getenv("DOCCO_DIVIDER_CLASSES"), _parse_list(DIVIDER_CLASSES_DEFAULT)
        ),
        markdown_extensions=_parse_list(
            os.getenv("DOCCO_MARKDOWN_EXTENSIONS"), _parse_list(MARKDOWN_EXTENSIONS_DEFAULT)
        ),
        quiet=_parse_bool(os.getenv("DOCCO_QUIET"), False),
    )
    return config


__all__ = ["DoccoConfig", "load_config"]
