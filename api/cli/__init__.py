"""Command line interface."""

from .main import create_parser, run

__all__ = ["create_parser", "run"]
