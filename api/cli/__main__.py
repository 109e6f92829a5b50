"""CLI entry point for running as `python -m api.cli`.

Usage:
    python -m api.cli src/           # Document every supported file under src/
    python -m api.cli --dirs a.py b/ # Mirror input directories in the output
    python -m api.cli --languages    # List supported extensions
"""

import sys

from .main import create_parser, run


def main():
    """Entry point for `python -m api.cli` and the `docco` script."""
    parser = create_parser()
    args = parser.parse_args()
    sys.exit(run(args))


if __name__ == "__main__":
    main()
