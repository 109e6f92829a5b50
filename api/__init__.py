"""Application layer: use cases and command line entry point."""
