"""Application services used by the CLI."""
