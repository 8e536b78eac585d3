"""Command line interface for commitgate."""
