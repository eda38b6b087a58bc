"""Command-line interface for setclass."""
