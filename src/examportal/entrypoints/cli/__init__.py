"""Command-line interface for EXAMPORTAL."""
