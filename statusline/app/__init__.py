"""Command-line entry point for status-line."""
