"""Command-line interface for STRINGKIT."""
