"""Command-line entry point for the coaching engine."""
