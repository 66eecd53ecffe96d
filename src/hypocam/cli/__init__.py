"""Command-line entry points for hypocam."""
