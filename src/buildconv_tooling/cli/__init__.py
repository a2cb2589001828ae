"""Command-line entry points for buildconv."""
