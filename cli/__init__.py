"""Command-line interface for midi2mod."""
