"""Command-line interface for shocktest."""
