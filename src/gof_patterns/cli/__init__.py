"""Command line interface for browsing and running the pattern catalog."""
