"""Command line interface for narrator."""
