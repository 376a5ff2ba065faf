"""Command line interface for websitemover."""
