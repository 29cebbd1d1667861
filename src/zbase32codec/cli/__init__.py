"""Command line interface for zbase32codec."""
