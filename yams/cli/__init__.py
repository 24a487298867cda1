"""Command line interface for Yams."""
