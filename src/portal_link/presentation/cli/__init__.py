"""Command-line interface for Portal Link."""
