"""Command-line interface for Objdumper."""
