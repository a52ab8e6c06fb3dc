"""Command-line interface for the Blade access layer."""
