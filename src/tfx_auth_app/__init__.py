"""Command-line application for resolving tfx credentials."""
