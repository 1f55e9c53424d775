"""Terminal user interface and command-line entry point."""
