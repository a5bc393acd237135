"""benchsys command-line interface."""
