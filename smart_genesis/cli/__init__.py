"""Smart Genesis command-line interface."""
