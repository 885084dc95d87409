"""QueryLab command-line interface."""
