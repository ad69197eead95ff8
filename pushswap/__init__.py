"""Two-stack integer sorting with a restricted operation set, a checker for
operation lists, and the small string, buffer and output helpers they use."""

__version__ = "1.0.0"