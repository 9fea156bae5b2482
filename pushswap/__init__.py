"""Two-stack integer sorting with a restricted operation set: parsing, stacks, strategies and a command."""

__version__ = "1.0.0"