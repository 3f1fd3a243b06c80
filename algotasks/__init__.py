"""Solutions to classic algorithmic exercises, one module and command each."""

__version__ = "1.0.0"