"""Conway's Game of Life: board rules, pattern loading, drawing and an interactive window."""

__version__ = "0.1.0"
__all__ = ["__version__"]