"""Classic algorithm exercises as plain Python functions and classes."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "backtracking",
    "basics",
    "dp",
    "graphs",
    "heaps",
    "roman",
    "textops",
    "trees",
    "windows",
]