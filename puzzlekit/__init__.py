"""Solutions to classic algorithmic puzzles: union-find, candies, digits, strings and arrays."""

__version__ = "0.1.0"
__all__ = ["arrays", "candy", "digits", "disjoint_set", "textops"]