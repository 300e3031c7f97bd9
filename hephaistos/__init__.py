"""Classic data structures, three-way comparators and sorting algorithms."""

__version__ = "0.1.0"