"""Classic algorithms and data structures: sorting, heaps, searching, union-find, symbol tables, inversions and graphs."""

__version__ = "0.1.0"