"""Classic data-structure and algorithm routines: linked lists, trees, graphs and more."""

__version__ = "0.1.0"