"""Classic algorithms and data structures: graphs, sorting, searching, trees, linked lists, matrices and dynamic programming."""

__version__ = "0.1.0"
__all__ = ["dynamic", "graph", "linked_list", "matrix", "search", "sorting", "tree"]