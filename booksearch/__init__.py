"""Incremental book search with debounced queries and paged loading."""

__version__ = "0.1.0"
