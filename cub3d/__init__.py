"""A raycasting demo with small text, memory, list and line-reading helpers."""

__version__ = "0.1.0"
__all__ = ["engine", "app", "textops", "words", "chars", "memory", "output", "linkedlist", "lines"]