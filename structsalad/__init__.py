"""Robin Hood hash map, linked list, and C-style string, memory, output and line-reading helpers."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "conversions",
    "cstring",
    "formatting",
    "hashmap",
    "linkedlist",
    "lines",
    "memory",
    "output",
    "textops",
]