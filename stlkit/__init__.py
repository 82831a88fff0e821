"""Container and concurrency building blocks: linked lists, trees, hash tables, vectors, a complex number type and thread pools."""

__version__ = "0.1.0"

__all__ = [
    "complexnum",
    "concurrency",
    "dynarray",
    "hashed",
    "linked",
    "ordered",
    "vectors",
    "workqueue",
]