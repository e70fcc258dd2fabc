"""
Pairwise Combinators Package

Element-wise combination of two ordered collections through a
caller-supplied binary function.

TWO OPERATIONS:
---------------
    merge_collections:
        Both collections must be the same size.
        A size mismatch is a caller error (InvalidArgumentError).

    zip_collections:
        Collections may differ in size.
        The result stops at the end of the shorter one.

Everything else in this package (Person, the example scenarios, the demo)
exists only to exercise these two functions.
"""

from .combinators import InvalidArgumentError, merge_collections, zip_collections

__version__ = "0.1.0"

__all__ = ["InvalidArgumentError", "merge_collections", "zip_collections"]
