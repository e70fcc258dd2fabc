"""
Element-wise combinators over pairs of ordered collections.

Both functions walk two collections side by side and feed each pair of
elements to a caller-supplied ``combine`` function, collecting the results
into a new list.

    merge_collections([1, 2], ["one", "two"], lambda n, w: f"{n} = {w}")
        -> ["1 = one", "2 = two"]

    zip_collections("ABCDE", [1, 2, 3], lambda c, p: f"{p}. {c}")
        -> ["1. A", "2. B", "3. C"]

RULES:
    - Inputs are never mutated.
    - combine is called exactly once per pair, in ascending index order.
    - The returned list is always freshly built.
"""

from typing import Callable, Collection, Iterable, List, TypeVar

from .logger import logger

T = TypeVar("T")
S = TypeVar("S")
R = TypeVar("R")


class InvalidArgumentError(ValueError):
    """Raised when merge_collections receives collections of different sizes."""

    def __init__(self, first_size: int, second_size: int):
        self.first_size = first_size
        self.second_size = second_size
        super().__init__(
            "Collections must have the same size for element-wise merging. "
            f"First collection size: {first_size}, "
            f"Second collection size: {second_size}"
        )


def merge_collections(
    first: Collection[T],
    second: Collection[S],
    combine: Callable[[T, S], R],
) -> List[R]:
    """
    Merge two same-size collections element-wise.

    Args:
        first: First collection, enumerated in its natural order
        second: Second collection, enumerated in its natural order
        combine: Function applied to each (first[i], second[i]) pair

    Returns:
        New list where result[i] == combine(first[i], second[i])

    Raises:
        InvalidArgumentError: If the collections differ in size.
            Raised before combine is ever called.
    """
    first_size = len(first)
    second_size = len(second)
    if first_size != second_size:
        logger.debug(
            f"merge_collections rejected sizes {first_size} and {second_size}"
        )
        raise InvalidArgumentError(first_size, second_size)

    result = [combine(a, b) for a, b in zip(first, second)]

    logger.debug(f"merge_collections merged {len(result)} pairs")
    return result


def zip_collections(
    first: Iterable[T],
    second: Iterable[S],
    combine: Callable[[T, S], R],
) -> List[R]:
    """
    Zip two collections element-wise, stopping at the shorter one.

    Unlike merge_collections there is no size precondition. Any trailing
    elements of the longer input are ignored without error or warning.
    One-shot iterators are accepted.

    Args:
        first: First iterable
        second: Second iterable
        combine: Function applied to each pair

    Returns:
        New list of length min(len(first), len(second))
    """
    result = [combine(a, b) for a, b in zip(first, second)]

    logger.debug(f"zip_collections combined {len(result)} pairs")
    return result
