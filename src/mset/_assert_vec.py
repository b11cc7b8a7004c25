from typing import Generic, Iterable, TypeVar

from ._matching import find_leftovers
from ._mismatch import MultisetMismatch

TItem = TypeVar("TItem")


def assert_contains_only(actual: Iterable[TItem], expected: Iterable[TItem]) -> None:
    """Asserts that `actual` and `expected` hold the same items, ignoring order.

    Each item in one collection must pair with a distinct equal item in the
    other, so duplicates have to appear the same number of times on both
    sides. Items only need to support `==`.

    Raises:
        MultisetMismatch: The collections differ. The message shows the actual
            items that were unexpected and the expected items that were
            missing, at their original positions, with matched positions
            shown as `_`.

    Examples:
        >>> assert_contains_only([3, 5, 2, 1, 4], [1, 2, 3, 4, 5])
        >>> assert_contains_only([1, 1, 2, 3], [1, 1, 2, 3])
    """
    __tracebackhide__ = True

    report = find_leftovers(actual, expected)
    if report:
        raise MultisetMismatch(report)


class AssertVec(Generic[TItem]):
    """Wraps a sequence produced by the code under test for assertions on it."""

    def __init__(self, actual: Iterable[TItem]):
        self.actual = tuple(actual)

    def contains_only(self, expected: Iterable[TItem]) -> None:
        """Asserts the wrapped items equal `expected` as a multiset.

        See `assert_contains_only`.
        """
        __tracebackhide__ = True
        assert_contains_only(self.actual, expected)

    def __repr__(self) -> str:
        return f'mset.AssertVec({list(self.actual)!r})'
