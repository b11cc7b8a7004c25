from typing import Iterable, Sequence, TypeVar

from ._mismatch import MismatchReport
from ._values import values_equal

TItem = TypeVar("TItem")


def _first_match(
    value: TItem,
    expected: Sequence[TItem],
    unclaimed: list[int],
) -> int | None:
    for k, exp_index in enumerate(unclaimed):
        if values_equal(expected[exp_index], value):
            return k
    return None


def find_leftovers(actual: Iterable[TItem], expected: Iterable[TItem]) -> MismatchReport:
    """Pairs up equal items between `actual` and `expected`, first match wins.

    Only equality is used (no hashing, no ordering), so this works for any
    items that support `==`. Cost is O(len(actual) * len(expected)).

    Returns:
        A report listing the actual positions that couldn't be paired and the
        expected positions that were never claimed. The report is empty (falsy)
        when the two inputs hold the same multiset of values.
    """
    actual = list(actual)
    expected = list(expected)

    unclaimed = list(range(len(expected)))
    unexpected = []
    for actual_index, value in enumerate(actual):
        k = _first_match(value, expected, unclaimed)
        if k is None:
            unexpected.append(actual_index)
        else:
            # Swap-remove; the scan order of what's left doesn't matter.
            unclaimed[k] = unclaimed[-1]
            unclaimed.pop()

    return MismatchReport(
        actual=tuple(actual),
        expected=tuple(expected),
        unexpected=tuple(unexpected),
        missing=tuple(sorted(unclaimed)),
    )
