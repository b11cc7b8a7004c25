import dataclasses
from typing import Any

from ._render import render_report


@dataclasses.dataclass(frozen=True)
class MismatchReport:
    """Leftovers from pairing up the items of two sequences.

    Attributes:
        actual: The actual items, in their original order.
        expected: The expected items, in their original order.
        unexpected: Ascending positions in `actual` that had no equal
            unclaimed item in `expected`.
        missing: Ascending positions in `expected` that were never claimed.
    """
    actual: tuple[Any, ...]
    expected: tuple[Any, ...]
    unexpected: tuple[int, ...]
    missing: tuple[int, ...]

    @property
    def num_matched(self) -> int:
        return len(self.actual) - len(self.unexpected)

    def __bool__(self) -> bool:
        return bool(self.unexpected or self.missing)

    def __str__(self) -> str:
        return render_report(self.actual, self.expected, self.unexpected, self.missing)


class MultisetMismatch(AssertionError):
    """Two sequences didn't hold the same multiset of values.

    The message is the rendered report; the structured leftovers are on
    `.report`.
    """

    def __init__(self, report: MismatchReport):
        super().__init__(str(report))
        self.report = report

    def __str__(self) -> str:
        return str(self.report)
