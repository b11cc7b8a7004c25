from typing import Any, Iterable, Sequence

from ._values import value_repr

REPORT_HEADER = "Vectors contain different values:\n"


def render_redacted(
    values: Sequence[Any],
    shown_indices: Iterable[int],
    *,
    placeholder: str = '_',
) -> str:
    """Renders a sequence showing only the items at `shown_indices`.

    Every other position is replaced by `placeholder`, so the shown items keep
    their positional context.

    Examples:
        >>> render_redacted([6, 4, 5], [2])
        '[_, _, 5]'
    """
    shown = frozenset(shown_indices)
    parts = [value_repr(v) if k in shown else placeholder for k, v in enumerate(values)]
    return '[' + ', '.join(parts) + ']'


def render_report(
    actual: Sequence[Any],
    expected: Sequence[Any],
    unexpected: Sequence[int],
    missing: Sequence[int],
) -> str:
    if not unexpected and not missing:
        return ''
    lines = [REPORT_HEADER]
    if unexpected:
        lines.append(f"Unexpected values: {render_redacted(actual, unexpected)}\n")
    if missing:
        lines.append(f"Missing expected values: {render_redacted(expected, missing)}\n")
    return ''.join(lines)
