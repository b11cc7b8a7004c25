from typing import Any, Iterable, Mapping, Sequence

import pytest


def _split_argnames(argnames: str | Sequence[str]) -> tuple[str, ...]:
    if isinstance(argnames, str):
        argnames = [e.strip() for e in argnames.split(',')]
    result = tuple(argnames)
    if not result or any(not e for e in result):
        raise ValueError(f'Bad argnames: {argnames!r}')
    return result


def ptest(
    argnames: str | Sequence[str],
    cases: Mapping[str, Any] | Iterable[tuple[str, Any]],
) -> pytest.MarkDecorator:
    """Runs a test function once per named case, each reported separately.

    Args:
        argnames: The test function's parameters to fill, as a
            comma-separated string or a sequence of names.
        cases: `(case_name, argument_tuple)` entries, or a dict from case name
            to argument tuple. With a single argname, the argument may be
            given without a wrapping tuple.

    Returns:
        A `pytest.mark.parametrize` decorator using the case names as test ids,
        so a failing case is identified by name (e.g. `test_add[add_zero]`).

    Examples:
        @mset.ptest('a, b, expected_result', [
            ('add_zero', (0, 5, 5)),
            ('add_positive_and_negative', (-8, 3, -5)),
        ])
        def test_add(a, b, expected_result):
            assert a + b == expected_result
    """
    names = _split_argnames(argnames)
    if isinstance(cases, Mapping):
        cases = cases.items()

    ids = []
    values = []
    for case_name, args in cases:
        if not isinstance(case_name, str) or not case_name:
            raise ValueError(f'Bad case name: {case_name!r}')
        if case_name in ids:
            raise ValueError(f'Duplicate case name: {case_name!r}')
        if len(names) == 1 and not (isinstance(args, tuple) and len(args) == 1):
            args = (args,)
        args = tuple(args)
        if len(args) != len(names):
            raise ValueError(f'Case {case_name!r} has {len(args)} arguments but {names=} has {len(names)}.')
        ids.append(case_name)
        values.append(args)

    return pytest.mark.parametrize(names, values, ids=ids)
