from typing import Any

import numpy as np


def values_equal(a: Any, b: Any) -> bool:
    """Whole-value equality, treating numpy arrays as single values.

    Plain `==` on arrays is elementwise and can't be used as a truth value, so
    arrays are compared with `np.array_equal` (same shape, same entries).
    """
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        return bool(np.array_equal(a, b))
    return bool(a == b)


def value_repr(value: Any) -> str:
    if isinstance(value, np.ndarray):
        # Keep each element on one line of the report.
        return np.array2string(value, separator=', ', threshold=20).replace('\n', '')
    return repr(value)
