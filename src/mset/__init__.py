"""Assertions comparing sequences as multisets, for use in tests.
"""

from ._assert_vec import (
    AssertVec,
    assert_contains_only,
)
from ._matching import (
    find_leftovers,
)
from ._mismatch import (
    MismatchReport,
    MultisetMismatch,
)
from ._parameterized import (
    ptest,
)
from ._render import (
    render_redacted,
)
from ._values import (
    values_equal,
)
