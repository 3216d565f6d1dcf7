"""Core layer — pure validation logic and value types.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* Fallible operations return :data:`~foo_record.core.result.Result`
  values rather than raising.
"""

from foo_record.core.factory import AGE_MAX, AGE_STORAGE_MAX, create
from foo_record.core.models import Foo, InvalidInput
from foo_record.core.result import Err, Ok, Result

__all__: list[str] = [
    "AGE_MAX",
    "AGE_STORAGE_MAX",
    "Err",
    "Foo",
    "InvalidInput",
    "Ok",
    "Result",
    "create",
]
