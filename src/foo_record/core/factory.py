"""Validating factory for :class:`~foo_record.core.models.Foo`.

Validation order (first failure wins, errors are not accumulated):

1. **Name** — must be non-empty.  No whitespace trimming.
2. **Age text** — must be non-empty.
3. **Parse** — unsigned 8-bit integer; parser message surfaced verbatim.
4. **Hard limit** — the top of the storage width is rejected.
5. **Soft limit** — no plausible human is older than :data:`AGE_MAX`.

The hard and soft limits are separate checks on purpose: one tracks the
storage width, the other a domain rule that may move on its own.
"""

from __future__ import annotations

import logging

from foo_record.core.models import Foo, InvalidInput
from foo_record.core.parsing import parse_uint, uint_max
from foo_record.core.result import Err, Ok, Result

AGE_BITS: int = 8
"""Storage width of :attr:`Foo.age`."""

AGE_STORAGE_MAX: int = uint_max(AGE_BITS)
"""Top of the storage range; never a valid age."""

# A bit hopeful, maybe.
AGE_MAX: int = 120
"""Soft ceiling on a plausible age, inclusive."""

NEED_NAME_MESSAGE: str = "need non blank name"
NEED_AGE_MESSAGE: str = "need non blank age"
INVALID_AGE_MESSAGE: str = "invalid age"
TOO_OLD_MESSAGE: str = "nobody's that old!"

logger = logging.getLogger(__name__)


def _reject(message: str) -> Err[InvalidInput]:
    logger.debug("foo.rejected: %s", message)
    return Err(InvalidInput(message))


def create(name: str, age_text: str) -> Result[Foo, InvalidInput]:
    """Build a :class:`Foo` from raw *name* and *age_text*.

    Returns ``Ok(Foo)`` when every check passes, otherwise
    ``Err(InvalidInput)`` describing the first failing check.  Never
    raises for bad input.
    """
    if name == "":
        return _reject(NEED_NAME_MESSAGE)

    if age_text == "":
        return _reject(NEED_AGE_MESSAGE)

    try:
        age = parse_uint(age_text, bits=AGE_BITS)
    except ValueError as exc:
        return _reject(str(exc))

    # Hard limit
    if age == AGE_STORAGE_MAX:
        return _reject(INVALID_AGE_MESSAGE)

    # Soft limit
    if age > AGE_MAX:
        return _reject(TOO_OLD_MESSAGE)

    logger.debug("foo.created: name=%r age=%d", name, age)
    return Ok(Foo(name=name, age=age))
