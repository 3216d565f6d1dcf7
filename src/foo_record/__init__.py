"""foo-record — validated ``Foo`` records built from raw text.

A tiny value object, a validating factory, and a command-line harness
that exercises both.
"""

from foo_record.version import __version__

__all__: list[str] = ["__version__"]
