"""Allow ``python -m foo_record`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m foo_record`` behaves identically to the ``foo-record``
console script.
"""

from __future__ import annotations

from foo_record.cli.app import cli

if __name__ == "__main__":
    cli()
