"""CLI application entry point for foo-record.

This module is the **sole error boundary** for the entire application.
It catches :class:`~foo_record.exceptions.FooRecordError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Flow
----
``AwaitingArgs`` → ``Validating`` → ``Success`` | ``Failure``.  There is
no transition back; the process terminates in either final state.

Architecture notes
------------------
* No validation logic lives here — it is delegated to
  :func:`foo_record.core.factory.create`.
* The rendered record goes to stdout; everything else goes to stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import os
import sys
from typing import NoReturn

import structlog

from foo_record.cli import exit_codes
from foo_record.cli.console import console, output
from foo_record.core.factory import create
from foo_record.exceptions import FooRecordError, UsageError
from foo_record.utils.logging import configure_logging
from foo_record.version import __version__

log = structlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

_BOOTSTRAP_FLAGS: frozenset[str] = frozenset({"-h", "--help", "-V", "--version"})
"""Flags that keep their meaning even when exactly two arguments are given."""


class _ArgumentParser(argparse.ArgumentParser):
    """``ArgumentParser`` that raises :class:`UsageError` instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(
            f"{self.format_usage().rstrip()}\n{self.prog}: error: {message}"
        )


def _prog_name() -> str:
    """Return the invocation name shown in the usage line.

    ``python -m foo_record`` reports ``__main__.py`` as ``argv[0]``; the
    console-script name is shown instead.
    """
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else ""
    if not prog or prog == "__main__.py":
        return "foo-record"
    return prog


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The usage line names the actual invocation.  The CLI supports:

    * ``foo-record <name> <age>``
    * ``foo-record --version``
    """
    parser = _ArgumentParser(
        prog=_prog_name(),
        description="Build a validated Foo record from a name and an age.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"foo-record {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Emit debug logging on stderr.",
    )
    parser.add_argument("name", help="Display name; must not be empty.")
    parser.add_argument("age", help="Age in years, 0 to 120.")
    return parser


def _normalise_argv(argv: list[str]) -> list[str]:
    """Treat exactly two arguments as ``<name> <age>`` even if dash-led.

    ``foo-record -bob 30`` must build a record named ``-bob`` rather than
    fail on an unknown option.  Help and version flags keep working.
    """
    if len(argv) == 2 and not _BOOTSTRAP_FLAGS.intersection(argv):
        return ["--", *argv]
    return argv


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_create(name: str, age_text: str) -> int:
    """Build the record and print its debug representation.

    A rejected input surfaces as
    :class:`~foo_record.exceptions.InvalidInputError` via ``unwrap``.
    """
    foo = create(name, age_text).unwrap()
    output.print(f"Foo: {foo!r}", markup=False)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the foo-record CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    UsageError
        When the arguments do not match ``<name> <age>``.
    InvalidInputError
        When the factory rejects the input.
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = _build_parser()
    args = parser.parse_args(_normalise_argv(argv))

    configure_logging(verbose=args.verbose)
    log.debug("cli.args", name=args.name, age=args.age)

    return _handle_create(args.name, args.age)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except UsageError as exc:
        console.print(str(exc), markup=False)
        sys.exit(exit_codes.GENERAL_ERROR)
    except FooRecordError as exc:
        console.print(f"ERROR: failed: {exc}", markup=False)
        if exc.hint:
            console.print(f"Hint: {exc.hint}", markup=False)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
