import os
import sys

import click

from .core.click_factory import build_cli
from .core.dispatch import Dispatcher
from .core.results import ResultObject


def _default_prog_name() -> str:
    return os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "isomer"


def run(
    dispatcher: Dispatcher, argv: list[str] | None = None, prog_name: str | None = None
) -> tuple[ResultObject, int]:
    """Programmatic entry point returning structured results and exit code."""

    argv = argv if argv is not None else sys.argv[1:]
    prog = prog_name or _default_prog_name()
    cli = build_cli(dispatcher, prog, return_results=True)

    try:
        rv = cli.main(args=argv, prog_name=prog, standalone_mode=False)
    except click.ClickException as exc:
        # Raised by an action; dispatch itself never produces one.
        results = ResultObject()
        results.halt(exc.exit_code, kind="error", message=exc.format_message())
        click.echo(exc.format_message(), err=True)
        return results, results.exit_code

    if isinstance(rv, int):
        results = ResultObject()
        results.halt(rv)
    else:
        results, _ = rv
    return results, results.exit_code


def main(
    dispatcher: Dispatcher, argv: list[str] | None = None, prog_name: str | None = None
) -> int:
    """Process entry point. Returns the exit code, never exits."""

    _, code = run(dispatcher, argv, prog_name)
    return code


def execute_process_args(dispatcher: Dispatcher, prog_name: str | None = None) -> None:
    """Dispatch ``sys.argv[1:]``; exit non-zero on failure.

    The error message goes to standard error. On success this returns
    normally and leaves process termination to the caller.
    """

    code = main(dispatcher, prog_name=prog_name)
    if code:
        raise SystemExit(code)
