from typing import Any

import click

from .dispatch import Dispatcher
from .errors import DispatchError
from .results import ResultObject


class PassthroughCommand(click.Command):
    """A click command that hands its raw arguments to the callback.

    Nothing is parsed: ``--help``, ``--`` and any dash-prefixed strings reach
    the callback untouched as the ``args`` parameter.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.params["args"] = tuple(args)
        ctx.args = []
        return []


def build_cli(
    dispatcher: Dispatcher, prog_name: str, *, return_results: bool = False
) -> click.Command:
    def callback(args: tuple[str, ...]) -> Any:
        ctx = click.get_current_context()
        results = ResultObject()

        try:
            target, passed = dispatcher.resolve(args)
        except DispatchError as e:
            results.fail(e)
            click.echo(str(e), err=True)
        else:
            try:
                target.action(passed)
            except KeyboardInterrupt:
                raise SystemExit(130) from None
            except click.exceptions.Exit as e:
                results.dispatched(target, passed)
                results.halt(e.exit_code)
            else:
                results.dispatched(target, passed)

        code = results.exit_code
        if return_results:
            return results, code
        if code:
            ctx.exit(code)
        return None

    return PassthroughCommand(
        name=prog_name,
        callback=callback,
        params=[click.Argument(["args"], nargs=-1, type=click.UNPROCESSED)],
        add_help_option=False,
    )
