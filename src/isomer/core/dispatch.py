import logging
from dataclasses import dataclass
from typing import IO, Any, Callable, Sequence

import click

from .errors import NoArguments, NoHandler, RegistrationError

logger = logging.getLogger(__name__)

Action = Callable[[list[str]], Any]


@dataclass(frozen=True)
class NamedCommand:
    name: str
    description: str
    action: Action


@dataclass(frozen=True)
class ArityFallback:
    arg_count: int
    action: Action
    name: str = ""
    description: str = ""

    @property
    def advertised(self) -> bool:
        return bool(self.name or self.description)


def _summary(fn: Callable[..., Any]) -> str:
    doc = (fn.__doc__ or "").strip()
    return doc.splitlines()[0].strip() if doc else ""


class Dispatcher:
    """Routes an argument vector to a named command or an arity fallback.

    The first argument is looked up in the named-command table. On a hit the
    command's action receives the remaining arguments. On a miss the whole
    vector is handed to the fallback registered for its length.

    Args:
        empty_uses_default: If True, an empty vector is dispatched to the
            fallback for zero arguments when one exists. By default an empty
            vector always raises ``NoArguments``.
    """

    def __init__(self, *, empty_uses_default: bool = False) -> None:
        self.empty_uses_default = empty_uses_default
        self._commands: dict[str, NamedCommand] = {}
        self._defaults: dict[int, ArityFallback] = {}

    def register_named_command(self, name: str, description: str, action: Action) -> None:
        if not isinstance(name, str) or not name:
            raise RegistrationError(f"command name must be a non-empty string, got {name!r}")
        if not callable(action):
            raise RegistrationError(f"{name}: action is not callable")

        if name in self._commands:
            logger.debug("replacing command %r", name)
        else:
            logger.debug("registering command %r", name)
        self._commands[name] = NamedCommand(name=name, description=description or "", action=action)

    def register_default_handler(
        self,
        arg_count: int,
        action: Action,
        *,
        name: str = "",
        description: str = "",
    ) -> None:
        # bool is an int subclass; True would silently mean 1.
        if isinstance(arg_count, bool) or not isinstance(arg_count, int) or arg_count < 0:
            raise RegistrationError(f"arg count must be a non-negative integer, got {arg_count!r}")
        if not callable(action):
            raise RegistrationError(f"default for {arg_count} args: action is not callable")

        if arg_count in self._defaults:
            logger.debug("replacing default handler for %d args", arg_count)
        else:
            logger.debug("registering default handler for %d args", arg_count)
        self._defaults[arg_count] = ArityFallback(
            arg_count=arg_count, action=action, name=name or "", description=description or ""
        )

    def command(self, name: str | None = None, *, description: str | None = None):
        """Decorator form of ``register_named_command``.

        Args:
            name: Command name (defaults to the function name).
            description: Help text (defaults to the first docstring line).
        """

        def decorate(fn: Action) -> Action:
            d = description if description is not None else _summary(fn)
            self.register_named_command(name or fn.__name__, d, fn)
            return fn

        return decorate

    def default(self, arg_count: int, *, name: str = "", description: str = ""):
        """Decorator form of ``register_default_handler``.

        Fallbacks stay anonymous unless a name or description is given.
        """

        def decorate(fn: Action) -> Action:
            self.register_default_handler(arg_count, fn, name=name, description=description)
            return fn

        return decorate

    @property
    def commands(self) -> list[NamedCommand]:
        return [self._commands[k] for k in sorted(self._commands)]

    @property
    def defaults(self) -> list[ArityFallback]:
        return [self._defaults[k] for k in sorted(self._defaults)]

    def resolve(self, args: Sequence[str]) -> tuple[NamedCommand | ArityFallback, list[str]]:
        """Pick the handler for ``args`` without invoking it.

        Returns the selected record and the argument list its action receives.
        Raises ``NoArguments`` or ``NoHandler`` when nothing applies.
        """

        args = list(args)
        if not args:
            if self.empty_uses_default and 0 in self._defaults:
                return self._defaults[0], []
            raise NoArguments()

        named = self._commands.get(args[0])
        if named is not None:
            return named, args[1:]

        # Past this point the first argument is data, not a command name.
        fallback = self._defaults.get(len(args))
        if fallback is not None:
            return fallback, args
        raise NoHandler(len(args))

    def run(self, args: Sequence[str]) -> None:
        target, passed = self.resolve(args)
        target.action(passed)

    def help_lines(self) -> list[str]:
        lines = ["Available commands:"]
        lines.extend(f"  {c.name}: {c.description}" for c in self.commands)

        defaults = self.defaults
        if any(d.advertised for d in defaults):
            lines.append("Default handlers:")
            lines.extend(
                f"  Default for {d.arg_count} args: {d.name} - {d.description}" for d in defaults
            )
        return lines

    def list_commands(self, file: IO[str] | None = None) -> None:
        for line in self.help_lines():
            click.echo(line, file=file)

    def execute_process_args(self, prog_name: str | None = None) -> None:
        """Shortcut for ``isomer.cli.execute_process_args(self)``."""

        # Imported here: isomer.cli imports this module at load time.
        from ..cli import execute_process_args

        execute_process_args(self, prog_name=prog_name)
