import io

import pytest

from isomer.core.dispatch import Dispatcher


def _noop(args: list[str]) -> None:
    pass


def test_lists_named_commands(capsys: pytest.CaptureFixture[str]) -> None:
    d = Dispatcher()
    d.register_named_command("alpha", "first", _noop)
    d.register_named_command("beta", "second", _noop)

    d.list_commands()

    lines = capsys.readouterr().out.splitlines()
    assert set(lines) == {"Available commands:", "  alpha: first", "  beta: second"}


def test_empty_dispatcher_prints_header_only(capsys: pytest.CaptureFixture[str]) -> None:
    Dispatcher().list_commands()

    assert capsys.readouterr().out == "Available commands:\n"


def test_anonymous_fallbacks_are_not_advertised() -> None:
    d = Dispatcher()
    d.register_named_command("alpha", "first", _noop)
    d.register_default_handler(1, _noop)
    d.register_default_handler(2, _noop)

    assert d.help_lines() == ["Available commands:", "  alpha: first"]


def test_advertised_fallbacks_listed() -> None:
    d = Dispatcher()
    d.register_named_command("beta", "second", _noop)
    d.register_named_command("alpha", "first", _noop)
    d.register_default_handler(3, _noop, name="merge", description="merge A and B into C")
    d.register_default_handler(1, _noop, name="open")

    assert d.help_lines() == [
        "Available commands:",
        "  alpha: first",
        "  beta: second",
        "Default handlers:",
        "  Default for 1 args: open - ",
        "  Default for 3 args: merge - merge A and B into C",
    ]


def test_one_advertised_fallback_lists_all_fallbacks() -> None:
    d = Dispatcher()
    d.register_default_handler(0, _noop)
    d.register_default_handler(2, _noop, description="pair")

    assert d.help_lines()[1:] == [
        "Default handlers:",
        "  Default for 0 args:  - ",
        "  Default for 2 args:  - pair",
    ]


def test_writes_to_given_file(capsys: pytest.CaptureFixture[str]) -> None:
    d = Dispatcher()
    d.register_named_command("alpha", "first", _noop)
    sink = io.StringIO()

    d.list_commands(file=sink)

    assert sink.getvalue() == "Available commands:\n  alpha: first\n"
    assert capsys.readouterr().out == ""
