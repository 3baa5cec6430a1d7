from enum import IntEnum


class ErrorCode(IntEnum):
    """Stable numeric error catalog."""

    OK = 0

    # 1xxx: input
    E_NO_ARGUMENTS = 1001
    E_NO_HANDLER = 1002

    # 2xxx: registration
    E_REGISTRATION_INVALID = 2001


class DispatchError(Exception):
    """Base class for failures reported by ``Dispatcher.run``."""

    code: ErrorCode


class NoArguments(DispatchError):
    code = ErrorCode.E_NO_ARGUMENTS

    def __init__(self) -> None:
        super().__init__("no arguments provided")


class NoHandler(DispatchError):
    code = ErrorCode.E_NO_HANDLER

    def __init__(self, arg_count: int) -> None:
        # "1 arguments" is a stable token matched by embedders.
        super().__init__(f"no command or default handler for {arg_count} arguments")
        self.arg_count = arg_count


class RegistrationError(ValueError):
    code = ErrorCode.E_REGISTRATION_INVALID
