from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from .dispatch import ArityFallback, NamedCommand
from .errors import DispatchError, ErrorCode, NoHandler


def _now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@dataclass
class ResultObject:
    """Structured outcome of one dispatched invocation."""

    ok: bool = True
    events: list[dict[str, Any]] = field(default_factory=list)
    # Set when an action ends the invocation with its own exit code.
    forced_exit: int | None = None

    def add_event(
        self,
        kind: str,
        *,
        message: str | None = None,
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.events.append(
            {
                "kind": kind,
                "message": message,
                "code": code.name if code is not None else None,
                "code_num": int(code) if code is not None else None,
                "ts": _now(),
                "details": details or {},
            }
        )

    def dispatched(self, target: NamedCommand | ArityFallback, passed: list[str]) -> None:
        if isinstance(target, NamedCommand):
            details = {"handler": "command", "name": target.name, "arg_count": len(passed)}
        else:
            details = {"handler": "default", "name": target.name, "arg_count": target.arg_count}
        self.add_event("dispatch", code=ErrorCode.OK, details=details)

    def fail(self, error: DispatchError) -> None:
        self.ok = False
        details = {"arg_count": error.arg_count} if isinstance(error, NoHandler) else None
        self.add_event("error", message=str(error), code=error.code, details=details)

    def halt(self, exit_code: int, *, kind: str = "exit", message: str | None = None) -> None:
        self.forced_exit = exit_code
        if exit_code:
            self.ok = False
        self.add_event(kind, message=message, details={"exit_code": exit_code})

    @property
    def exit_code(self) -> int:
        if self.forced_exit is not None:
            return self.forced_exit
        if self.ok:
            return 0

        # 1xxx-2xxx: input/registration -> 1, anything else -> 2
        code_nums = [
            ev["code_num"]
            for ev in self.events
            if ev.get("kind") == "error" and isinstance(ev.get("code_num"), int)
        ]
        if any(1000 <= n < 3000 for n in code_nums):
            return 1
        return 2
