"""Structured error information with arguments, context and causes."""

from __future__ import annotations

import copy
import re
import threading
from collections.abc import Iterable
from typing import Any

_PLACEHOLDER = re.compile(r"%(\d\d?)")

_thread_state = threading.local()


def _arg_text(arg: Any) -> str:
    if isinstance(arg, bool):
        return "true" if arg else "false"
    return str(arg)


def _clean_message(message: str) -> str:
    """Strip a single trailing full stop from ``message``."""
    return message[:-1] if message.endswith(".") else message


def _fill_lowest(message: str, text: str) -> str:
    numbers = [
        int(match.group(1))
        for match in _PLACEHOLDER.finditer(message)
        if 1 <= int(match.group(1)) <= 99
    ]
    if not numbers:
        return message
    lowest = min(numbers)
    return _PLACEHOLDER.sub(
        lambda match: text if int(match.group(1)) == lowest else match.group(0),
        message,
    )


def insert_args(message: str, args: Iterable[Any]) -> str:
    """Substitute ``args`` into the ``%1`` ... ``%99`` placeholders of ``message``.

    Each argument in turn replaces every occurrence of the lowest-numbered
    placeholder still present. Placeholders without an argument stay as
    they are; surplus arguments are ignored.
    """
    result = message
    for arg in args:
        result = _fill_lowest(result, _arg_text(arg))
    return result


class LogError:
    """An error with a message, code, symbol, translation context and causes.

    The message is kept apart from the arguments that are substituted into
    it, so the full information stays available after the error is raised.
    A trailing full stop is removed from the message.
    """

    def __init__(
        self,
        message: str = "",
        code: int = 0,
        symbol: str = "",
        context: str = "",
    ) -> None:
        self.code = code
        self.context = context
        self.symbol = symbol
        self.message = message
        self.args: list[Any] = []
        self.causing_errors: list[LogError] = []

    @property
    def message(self) -> str:
        """The error message, without a trailing full stop."""
        return self._message

    @message.setter
    def message(self, value: str) -> None:
        self._message = _clean_message(value)

    @classmethod
    def create(
        cls,
        message: str,
        code: int = 0,
        symbol: str | None = None,
        context: str | None = None,
    ) -> LogError:
        """Create an error from a symbolic code.

        If ``symbol`` is just the decimal text of ``code``, the symbol is
        left empty.
        """
        symbol = symbol or ""
        if symbol == str(code):
            symbol = ""
        return cls(message, code, symbol, context or "")

    def add_arg(self, arg: Any) -> LogError:
        """Append ``arg`` to the message arguments and return this error."""
        self.args.append(arg)
        return self

    def __lshift__(self, arg: Any) -> LogError:
        return self.add_arg(arg)

    def add_causing_error(self, error: LogError) -> LogError:
        """Append ``error`` to the causing errors and return this error."""
        self.causing_errors.append(error)
        return self

    def clear_args(self) -> None:
        """Remove all message arguments."""
        self.args.clear()

    def clear_causing_errors(self) -> None:
        """Remove all causing errors."""
        self.causing_errors.clear()

    def is_empty(self) -> bool:
        """Return True if the code is 0 and the message is empty."""
        return self.code == 0 and not self.message

    def message_with_args(self) -> str:
        """Return the message with its arguments substituted."""
        return insert_args(self.message, self.args)

    def translated_message(self) -> str:
        """Return the message in the current language (no catalogue: unchanged)."""
        return self.message

    def translated_message_with_args(self) -> str:
        """Return the translated message with its arguments substituted."""
        return insert_args(self.translated_message(), self.args)

    def __str__(self) -> str:
        result = self.message_with_args()
        context_symbol = self.context
        if self.context and self.symbol:
            context_symbol += "::"
        context_symbol += self.symbol

        if context_symbol or self.code:
            parts = [context_symbol] if context_symbol else []
            if self.code:
                parts.append(str(self.code))
            result += " (" + ", ".join(parts) + ")"

        if self.causing_errors:
            result += ": " + ", ".join(str(error) for error in self.causing_errors)
        return result

    def __repr__(self) -> str:
        return (
            f"LogError(message={self.message!r}, code={self.code!r}, "
            f"symbol={self.symbol!r}, context={self.context!r}, "
            f"args={self.args!r}, causing_errors={self.causing_errors!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LogError):
            return NotImplemented
        return (
            self.code == other.code
            and self.context == other.context
            and self.message == other.message
            and self.symbol == other.symbol
            and self.args == other.args
            and self.causing_errors == other.causing_errors
        )

    __hash__ = None  # type: ignore[assignment]


def last_error() -> LogError:
    """Return a copy of the last error set in the current thread."""
    error = getattr(_thread_state, "error", None)
    if error is None:
        return LogError()
    return copy.deepcopy(error)


def set_last_error(error: LogError) -> None:
    """Store a copy of ``error`` as the last error of the current thread."""
    _thread_state.error = copy.deepcopy(error)