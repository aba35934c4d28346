"""Java-style property tables with defaults and a ``.properties`` reader."""

from __future__ import annotations

import enum
import logging
import string
from collections.abc import Iterable, Mapping
from typing import Any

_log = logging.getLogger(__name__)

_ESCAPE_CHAR = "\\"
_VALUE_ESCAPES = dict(zip("tnr\\\"' ", "\t\n\r\\\"' "))
_KEY_ESCAPES = {" ": " ", ":": ":", "=": "="}


class _State(enum.Enum):
    KEY = enum.auto()
    KEY_SPACE = enum.auto()
    SPACE_VALUE = enum.auto()
    VALUE = enum.auto()
    KEY_ESCAPE = enum.auto()
    VALUE_ESCAPE = enum.auto()
    UNICODE_ESCAPE = enum.auto()


def _setting_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    if isinstance(value, (str, int, float)):
        return str(value)
    return ""


def _strip_line_end(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


class Properties(dict):
    """A mapping of string keys to string values with optional defaults.

    Lookups through :meth:`property` fall back to ``default_properties``
    when a key is not present in this table.
    """

    def __init__(self, default_properties: Properties | None = None) -> None:
        super().__init__()
        self.default_properties = default_properties

    def property(self, key: str, default: str | None = None) -> str | None:
        """Return the value for ``key``, searching the defaults, else ``default``."""
        if key in self:
            value = self[key]
            return "" if value is None else value
        if self.default_properties is not None:
            value = self.default_properties.property(key)
            if value is not None:
                return value
        return default

    def set_property(self, key: str, value: str) -> None:
        """Set ``key`` to ``value``."""
        self[key] = value

    def load(self, source: str | Iterable[str]) -> None:
        """Read properties in ``.properties`` syntax.

        ``source`` is either the whole text or an iterable of lines, such as
        an open text file. A line ending in a backslash continues on the next
        line; leading white space of every line is ignored.
        """
        if source is None:
            raise TypeError("no source specified for load")
        lines: Iterable[str]
        if isinstance(source, str):
            lines = source.split("\n")
        else:
            lines = source

        pending = ""
        start_line = 1
        for number, raw in enumerate(lines, 1):
            line = _strip_line_end(raw).lstrip()
            if line.endswith(_ESCAPE_CHAR):
                pending += line[:-1]
            else:
                self._parse_property(pending + line, start_line)
                pending = ""
                start_line = number + 1
        self._parse_property(pending, start_line)

    def load_mapping(self, mapping: Mapping[str, Any]) -> None:
        """Insert the top-level entries of a settings ``mapping``.

        Keys that name a group entry (containing ``/``) are skipped. Values
        are converted to text; booleans become ``true``/``false`` and values
        without a text form become an empty string.
        """
        for key, value in mapping.items():
            if "/" in key:
                continue
            self[key] = _setting_text(value)

    def property_names(self) -> list[str]:
        """Return the keys of this table followed by the unseen default keys."""
        names = list(self.keys())
        if self.default_properties is not None:
            seen = set(names)
            for name in self.default_properties.property_names():
                if name not in seen:
                    names.append(name)
                    seen.add(name)
        return names

    def _parse_property(self, text: str, line: int) -> None:
        if not text:
            return

        state = _State.KEY
        key: list[str] = []
        value: list[str] = []
        target = key
        ucs = 0
        ucs_digits = 0
        last = len(text) - 1

        for position, c in enumerate(text):
            if state is _State.UNICODE_ESCAPE:
                if c in string.hexdigits:
                    ucs = ucs * 16 + int(c, 16)
                    ucs_digits += 1
                    if ucs_digits == 4 or position == last:
                        target.append(chr(ucs))
                        state = _State.VALUE
                    continue
                if ucs_digits > 0:
                    target.append(chr(ucs))
                state = _State.VALUE

            if state is _State.KEY:
                if c in "!#":
                    return
                if c.isspace():
                    target = value
                    state = _State.KEY_SPACE
                elif c in "=:":
                    target = value
                    state = _State.SPACE_VALUE
                elif c == _ESCAPE_CHAR:
                    state = _State.KEY_ESCAPE
                else:
                    target.append(c)
            elif state is _State.KEY_SPACE:
                if c in "=:":
                    state = _State.SPACE_VALUE
                elif not c.isspace():
                    target.append(c)
                    state = _State.VALUE
            elif state is _State.SPACE_VALUE:
                if not c.isspace():
                    target.append(c)
                    state = _State.VALUE
            elif state is _State.VALUE:
                if c == _ESCAPE_CHAR:
                    state = _State.VALUE_ESCAPE
                else:
                    target.append(c)
            elif state is _State.KEY_ESCAPE:
                if c in _KEY_ESCAPES:
                    target.append(_KEY_ESCAPES[c])
                else:
                    _log.warning(
                        "Unknown escape sequence '\\%s' in key of property "
                        "starting at line %d", c, line,
                    )
                    target.append(c)
                state = _State.KEY
            elif state is _State.VALUE_ESCAPE:
                if c in _VALUE_ESCAPES:
                    target.append(_VALUE_ESCAPES[c])
                    state = _State.VALUE
                elif c == "u":
                    ucs = 0
                    ucs_digits = 0
                    state = _State.UNICODE_ESCAPE
                else:
                    _log.warning(
                        "Unknown escape sequence '\\%s' in value of property "
                        "starting at line %d", c, line,
                    )
                    target.append(c)
                    state = _State.VALUE

        key_text = "".join(key)
        value_text = "".join(value)
        if not key_text and value_text:
            _log.warning("Found value with no key in property starting at line %d", line)
        _log.debug("Loaded property '%s' : '%s'", key_text, value_text)
        self[key_text] = value_text