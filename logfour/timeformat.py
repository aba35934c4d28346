"""Date and time formatting with named formats and Qt-style patterns."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime, timedelta, timezone

from logfour.initialisation import start_time

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_NAMED_FORMATS = {
    "ISO8601": "yyyy-MM-dd hh:mm:ss.zzz",
    "ABSOLUTE": "HH:mm:ss.zzz",
    "DATE": "dd MM yyyy HH:mm:ss.zzz",
}

_DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
_MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
_MAX_RUN = {"d": 4, "M": 4, "h": 2, "H": 2, "m": 2, "s": 2}

# A token is either ("literal", text) or (field letter, width).
_Token = tuple[str, object]


def _run_length(fmt: str, start: int) -> int:
    char = fmt[start]
    end = start
    while end < len(fmt) and fmt[end] == char:
        end += 1
    return end - start


def _tokens(fmt: str) -> Iterator[_Token]:
    i = 0
    n = len(fmt)
    while i < n:
        c = fmt[i]
        if c == "'":
            if i + 1 < n and fmt[i + 1] == "'":
                yield ("literal", "'")
                i += 2
                continue
            text = []
            i += 1
            while i < n:
                if fmt[i] == "'":
                    if i + 1 < n and fmt[i + 1] == "'":
                        text.append("'")
                        i += 2
                        continue
                    i += 1
                    break
                text.append(fmt[i])
                i += 1
            yield ("literal", "".join(text))
            continue

        run = _run_length(fmt, i)
        if c in _MAX_RUN:
            take = min(run, _MAX_RUN[c])
            yield (c, take)
        elif c == "y":
            take = 4 if run >= 4 else 2 if run >= 2 else 1
            yield (c, take) if take > 1 else ("literal", c)
        elif c == "z":
            take = 3 if run >= 3 else 1
            yield (c, take)
        elif c in "aA":
            take = 2 if i + 1 < n and fmt[i + 1] in "pP" else 1
            yield ("ampm", c == "A")
        elif c == "t":
            take = 1
            yield (c, 1)
        else:
            take = 1
            yield ("literal", c)
        i += take


def _tz_name(moment: datetime) -> str:
    aware = moment if moment.tzinfo is not None else moment.astimezone()
    return aware.tzname() or ""


def _render(moment: datetime, kind: str, width: object, twelve_hour: bool) -> str:
    if kind == "literal":
        return str(width)
    if kind == "ampm":
        text = "AM" if moment.hour < 12 else "PM"
        return text if width else text.lower()
    if kind == "d":
        if width == 3:
            return _DAY_NAMES[moment.weekday()][:3]
        if width == 4:
            return _DAY_NAMES[moment.weekday()]
        return f"{moment.day:0{width}d}"
    if kind == "M":
        if width == 3:
            return _MONTH_NAMES[moment.month - 1][:3]
        if width == 4:
            return _MONTH_NAMES[moment.month - 1]
        return f"{moment.month:0{width}d}"
    if kind == "y":
        return f"{moment.year % 100:02d}" if width == 2 else f"{moment.year:04d}"
    if kind == "h":
        hour = (moment.hour % 12 or 12) if twelve_hour else moment.hour
        return f"{hour:0{width}d}"
    if kind == "H":
        return f"{moment.hour:0{width}d}"
    if kind == "m":
        return f"{moment.minute:0{width}d}"
    if kind == "s":
        return f"{moment.second:0{width}d}"
    if kind == "z":
        millis = moment.microsecond // 1000
        return f"{millis:03d}" if width == 3 else str(millis)
    return _tz_name(moment)


def format_datetime(moment: datetime, fmt: str) -> str:
    """Format ``moment`` with a Qt-style date/time pattern.

    Supported fields: ``d dd ddd dddd M MM MMM MMMM yy yyyy h hh H HH m mm
    s ss z zzz AP ap t``; text in single quotes is copied literally and
    ``''`` stands for a single quote. ``h`` counts 1-12 when an AM/PM field
    is present.
    """
    tokens = list(_tokens(fmt))
    twelve_hour = any(kind == "ampm" for kind, _ in tokens)
    return "".join(_render(moment, kind, width, twelve_hour) for kind, width in tokens)


def _to_msecs(moment: datetime) -> int:
    aware = moment if moment.tzinfo is not None else moment.astimezone()
    return (aware - _EPOCH) // timedelta(milliseconds=1)


def to_string(moment: datetime | None, fmt: str) -> str:
    """Format ``moment`` using ``fmt`` or one of the named formats.

    ``NONE`` gives an empty string, ``RELATIVE`` the milliseconds since the
    program started, and ``ISO8601``, ``ABSOLUTE`` and ``DATE`` stand for
    fixed patterns. Any other string is a pattern for :func:`format_datetime`.
    A missing moment or an empty format gives an empty string.
    """
    if not fmt or moment is None or fmt == "NONE":
        return ""
    if fmt == "RELATIVE":
        return str(_to_msecs(moment) - start_time())
    return format_datetime(moment, _NAMED_FORMATS.get(fmt, fmt))


def from_msecs_since_epoch(msecs: int) -> datetime:
    """Return the local time ``msecs`` milliseconds after the Unix epoch."""
    return (_EPOCH + timedelta(milliseconds=msecs)).astimezone()