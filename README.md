# logfour

Building blocks for a log4j-style logging system. The package has no
dependencies outside the standard library.

## Modules

- `logfour.logerror`: `LogError`, a structured error record. It holds a
  message (a single trailing full stop is removed), a code, a symbol, a
  translation context, `%1`-style arguments and a list of causing errors.
  `insert_args()` fills the placeholders. `last_error()` and
  `set_last_error()` keep one error per thread.
- `logfour.properties`: `Properties`, a `dict` of Java-style properties.
  It reads `.properties` text with line continuations, `#`/`!` comments,
  key and value escapes, `\uXXXX` sequences and a fallback table of default
  properties.
- `logfour.timeformat`: `format_datetime()` formats a `datetime` with
  Qt-style patterns such as `yyyy-MM-dd hh:mm:ss.zzz`. `to_string()` also
  accepts the named formats `ISO8601`, `ABSOLUTE`, `DATE`, `RELATIVE` and
  `NONE`. `from_msecs_since_epoch()` converts epoch milliseconds to local
  time.
- `logfour.initialisation`: `start_time()` returns the program start in
  epoch milliseconds. `environment_settings()` and `setting()` read the
  variables `LOG4QT_DEBUG`, `LOG4QT_DEFAULTINITOVERRIDE` and
  `LOG4QT_CONFIGURATION` under the keys `Debug`, `DefaultInitOverride` and
  `Configuration`.
- `logfour.appenderattachable`: `AppenderAttachable`, a thread-safe, ordered
  collection of appenders. Each appender is held at most once, appenders
  are compared by identity, and they are looked up by their `name`
  attribute.

## Installation

```
pip install logfour
```

## Examples

### Property files

```python
from logfour.properties import Properties

defaults = Properties()
defaults.set_property("log4j.threshold", "INFO")

props = Properties(defaults)
props.load("log4j.rootLogger = DEBUG, console\n# a comment\n")

assert props.property("log4j.rootLogger") == "DEBUG, console"
assert props.property("log4j.threshold") == "INFO"
assert props.property("missing", "fallback") == "fallback"
assert props.property_names() == ["log4j.rootLogger", "log4j.threshold"]
```

`load()` takes either the whole text or an iterable of lines, such as an
open text file. `load_mapping()` copies the top-level entries of a settings
mapping.

### Error records

```python
from logfour.logerror import LogError, last_error, set_last_error

error = LogError.create("Invalid option string '%1' for a boolean.", 5, "5", "OptionConverter")
error << "maybe"
error.add_causing_error(LogError("Disk full", 28))

assert str(error) == (
    "Invalid option string 'maybe' for a boolean (OptionConverter, 5): Disk full (28)"
)

set_last_error(error)
assert last_error() == error
```

### Time stamps

```python
from datetime import datetime
from logfour.timeformat import format_datetime, to_string

moment = datetime(2024, 3, 5, 14, 7, 9, 123000)
assert format_datetime(moment, "yyyy-MM-dd hh:mm:ss.zzz") == "2024-03-05 14:07:09.123"
assert to_string(moment, "ABSOLUTE") == "14:07:09.123"
assert to_string(moment, "DATE") == "05 03 2024 14:07:09.123"
assert to_string(moment, "NONE") == ""
```

### Appenders

```python
from types import SimpleNamespace
from logfour.appenderattachable import AppenderAttachable

holder = AppenderAttachable()
console = SimpleNamespace(name="console")
holder.add_appender(console)
holder.add_appender(console)

assert holder.appenders() == [console]
assert holder.appender("console") is console
holder.remove_appender("console")
assert not holder.is_attached(console)
```

## What the package does not do

The package has no loggers, no logger hierarchy and no log level type. It
has no appenders that write output, no layouts and no pattern formatter for
logging events. It does not read a configuration file to set up logging.
`AppenderAttachable` only stores the appender objects you give it.

## Running the tests

```
pip install -e ".[test]"
pytest
```