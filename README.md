# nshkit

Building blocks for a POSIX-style shell runtime, in pure Python with no
third-party dependencies.

## Install

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

- `nshkit.errors`: the `NshError` codes, with their short descriptions
  from `error_repr` (unknown codes give `"unknown error"`); the
  `ShellError` exception, which carries an `NshError`, and its subclass
  `ExecutionError`, which also carries the status `code` to report;
  `warn` and `warnx`, which print `program: message` to stderr (`warn`
  adds the text of the `OSError` being handled, if there is one) and
  return the error given to them.
- `nshkit.parsing`: `parse_digit` gives the value of a hexadecimal digit
  or `None`; `parse_integer(text, basis, max_length)` parses leading
  digits and returns `(value, characters consumed)`;
  `parse_pure_integer(text, basis)` requires the whole string to be
  digits and raises `ValueError` otherwise. Values beyond the unsigned
  64-bit range raise `OverflowError`.
- `nshkit.strutils`: `startswith`; `parse_long` and `parse_int`, which
  parse a whole string with an optional sign and `0x` / leading-`0` base
  prefixes, raising `ValueError` on bad syntax and `OverflowError` outside
  the signed 64-bit or 32-bit range; `portable_filename_char` for the
  POSIX portable filename character set.
- `nshkit.containers`: `CharBitset`, a set of byte values; `RingBuffer`, a
  fixed-capacity FIFO queue with indexing; `RefCount`, a reference count
  whose release callback runs when the last reference is put.
- `nshkit.lineinfo`: `LineInfo`, a source position that can be nested in
  a parent position. `format()` gives `parent.sh:1:1 => script.sh:3:7`,
  and `warn(message, stream)` writes a diagnostic (to stderr by default).
- `nshkit.hashmap`: `HashMap`, a string-keyed mutable mapping with
  chained buckets that doubles in size when more than three quarters
  full, and `hashmap_hash`, the 32-bit string hash it uses.
- `nshkit.pathutils`: `path_components` and `PathComponent` to split a
  path, `path_canonicalize` for lexical simplification of `.` and `..`,
  `path_join`, `path_count_components`, `path_skip_components`,
  `path_remove_prefix`, `iter_pathlist` for `PATH`-style colon lists, and
  `home_filepath`, which returns `None` where the user database is not
  available.
- `nshkit.logconf`: `LogLevel`, `parse_level`, `LogConfig` (parsed from a
  settings string such as `"lexer:DEBUG,parser,*:WARN"`: a domain with no
  level logs at `INFO`, `*` sets the default, and unknown levels are
  ignored) and `Logger`, which writes headed log lines, optionally in
  color. `Logger.setup_environ` reads the `DEBUG` and `LOGFILE` variables
  and logs to stderr when `LOGFILE` is unset.
- `nshkit.expansion_result`: `ExpansionResult`, a word expansion buffer
  that keeps flags for each character, and the `ExpansionMeta` flags.
- `nshkit.shopt`: the `Shopt` options, `shopt_from_string` and
  `string_from_shopt`.
- `nshkit.signal_events`: `SignalList` (each signal once, in arrival
  order), `SignalLut` (a revision table recording signals), `SignalPipe`
  (a non-blocking self-pipe, usable as a context manager) and
  `setup_handler`, which installs an OS signal handler and returns the
  previous one.
- `nshkit.signal_manager`: `SignalManager` and `SignalHandler` keep
  per-signal handler lists and dispatch signals to them, with callbacks
  when a signal gains its first or loses its last handler and hooks around
  a caller-supplied fork function; `PipeSignalManager` installs the OS
  handlers, delivers signals through a pipe (falling back to a lookup
  table when the pipe is full) and restores the old handlers on `close()`.

## Example

```python
from nshkit.pathutils import path_canonicalize, path_join
from nshkit.parsing import parse_pure_integer
from nshkit.logconf import LogConfig, LogLevel

path_canonicalize("/usr//local/./bin/../lib/")   # "/usr/local/lib"
path_join("/home/user", "notes.txt")             # "/home/user/notes.txt"
parse_pure_integer("ff", 16)                     # 255

config = LogConfig.parse("lexer:DEBUG,*:WARN")
config.should_log(LogLevel.INFO, "lexer")        # True
config.should_log(LogLevel.INFO, "parser")       # False
```

## What it does not do

nshkit is a library of parts only. It has no shell of its own: no
command to run, no lexer, parser or command execution, no word expansion
beyond the `ExpansionResult` buffer, no globbing, no builtins, no job
control and no history.