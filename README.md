# printfmt

A printf-style formatter plus a set of small string, memory, list and
line-reading helpers. Pure Python, no dependencies.

## Installation

    pip install printfmt

For running the tests:

    pip install "printfmt[test]"
    pytest

## Formatting

`printfmt.formatter.format_string(template, *args)` returns the formatted
text. `printfmt.formatter.print_formatted(template, *args, file=None)`
writes it to `file` (standard output if none is given) and returns the
number of characters written.

```python
from printfmt.formatter import format_string, print_formatted

format_string("%5d|%-5s|%x", 42, "ab", 255)   # '   42|ab   |ff'
format_string("%.3s", "abcdef")               # 'abc'
format_string("%*d", -4, 7)                   # '7   '
print_formatted("%c%c\n", "o", "k")           # writes 'ok\n', returns 3
```

- Conversions: `c`, `s`, `p`, `d`, `i`, `u`, `x`, `X` and `%%`.
- Flags: `-` (left align) and `0` (zero padding).
- Width and precision are digits or `*`, which takes the value from the
  arguments. A negative `*` width turns on left alignment; a negative `*`
  precision is ignored.
- `%d`/`%i` treat the value as a signed 32-bit integer, `%u`/`%x`/`%X` as
  an unsigned 32-bit one. `%c` takes a code (modulo 256) or a
  one-character string. `%s` prints `None` as `(null)`. `%p` prints
  `0x` and lower-case hex; `None` counts as address 0.
- A lone `%` at the very end of the template is kept as text; extra
  arguments are ignored.

An unknown or incomplete conversion, or a missing argument, raises
`printfmt.spec.FormatError` (a `ValueError`). An argument of the wrong
type raises `TypeError`. `print_formatted` writes the text that comes
before a faulty conversion before raising.

The lower-level pieces are available too: `printfmt.spec.parse_spec`
parses one conversion into a `ConversionSpec`, and `printfmt.render`
holds `render`, `render_char`, `render_string`, `render_decimal`,
`render_unsigned` and `render_pointer`.

## Helpers

- `printfmt.chars`: `isalnum`, `isalpha`, `isascii`, `isdigit`, `isprint`,
  `tolower`, `toupper`. Each takes a character code or a one-character
  string; `tolower`/`toupper` give back the same kind they were given.
- `printfmt.numbers`: `atoi` (skips leading whitespace, one optional sign,
  stops at the first non-digit, wraps like a 32-bit int) and `itoa`.
- `printfmt.memory`: `bzero`, `calloc`, `memset`, `memcpy`, `memccpy`,
  `memchr`, `memcmp`, `memmove` on `bytearray`/`memoryview` buffers.
  Positions are returned as offsets, or `None` when nothing is found.
- `printfmt.strings`: `strlen`, `strchr`, `strrchr`, `strnstr`, `strncmp`,
  `strlcat`, `strlcpy`, `strcat`, `strcpy`, `strncpy`, `strdup`, `strndup`.
  Searches return indices or `None`; `strlcat` and `strlcpy` return the
  resulting string together with the length the full result would need.
- `printfmt.transform`: `split` (drops empty pieces), `strtrim`, `substr`,
  `strjoin`, `strmapi`.
- `printfmt.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`,
  `put_table`, each writing to `file` (standard output by default) and
  returning the number of characters written.
- `printfmt.tables`: `table_size`, `table_dup`, `resize_table` for lists of
  strings that may end with a `None` terminator.
- `printfmt.lists`: `Node` and `LinkedList`, with `add_front`, `add_back`,
  `last`, `len()`, iteration, `clear`, `for_each` and `map`.
- `printfmt.lines`: `LineReader` (with `next_line` and iteration) and
  `read_lines`, which read a text or binary stream through a fixed-size
  buffer and return lines without their newline. The text after the last
  newline is always returned as a final line, even when it is empty.

```python
import io
from printfmt.lines import read_lines

list(read_lines(io.StringIO("one\ntwo\n")))   # ['one', 'two', '']
```

## What it does not do

This is a library only: it installs no command-line tool. The formatter
knows only the conversions listed above; there are no floating-point
conversions, length modifiers, or `+`, `#` and space flags.