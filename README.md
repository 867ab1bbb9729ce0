# cubkit

Building blocks for programs that work with raycaster scene descriptions:
dataclasses for a scene's configuration, ASCII character helpers, number
conversion with 32/64-bit integer behaviour, string helpers with C-like
semantics, a singly linked list, a line reader for raw file descriptors and
a small printf.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `cubkit.config`

Dataclasses describing a scene:

- `Coord(x, y)`: a grid cell.
- `GameMap(grid)`: the map as a list of row strings; the `width` property
  is the length of the longest row and `height` the number of rows.
- `Textures(north, south, east, west)`: texture paths, `None` when unset.
- `Player(pos, dir)`: start cell and facing direction.
- `Config(textures, floor_color, ceiling_color, map, player)`.
- `ParseState`: an `IntEnum` with `FAILURE = -1` and `SUCCESS = 0`.

### `cubkit.convert`

- `atoi(text)`: skips leading whitespace, takes one optional sign and the
  leading digits; the result wraps to a signed 32-bit value.
- `atol(text)`: the same, but clamps to the signed 64-bit limits.
- `atoi_base(text, base)`: parses with the digits of `base`; any run of
  signs is accepted. A base shorter than two characters, or with repeated
  characters, `+`, `-` or non-printable characters, gives `0`.
- `itoa(n)`, `uitoa(n)`: decimal text of `n` taken as a signed or unsigned
  32-bit value.
- `absolute(n)`: absolute value of a signed 32-bit integer.

### `cubkit.chars`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper` and
`to_lower` take a character code or a one-character string. The case
functions return the same kind they were given and only touch ASCII letters.

### `cubkit.strings`

- `find_char(s, c)`, `rfind_char(s, c)`: index of the first/last `c`, or
  `None`; searching for `"\0"` gives `len(s)`.
- `strncmp(s1, s2, n)`, `strcmp(s1, s2)`: difference of the first differing
  character codes, `0` when equal.
- `strnstr(big, little, length)`: index of `little` lying wholly within the
  first `length` characters, `0` for an empty `little`, else `None`.
- `split(s, sep)`, `count_words(s, sep)`: words between separator
  characters, empty words dropped.
- `strtrim(s, charset)`, `substr(s, start, length)`, `strjoin(s1, s2)`.
- `strmapi(s, func)`: new string from `func(index, char)`.
- `striteri(seq, func)`: calls `func(index, item)` on a mutable sequence,
  replacing items for which it returns something other than `None`.
- `memchr(data, c, n)`, `memcmp(a, b, n)`: over bytes-like objects; `n`
  outside the buffers raises `ValueError`.

### `cubkit.lists`

`LinkedList(items=None)` is built from `Node` objects and supports
`push_front`, `push_back` (both return the new node), `len()`, iteration
over contents, `last()` (the tail node or `None`), `clear(delete=None)`
(calls `delete` on each content from tail to head), `iterate(func)` and
`map(func, delete=None)`. If `func` raises during `map`, contents mapped so
far are passed to `delete` and the exception propagates.

### `cubkit.line_reader`

`LineReader(fd)` reads a file descriptor in 1024-byte chunks and returns
one line at a time from `next_line()`, newline included; a final line
without a newline is returned as is, and `None` marks end of input.
Iterating a reader yields lines until then. `get_next_line(fd)` keeps one
reader per descriptor, for descriptors `0` to `15`; others raise
`ValueError`.

### `cubkit.printf`

`sprintf(fmt, *args)` understands `%c %s %p %d %i %u %x %X %%`. `%s` of
`None` gives `(null)`, `%p` of `None` or `0` gives `(nil)`; a `%` before
any other character is kept as is, and a lone `%` at the end is dropped.
Too few arguments raise `TypeError`; extra ones are ignored.
`dprintf(fd, fmt, *args)` writes the result to a file descriptor and
returns the number of bytes written. `put_char`, `put_str`, `put_endl` and
`put_nbr` write to a file descriptor.

## Example

```python
import os
from cubkit.convert import atoi_base
from cubkit.strings import split
from cubkit.printf import sprintf, dprintf

split("  NO ./north.xpm ", " ")                  # ['NO', './north.xpm']
atoi_base("  -ff", "0123456789abcdef")            # -255
sprintf("%s has %d walls (%x)", "map", 42, 255)   # 'map has 42 walls (ff)'

r, w = os.pipe()
dprintf(w, "%c%c\n", "o", "k")
```

## What it does not do

The package provides the configuration types but no reader for scene
files: nothing here parses textures, colours or a map into a `Config`, or
checks that a map is closed. There is no renderer, window or game loop, and
no command-line program.