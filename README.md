# solong

A small pure-Python toolkit with no third-party dependencies. It has two parts:

* compact helpers for characters, numbers, strings, byte buffers, singly linked
  lists, buffered line reading and printf-style formatting;
* the data model of a tile-based game in which a player collects every
  collectible on a walled map and then leaves through the exit: entities, key
  codes, error messages, game state and command-line argument checking.

## Modules

| Module | What it offers |
| --- | --- |
| `solong.chars` | `is_alpha`, `is_print`, `is_space`, `only_spaces`, `is_all_digits`, `is_on_str`, `put_str`, `put_endl` |
| `solong.numbers` | `atoi` (32-bit wrap), `atol` (64-bit wrap), `itoa`, `put_number` |
| `solong.memory` | `memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp`, `calloc` on mutable byte buffers such as `bytearray` |
| `solong.linked_list` | `Node` and `LinkedList` with `push_front`, `append`, `last`, `clear`, `for_each`, `map`, `len()` and iteration |
| `solong.strings` | `strchr`, `strrchr`, `strncmp`, `strnstr`, `strlcpy`, `strlcat`, `streq`, `copy_or_blank` |
| `solong.line_reader` | `LineReader` and `read_lines`, which read a text or binary stream line by line through a fixed-size buffer (20 by default) |
| `solong.transform` | `substr`, `strjoin`, `strtrim`, `split`, `strmapi`, `striteri` |
| `solong.printf` | `render` builds a formatted string and `printf` writes it to standard output and returns its length; both take `%c %s %p %d %i %u %x %X %%` |
| `solong.game` | `Entity`, `Key`, `ErrorMessage`, `GameError`, `Point`, `GameMap`, `Game`, `new_game`, `check_args` |

Search functions such as `strchr`, `strnstr` and `memchr` return an index, or
`None` when nothing is found. `strlcpy` and `strlcat` return a tuple of the
resulting text and the length the untruncated result would have had.

## Examples

Parsing and formatting numbers:

```python
from solong.numbers import atoi, itoa

atoi("   -42abc")   # -42
itoa(-2147483648)   # "-2147483648"
```

Splitting and trimming text:

```python
from solong.transform import split, strtrim

split("  hello  world ", " ")   # ["hello", "world"]
strtrim("xxhixx", "x")          # "hi"
```

Formatting:

```python
from solong.printf import render

render("%d items, %x in hex, %s", 3, 255, None)   # "3 items, ff in hex, (null)"
```

Reading lines from a stream:

```python
import io
from solong.line_reader import read_lines

for line in read_lines(io.StringIO("1111\n1PCE\n1111\n"), 20):
    print(repr(line))
```

Working with a linked list:

```python
from solong.linked_list import LinkedList

numbers = LinkedList([1, 2, 3])
numbers.push_front(0)
len(numbers)      # 4
list(numbers)     # [0, 1, 2, 3]
```

Setting up a game:

```python
from solong.game import GameError, check_args, new_game

try:
    path = check_args(["so_long", "maps/level.ber"])
except GameError as error:
    print(error)

game = new_game()   # empty map, no tiles, moves == -1
```

A map is made of `0` (open space), `1` (wall), `C` (collectible), `E` (exit)
and `P` (player start), as listed by `Entity`. `check_args` raises `GameError`
with `ErrorMessage.INVALID_NBR_ARGS` unless it gets exactly a program name and
one argument, and with `ErrorMessage.NULL_MAP` when that argument is empty.

## What this package does not do

The game part is a data model only. The package does not read or validate map
files, does not check that every collectible and the exit can be reached, does
not open a window, load tile images, render the map, handle key presses or
count moves on screen, and installs no command to start a game.