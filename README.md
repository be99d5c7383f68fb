# cub3d

Support code for a raycasting game: checking the command line and the map
file name, loading XPM textures, resolving X11 colour names, reading
streams line by line, and a small printf-style formatter.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The command

```
cub3d path/to/map.cub
```

The command takes exactly one argument, the path to a map. The path must be
at least five characters long, must end in `.cub`, and the character before
`.cub` must not be `/` (so the file has a name part). When the arguments are
wrong it writes `Error` and a message, each on its own line, to standard
error and exits with status 1; otherwise it exits with status 0.

## What it does not do

The command only checks its arguments. It does not open or read the map
file, does not check the map's contents, and opens no window: there is no
rendering, raycasting, input handling or game loop in this package.

## Using the library

### Checking arguments

`cub3d.parsing.parse` takes the arguments without the program name and
returns the map path, or raises `ParseError` (a `ValueError`):

```python
from cub3d.parsing import ParseError, parse, print_err

try:
    path = parse(["maps/level.cub"])
except ParseError as exc:
    print_err(str(exc))
```

`check_parameters` and `has_cub_extension` are the two checks `parse` runs.
`print_err(message, stream=None)` writes `Error\n<message>\n` to the given
stream, or to standard error. `cub3d.cli.main(argv=None)` runs the same
checks and returns the exit status.

### XPM textures

```python
from cub3d.xpm import load_xpm

image = load_xpm("textures/wall.xpm")
print(image.width, image.height, hex(image.pixel(0, 0)))
```

`load_xpm` reads a file as Latin-1; `parse_xpm_text` decodes XPM source held
in a string, and `parse_xpm` takes the quoted strings of an image (header,
colour definitions, pixel rows) as an iterable. The result is an
`XpmImage` with `width`, `height` and `pixels`, a tuple of rows of
`0xAARRGGBB` values; the colour `None` becomes `0xFF000000`. Malformed data
raises `XpmError`, and `pixel(x, y)` raises `IndexError` outside the image.

The helpers `split_words`, `find_unquoted`, `strip_comments` and
`quoted_strings` are available on their own as well.

### Colour names

```python
from cub3d.colors import lookup_color

lookup_color("light", "blue")   # "light blue" -> 0xadd8e6
lookup_color("#ff8000")         # 0xff8000
lookup_color("None")            # -1
lookup_color("no such colour")  # 0
```

Names are matched case-insensitively against the X11 colour table.

### Reading lines

Lines keep their newline; the last line is returned as it is. Text and
binary streams both work.

```python
from cub3d.lines import LineReader, get_next_line, read_lines

with open("maps/level.cub") as stream:
    for line in read_lines(stream, buffer_size=32):
        ...
```

`LineReader(stream, buffer_size=10).readline()` returns `None` once no data
is left. `get_next_line(stream)` keeps a reader per stream behind the scenes,
so successive calls continue where the last one stopped.

### Formatting

`%c %s %p %d %i %u %x %X %%` are supported. `%s` of `None` gives
`(null)`, `%p` of `None` or `0` gives `(nil)`, and integers wrap to 32 bits.

```python
from cub3d.printf import ft_format, ft_printf, to_base

ft_format("%d tiles, id %x", 42, 255)   # "42 tiles, id ff"
count = ft_printf("%s\n", "ready")       # writes to stdout, returns 6
to_base(255, "01")                       # "11111111"
```

### String and character helpers

`cub3d.strings` holds `atoi`, `itoa`, `split`, `strtrim`, `strnstr`,
`strncmp`, `substr`, `strjoin`, `strchr`, `strrchr` and `strmapi`.
`cub3d.chars` holds `memcmp`, `memchr`, `is_alnum`, `is_alpha`,
`is_digit`, `is_ascii`, `is_print`, `to_lower` and `to_upper`.