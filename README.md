# termgrid

Pieces that a terminal emulator is built from, with no window system
attached. Each one can be used and tested on its own.

## What is inside

| Module | Purpose |
| --- | --- |
| `termgrid.pos` | Grid coordinates (`Pos`, with `add`, `sub` and `grid_clamp`), clamping of lines to grid boundaries (`Boundary`, `clamp_line`), plain grid dimensions (`Size`), sides (`Side`) and the DEC line-drawing character sets (`StandardCharset`, `CharsetIndex`, `Charsets`). |
| `termgrid.square` | A single grid cell (`Square`) with its attribute `Flags`, zero-width characters, underline colour and `Hyperlink`, plus `line_length` for a row of cells. |
| `termgrid.ime` | Input-method state: `Ime` and its `Preedit` text, with the cursor's distance from the end of the text measured in display cells. |
| `termgrid.sync` | `FairMutex`: a lock in which a waiting thread is served before the current holder can lock it again. Locking returns a guard usable in a `with` block. |
| `termgrid.logger` | `RioFormatter`, a coloured `[LEVEL] logger message` format, and `setup_logging` to install it on stdout at a level given by name. |
| `termgrid.event` | Events a terminal sends to its front end (`RioEvent`, `EventKind`), `ClickState`, and the `EventListener` / `VoidListener` interface. |
| `termgrid.environment` | `setup_environment` and `apply_env_vars`: set `TERM`, `COLORTERM`, `LC_CTYPE`, drop `DESKTOP_STARTUP_ID`, and apply user-supplied `NAME=value` pairs, in `os.environ` or any mapping you pass. |
| `termgrid.colorparse` | Colour parsing for OSC and SGR sequences: `xparse_color`, `parse_rgb_color`, `parse_legacy_color`, `parse_number`, `parse_sgr_color`, `handle_colon_rgb`, giving `Rgb` or `Indexed` colours. |
| `termgrid.synchronized` | `SyncProcessor`: holds output bytes back during a synchronized update and hands them on when the update ends (`ESC P = 2 s`), times out, or the buffer fills. |
| `termgrid.writequeue` | `WriteQueue`: pending writes to a non-blocking writer, resumed where a partial or would-block write stopped. |
| `termgrid.layout` | `Layout`: turns a window size, scale factor and font size into columns and rows, and mouse pixels into a grid `Pos`. |

## Examples

Parsing colours as they appear in escape sequences:

```python
from termgrid.colorparse import parse_number, xparse_color

color = xparse_color(b"rgb:ff/80/00")   # Rgb(r=255, g=128, b=0)
legacy = xparse_color(b"#f80")           # the short "#rgb" form
index = parse_number(b"42")              # 42; None for bad or overflowing input
```

Working out how many cells fit in a window:

```python
from termgrid.layout import Layout

layout = Layout(800, 600, 1.0, 16)
columns, rows = layout.compute()
```

Queueing output for a non-blocking writer:

```python
from termgrid.writequeue import WriteQueue

queue = WriteQueue()
queue.push(b"echo hello\r")
while queue.needs_write():
    queue.write_to(writer)   # any object with a write(bytes) method
```

Holding bytes back during a synchronized update:

```python
from termgrid.synchronized import SyncProcessor

out = bytearray()
sync = SyncProcessor()
sync.begin()                     # start an update
for byte in b"hello":
    sync.advance(byte, out.append)   # held back, out stays empty
sync.stop_sync(out.append)       # out == b"hello"
```

Coloured log lines:

```python
from termgrid.logger import setup_logging

setup_logging("debug")
```

Accepted level names are off, error, warn, info, debug and trace, in any
case; any other name turns logging off.

## What it does not do

termgrid is a set of parts, not a terminal. It has no escape-sequence
parser that drives a grid, no screen buffer with scrollback, no PTY or
child-process handling, no event loop and no window or renderer. A
synchronized update is started by calling `SyncProcessor.begin` yourself;
nothing in the package recognises the start sequence on the normal output
path. There is no command-line program.

## Tests

The test suite uses pytest and is installed with the `test` extra.