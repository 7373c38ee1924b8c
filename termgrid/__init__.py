"""Building blocks for a terminal emulator: positions, cells, colours, sync and layout."""

__version__ = "0.1.0"