"""ANSI colouring of output lines, alternating by line parity."""

import enum
from typing import TextIO, Tuple


ANSI_CYAN = '\033[36m'
ANSI_PURPLE = '\033[35m'
ANSI_RESET = '\033[0m'

class ColourMode(str, enum.Enum):
    YES = 'yes'
    NO = 'no'
    AUTO = 'auto'
    def __str__(self) -> str:
        return self.value

def colour_enabled(mode: ColourMode, stream: TextIO) -> bool:
    """Whether to colour output written to stream. In auto mode, only colour terminals."""
    if (mode == ColourMode.AUTO):
        return hasattr(stream, 'isatty') and stream.isatty()
    return (mode == ColourMode.YES)

def line_style(lineno: int, enabled: bool) -> Tuple[str, str]:
    """Returns the (prefix, suffix) escape codes for the given line."""
    if not enabled:
        return ('', '')
    colour = ANSI_CYAN if (lineno % 2 == 0) else ANSI_PURPLE
    return (colour, ANSI_RESET)

def paint(text: str, lineno: int, enabled: bool) -> str:
    (prefix, suffix) = line_style(lineno, enabled)
    return prefix + text + suffix
