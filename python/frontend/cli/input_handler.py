"""Single-keypress reader shared by the terminal frontends.

Reads arrow keys, WASD, tile digits and command letters without waiting
for Enter. Uses tty+termios on macOS / Linux and msvcrt on Windows.
"""

from __future__ import annotations

import os
import sys
from typing import Callable

# -- key mapping ----------------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "x": "shuffle",
    "r": "shuffle",
    "h": "hint",
    "?": "hint",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "\r": "enter",
    "\n": "enter",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string.

    Digits 1-8 come back unchanged so callers can move that tile.
    """
    action = _KEY_MAP.get(ch.lower() if ch.isalpha() else ch)
    if action is not None:
        return action
    return ch if ch.isprintable() else ""


def tile_from_key(key: str) -> int | None:
    """Return the tile number for a digit key, or None."""
    if len(key) == 1 and key in "12345678":
        return int(key)
    return None


def _decode_escape(read_next: Callable[[], str | None]) -> str:
    """Finish reading ``ESC [ X``; a bare Escape means quit."""
    ch2 = read_next()
    if ch2 != "[":
        return "quit"
    ch3 = read_next()
    if ch3 is None:
        return ""
    return _ARROW_MAP.get(ch3, "")


# -- low-level readers ----------------------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- public API -----------------------------------------------------------------


def get_key() -> str:
    """Block until a key is pressed and return its action string.

    Possible return values:
        "up", "down", "left", "right"  : slide a tile
        "1" .. "8"                     : slide that tile
        "shuffle"                      : x / r
        "hint"                         : h / ?
        "quit"                         : q / Ctrl-C / Escape
        "enter"                        : Enter / Return
        "<char>"                       : other printable char
        ""                             : unrecognised key
    """
    ch = _getch()
    if ch == "\x1b":
        return _decode_escape(_getch)
    return resolve(ch)


def get_key_timeout(timeout: float) -> str | None:
    """Like ``get_key`` but gives up after *timeout* seconds.

    Returns None when no key arrived. Reads with ``os.read`` so that
    ``select`` still sees the rest of a multi-byte arrow sequence.
    """
    if os.name == "nt":
        import msvcrt  # type: ignore[import-not-found]
        import time

        end = time.monotonic() + timeout
        while time.monotonic() < end:
            if msvcrt.kbhit():
                return get_key()
            time.sleep(0.01)
        return None

    import select
    import termios
    import tty

    fd = sys.stdin.fileno()

    def read_pending(wait: float) -> str | None:
        ready, _, _ = select.select([fd], [], [], wait)
        if not ready:
            return None
        return os.read(fd, 1).decode("utf-8", errors="ignore")

    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = read_pending(timeout)
        if ch is None:
            return None
        if ch == "\x1b":
            return _decode_escape(lambda: read_pending(0.1))
        return resolve(ch)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
