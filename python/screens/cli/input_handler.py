"""Single-keypress reader for the terminal frontend.

Arrow keys, WASD, digits and command letters are read without Enter.
Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys
from typing import Callable


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


# -- key mapping ---------------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "restart",
    "n": "hint",
    "p": "preview",
    "\r": "enter",
    "\n": "enter",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def resolve_key(ch: str) -> str:
    """Map a raw character to its action string.

    Digits come back unchanged so callers can treat them as tile numbers.
    """
    if ch.isdigit():
        return ch
    action = _KEY_MAP.get(ch.lower() if ch.isalpha() else ch)
    if action is not None:
        return action
    return ch if ch.isprintable() else ""


def _decode_escape(read: Callable[[], str | None]) -> str:
    """Finish an ``ESC`` sequence. *read* returns ``None`` when no byte follows."""
    ch2 = read()
    if ch2 is None:
        return "quit"  # bare Escape
    if ch2 != "[":
        return "quit"
    ch3 = read()
    if ch3 is None:
        return ""
    return _ARROW_MAP.get(ch3, "")


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Possible return values:
        "up", "down", "left", "right"  — movement
        "0".."9"                       — tile number
        "quit"                         — q / Ctrl-C / Escape
        "restart"                      — r
        "hint"                         — n
        "preview"                      — p (show the picture)
        "enter"                        — Enter / Return
        ""                             — unrecognised key
    """
    ch = _getch()
    if ch == "\x1b":
        return _decode_escape(_getch)
    return resolve_key(ch)


def get_key_timeout(timeout: float) -> str | None:
    """Read a single keypress, or return ``None`` after *timeout* seconds.

    Uses ``os.read`` (unbuffered) so that ``select`` sees the remaining
    bytes of multi-byte arrow-key sequences.
    """
    if os.name == "nt":
        import msvcrt  # type: ignore[import-not-found]
        import time

        end = time.monotonic() + timeout
        while time.monotonic() < end:
            if msvcrt.kbhit():
                return get_key()
            time.sleep(0.02)
        return None

    import select
    import termios
    import tty

    fd = sys.stdin.fileno()

    def _read_pending(wait: float) -> str | None:
        ready, _, _ = select.select([fd], [], [], wait)
        if not ready:
            return None
        return os.read(fd, 1).decode("utf-8", errors="ignore")

    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = _read_pending(timeout)
        if ch is None:
            return None
        if ch == "\x1b":
            return _decode_escape(lambda: _read_pending(0.1))
        return resolve_key(ch)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
