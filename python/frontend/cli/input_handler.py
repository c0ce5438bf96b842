"""Keypress reader for the robot grid terminal UI.

Each key is turned into an action name (``"1"`` .. ``"8"`` for the move
list, ``"undo"``, ``"solve"``, ...) as soon as it is pressed.  Raw mode
uses tty/termios on POSIX and msvcrt on Windows.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable

# Letter commands; move digits pass through unchanged.
_COMMANDS: dict[str, str] = {
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "u": "undo",
    "z": "undo",
    "r": "reset",
    "g": "random",
    "c": "heading",
    "e": "edit",
    "v": "solve",
    "n": "hint",
}

# ESC [ <final byte>.  Up/down step the robot, left/right turn it.
_ARROWS: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def _action(ch: str) -> str:
    return _COMMANDS.get(ch.lower(), ch if ch.isprintable() else "")


def _escape(read_next: Callable[[], str | None]) -> str:
    """Finish an escape sequence; *read_next* returns None when input dries up."""
    if read_next() != "[":
        return "quit"  # bare Escape
    return _ARROWS.get(read_next() or "", "")


# -- platform readers ---------------------------------------------------------


def _read_posix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        return sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def _read_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_read = _read_windows if os.name == "nt" else _read_posix


# -- public API ---------------------------------------------------------------


def get_key() -> str:
    """Block for one key and return its action name.

    Actions: ``"1"``-``"8"`` (moves), ``"up"``/``"down"``/``"left"``/``"right"``
    (arrows), ``"quit"``, ``"undo"``, ``"reset"``, ``"random"``,
    ``"heading"``, ``"edit"``, ``"solve"``, ``"hint"``; any other
    printable key comes back as itself, anything else as ``""``.
    """
    ch = _read()
    if ch == "\x1b":
        return _escape(_read)
    return _action(ch)


def get_key_timeout(timeout: float) -> str | None:
    """Like :func:`get_key`, but return ``None`` after *timeout* seconds.

    Used for the goal banner countdown and the solver animation.
    """
    if os.name == "nt":
        import msvcrt  # type: ignore[import-not-found]
        import time

        deadline = time.monotonic() + timeout
        while time.monotonic() < deadline:
            if msvcrt.kbhit():
                return get_key()
            time.sleep(0.02)
        return None

    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)

    def pending(wait: float) -> str | None:
        ready, _, _ = select.select([fd], [], [], wait)
        if not ready:
            return None
        # Unbuffered, so the tail of an arrow sequence stays visible to select().
        return os.read(fd, 1).decode("utf-8", errors="ignore")

    try:
        tty.setraw(fd)
        ch = pending(timeout)
        if ch is None:
            return None
        if ch == "\x1b":
            return _escape(lambda: pending(0.1))
        return _action(ch)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
