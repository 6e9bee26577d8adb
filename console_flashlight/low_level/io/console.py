#!/usr/bin/env python3
# console.py
# Console output abstraction used by the flashlight system.

"""Console output abstraction used by the flashlight system.

Owns the output stream and remembers the last in-place rendered line, so the
renderer can overwrite it without any hidden terminal state.
"""

import os
import subprocess
import sys
from typing import List, Optional, TextIO

from ..pattern_renderer import render_pattern


def _default_clear_command() -> List[str]:
    return ["cmd", "/c", "cls"] if os.name == "nt" else ["clear"]


class ConsoleOutput:
    """Minimal wrapper around a text stream with carriage-return redraw."""

    def __init__(self, stream: Optional[TextIO] = None, clear_command: Optional[List[str]] = None):
        self.stream = stream if stream is not None else sys.stdout
        self.clear_command = clear_command or _default_clear_command()
        self.last_line = ""

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def render(self, pattern: str, intensity=0) -> str:
        """Redraw the current line with the given pattern. Returns the written text."""
        text = render_pattern(pattern, intensity, self.last_line)
        self._write(text)
        self.last_line = text
        return text

    def write_line(self, text: str = "") -> None:
        # A newline settles the redraw line; nothing is left to overwrite.
        self._write(f"{text}\n")
        self.last_line = ""

    def is_terminal(self) -> bool:
        isatty = getattr(self.stream, "isatty", None)
        try:
            return bool(isatty and isatty())
        except ValueError:  # closed stream
            return False

    def clear_screen(self) -> None:
        """Clear the terminal. Skipped when output is not an interactive terminal."""
        if not self.is_terminal():
            return
        try:
            subprocess.run(self.clear_command, check=False)
        except OSError as exc:
            self.write_line(f"[WARN] Screen could not be cleared: {exc}")
        self.last_line = ""


__all__ = ["ConsoleOutput"]
