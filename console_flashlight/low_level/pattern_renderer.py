#!/usr/bin/env python3
# pattern_renderer.py
# Pure rendering of illumination patterns into console line text.

"""
Pattern renderer for the console flashlight.

Turns a pattern tag and an intensity percentage into the exact text that has
to be written to redraw the light bar in place. Nothing here touches a stream;
the caller passes the previously rendered line so OFF knows how much to blank.
"""

import math
from typing import Dict

# ---------- Pattern tags ----------
STEADY_BRIGHT       = "STEADY_BRIGHT"
STROBE_FLASH        = "STROBE_FLASH"
EMERGENCY_FLASH     = "EMERGENCY_FLASH"
VARIABLE_BRIGHTNESS = "VARIABLE_BRIGHTNESS"
OFF                 = "OFF"

VALID_PATTERNS = {STEADY_BRIGHT, STROBE_FLASH, EMERGENCY_FLASH, VARIABLE_BRIGHTNESS, OFF}

# Bar geometry
BAR_MAX_WIDTH = 60    # characters at 100 %
CLEAR_WIDTH   = 80    # blanks written for OFF
LABEL         = "[LIGHT] "

PATTERN_CHARS: Dict[str, str] = {
    STEADY_BRIGHT      : "█",  # █ full block
    VARIABLE_BRIGHTNESS: "█",
    STROBE_FLASH       : "▓",  # ▓ dark shade
    EMERGENCY_FLASH    : "▒",  # ▒ medium shade
}
DEFAULT_CHAR = "░"             # ░ light shade


def bar_width(intensity) -> int:
    """floor(intensity * 60 / 100), never below zero."""
    try:
        value = float(intensity)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(value):
        return 0
    return max(0, math.floor(value * BAR_MAX_WIDTH / 100))


def pattern_char(pattern: str) -> str:
    return PATTERN_CHARS.get(pattern, DEFAULT_CHAR)


def visible_text(rendered: str) -> str:
    """
    Return what remains on screen after writing `rendered` to a fresh line.

    Each carriage return moves back to column 0; later segments overwrite the
    earlier ones character by character.
    """
    screen = ""
    for segment in rendered.split("\r"):
        screen = segment + screen[len(segment):]
    return screen


def render_pattern(pattern: str, intensity=0, last_line: str = "") -> str:
    """
    Build the redraw text for one pattern frame.

    :param pattern: pattern tag, unknown tags fall back to the light shade.
    :param intensity: percentage driving the bar width (not validated).
    :param last_line: previously rendered text on the current line.
    :return: text to write, starting with a carriage return.
    """
    if pattern == OFF:
        width = max(CLEAR_WIDTH, len(visible_text(last_line)))
        return "\r" + " " * width + "\r"

    bar = pattern_char(pattern) * bar_width(intensity)
    return f"\r{LABEL}{bar} [{intensity}%]"


__all__ = [
    "STEADY_BRIGHT", "STROBE_FLASH", "EMERGENCY_FLASH", "VARIABLE_BRIGHTNESS", "OFF",
    "VALID_PATTERNS", "BAR_MAX_WIDTH", "CLEAR_WIDTH",
    "bar_width", "pattern_char", "visible_text", "render_pattern",
]
