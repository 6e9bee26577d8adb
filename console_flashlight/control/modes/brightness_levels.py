#!/usr/bin/env python3
# brightness_levels.py
# Phase 4: step through the brightness table from low to maximum.

"""Phase 4: step through the brightness table from low to maximum."""

from typing import TYPE_CHECKING, List, Tuple

from ...low_level.pattern_renderer import VARIABLE_BRIGHTNESS
from .phase_common import require

if TYPE_CHECKING:  # pragma: no cover
    from ...high_level.flashlight_system import FlashlightSystem


def brightness_steps(cfg: dict) -> List[Tuple[int, str]]:
    levels = require(cfg, "brightness_levels")
    labels = require(cfg, "brightness_labels")
    if len(levels) != len(labels):
        raise ValueError(
            f"brightness_levels ({len(levels)}) and brightness_labels ({len(labels)}) differ in length"
        )
    return [(int(level), str(label)) for level, label in zip(levels, labels)]


def run(light: "FlashlightSystem", cfg: dict) -> None:
    steps = brightness_steps(cfg)
    hold_ms = require(cfg, "brightness_hold_ms")

    light.status("BRIGHTNESS LEVEL CONTROL", 0)
    for level, label in steps:
        light.status(f"BRIGHTNESS: {label}", level)
        light.pattern(VARIABLE_BRIGHTNESS, level)
        light.say(f" Brightness Level: {label} ({level}%)")
        light.wait_ms(hold_ms)

    light.off()
    light.say("Brightness demonstration completed.")
