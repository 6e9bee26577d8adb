#!/usr/bin/env python3
# continuous_illumination.py
# Phase 1: steady light at full power.

"""Phase 1: steady light at full power."""

from typing import TYPE_CHECKING

from ...low_level.pattern_renderer import STEADY_BRIGHT
from .phase_common import FULL_POWER, require

if TYPE_CHECKING:  # pragma: no cover
    from ...high_level.flashlight_system import FlashlightSystem


def run(light: "FlashlightSystem", cfg: dict) -> None:
    duration_s = int(require(cfg, "continuous_duration_s"))
    tick_ms = require(cfg, "continuous_tick_ms")

    light.status("CONTINUOUS ILLUMINATION", FULL_POWER)
    for second in range(1, duration_s + 1):
        light.pattern(STEADY_BRIGHT, FULL_POWER)
        light.say(f" Illumination Active - Duration: {second}/{duration_s} seconds")
        light.wait_ms(tick_ms)

    light.off()
    light.say("Continuous illumination mode completed.")
