#!/usr/bin/env python3
# strobe_light.py
# Phase 2: strobe flashes with a fixed on-time and configurable pause.

"""Phase 2: strobe flashes with a fixed on-time and configurable pause."""

from typing import TYPE_CHECKING

from ...low_level.pattern_renderer import STROBE_FLASH
from .phase_common import FULL_POWER, require

if TYPE_CHECKING:  # pragma: no cover
    from ...high_level.flashlight_system import FlashlightSystem


def run(light: "FlashlightSystem", cfg: dict) -> None:
    flash_count = int(require(cfg, "strobe_flash_count"))
    flash_ms = require(cfg, "strobe_flash_ms")
    interval_ms = require(cfg, "strobe_interval_ms")

    light.status("STROBE LIGHT PATTERN", FULL_POWER)
    for flash in range(1, flash_count + 1):
        light.pattern(STROBE_FLASH, FULL_POWER)
        light.say(f" FLASH {flash}/{flash_count} - HIGH INTENSITY")
        light.wait_ms(flash_ms)

        light.off()
        light.say("Flash interval pause...")
        light.wait_ms(interval_ms)

    light.say("Strobe light pattern sequence completed.")
