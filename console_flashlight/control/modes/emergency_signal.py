#!/usr/bin/env python3
# emergency_signal.py
# Phase 3: SOS distress signal.

"""Phase 3: SOS distress signal (three short, three long, three short)."""

from typing import TYPE_CHECKING, Dict, Tuple

from ...low_level.pattern_renderer import EMERGENCY_FLASH
from .phase_common import FULL_POWER, require

if TYPE_CHECKING:  # pragma: no cover
    from ...high_level.flashlight_system import FlashlightSystem

SHORT = "SHORT"
LONG  = "LONG"

SOS_PATTERN: Tuple[str, ...] = (SHORT,) * 3 + (LONG,) * 3 + (SHORT,) * 3

SIGNAL_MS: Dict[str, int] = {
    SHORT: 300,
    LONG : 800,
}


def run(light: "FlashlightSystem", cfg: dict) -> None:
    pause_ms = require(cfg, "sos_pause_ms")

    light.status("EMERGENCY SIGNAL - SOS PATTERN", FULL_POWER)
    for signal in SOS_PATTERN:
        light.pattern(EMERGENCY_FLASH, FULL_POWER)
        light.say(f" SOS SIGNAL: {signal} FLASH")
        light.wait_ms(SIGNAL_MS[signal])

        light.off()
        light.say("Signal pause...")
        light.wait_ms(pause_ms)

    light.say("Emergency SOS signal pattern completed.")
