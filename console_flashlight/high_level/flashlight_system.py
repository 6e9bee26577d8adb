#!/usr/bin/env python3
# flashlight_system.py
# High-level FlashlightSystem that wraps the console output.

"""
High-level FlashlightSystem built on top of low_level.io.console
- Light entry points: pattern(), off(), wait_ms()
- Fixed program texts: header(), initialize(), status(), terminate()
"""

import time
from typing import Callable, Optional

from ..low_level.io.console import ConsoleOutput
from ..low_level.pattern_renderer import OFF

HEADER_RULE = "=" * 80
STATUS_RULE = "-" * 70


class FlashlightSystem:
    def __init__(self, output: Optional[ConsoleOutput] = None, sleep: Optional[Callable[[float], None]] = None):
        self.output = output if output is not None else ConsoleOutput()
        self._sleep = sleep if sleep is not None else time.sleep
        self._lit = False

    # --------- Light APIs ----------
    def pattern(self, pattern: str, intensity=100):
        if pattern == OFF:
            self.off()
            return
        self.output.render(pattern, intensity)
        self._lit = True

    def off(self):
        self.output.render(OFF)
        self._lit = False

    @property
    def is_lit(self) -> bool:
        return self._lit

    def say(self, text: str = ""):
        self.output.write_line(text)

    def wait_ms(self, ms):
        self._sleep(max(0.0, float(ms)) / 1000.0)

    # --------- Banners ----------
    def header(self):
        self.output.clear_screen()
        for line in (
            HEADER_RULE,
            "              PROFESSIONAL CONSOLE FLASHLIGHT APPLICATION",
            "                        Active Illumination System",
            HEADER_RULE,
            "Application provides console-based illumination, strobe patterns,",
            "and emergency signaling through dynamic screen brightness control.",
            HEADER_RULE,
            "",
        ):
            self.say(line)

    def initialize(self, delay_ms=1000):
        """Print the readiness checklist, then give the 'system' a moment."""
        for line in (
            "FLASHLIGHT SYSTEM INITIALIZATION:",
            "Console Display Engine: Active",
            "Illumination Processor: Operational",
            "Pattern Generator: Ready",
            "Emergency Protocols: Loaded",
            "System Status: READY FOR OPERATION",
            STATUS_RULE,
            "",
        ):
            self.say(line)
        self.wait_ms(delay_ms)

    def status(self, mode: str, power_level: int):
        """Operational status banner. The power level is informational only."""
        self.say()
        self.say(STATUS_RULE)
        self.say(f"OPERATIONAL MODE: {mode}")
        self.say(f"Power Level: {power_level}%")
        self.say("Status: ACTIVE")
        self.say(STATUS_RULE)

    def terminate(self):
        self.say()
        self.say()
        for line in (
            HEADER_RULE,
            "               FLASHLIGHT APPLICATION OPERATION COMPLETED",
            "                        All Systems Deactivated",
            HEADER_RULE,
            "Flashlight functionality demonstration completed successfully.",
            "Console illumination system has been properly shut down.",
            "Program terminated with successful operational status.",
            HEADER_RULE,
        ):
            self.say(line)

    def shutdown(self):
        if self._lit:
            self.off()
