"""Tests for the four flashlight phases in control/modes."""

import pytest

from console_flashlight.control.modes import (
    brightness_levels,
    continuous_illumination,
    emergency_signal,
    strobe_light,
)
from console_flashlight.control.modes.phase_common import require
from console_flashlight.low_level.pattern_renderer import (
    EMERGENCY_FLASH,
    OFF,
    STEADY_BRIGHT,
    STROBE_FLASH,
    VARIABLE_BRIGHTNESS,
)


def test_require_reports_missing_key():
    with pytest.raises(KeyError, match="Missing flashlight configuration key"):
        require({}, "strobe_flash_count")


class TestContinuousIllumination:

    def test_three_steady_ticks_then_off(self, light, output, stream, fake_sleep, cfg):
        continuous_illumination.run(light, cfg)
        assert output.renders == [(STEADY_BRIGHT, 100)] * 3 + [(OFF, 0)]
        assert fake_sleep.calls == [1.0, 1.0, 1.0]
        text = stream.getvalue()
        for n in (1, 2, 3):
            assert f"Duration: {n}/3 seconds" in text
        assert "OPERATIONAL MODE: CONTINUOUS ILLUMINATION" in text
        assert text.rstrip().endswith("Continuous illumination mode completed.")


class TestStrobe:

    def test_eight_flash_off_cycles(self, light, output, fake_sleep, cfg):
        strobe_light.run(light, cfg)
        assert output.renders == [(STROBE_FLASH, 100), (OFF, 0)] * 8
        assert fake_sleep.calls == [0.2, 0.5] * 8

    def test_flash_counter_lines(self, light, stream, cfg):
        strobe_light.run(light, cfg)
        text = stream.getvalue()
        assert "FLASH 1/8 - HIGH INTENSITY" in text
        assert "FLASH 8/8 - HIGH INTENSITY" in text
        assert "FLASH 9/8" not in text
        assert text.count("Flash interval pause...") == 8

    def test_flash_count_and_interval_come_from_config(self, light, output, fake_sleep, cfg):
        cfg = dict(cfg, strobe_flash_count=2, strobe_interval_ms=100)
        strobe_light.run(light, cfg)
        assert len(output.renders) == 4
        assert fake_sleep.calls == [0.2, 0.1, 0.2, 0.1]


class TestEmergencySignal:

    def test_sos_pattern_is_fixed(self):
        assert emergency_signal.SOS_PATTERN == (
            "SHORT", "SHORT", "SHORT", "LONG", "LONG", "LONG", "SHORT", "SHORT", "SHORT",
        )
        assert emergency_signal.SIGNAL_MS == {"SHORT": 300, "LONG": 800}

    def test_nine_symbols_with_timings(self, light, output, fake_sleep, cfg):
        emergency_signal.run(light, cfg)
        assert output.renders == [(EMERGENCY_FLASH, 100), (OFF, 0)] * 9
        flashes = fake_sleep.calls[0::2]
        pauses = fake_sleep.calls[1::2]
        assert flashes == [0.3] * 3 + [0.8] * 3 + [0.3] * 3
        assert pauses == [0.2] * 9

    def test_signal_lines_in_order(self, light, stream, cfg):
        emergency_signal.run(light, cfg)
        signals = [
            line.split("SOS SIGNAL: ")[1].split(" FLASH")[0]
            for line in stream.getvalue().split("\n")
            if "SOS SIGNAL: " in line
        ]
        assert signals == list(emergency_signal.SOS_PATTERN)


class TestBrightnessLevels:

    def test_ramp_visits_levels_in_order(self, light, output, fake_sleep, cfg):
        brightness_levels.run(light, cfg)
        assert output.renders == [
            (VARIABLE_BRIGHTNESS, 25),
            (VARIABLE_BRIGHTNESS, 50),
            (VARIABLE_BRIGHTNESS, 75),
            (VARIABLE_BRIGHTNESS, 100),
            (OFF, 0),
        ]
        assert fake_sleep.calls == [1.5] * 4

    def test_labels_match_levels(self, light, stream, cfg):
        brightness_levels.run(light, cfg)
        text = stream.getvalue()
        for label, level in (("LOW", 25), ("MEDIUM", 50), ("HIGH", 75), ("MAXIMUM", 100)):
            assert f"Brightness Level: {label} ({level}%)" in text
            assert f"OPERATIONAL MODE: BRIGHTNESS: {label}\nPower Level: {level}%" in text
        assert "OPERATIONAL MODE: BRIGHTNESS LEVEL CONTROL\nPower Level: 0%" in text

    def test_mismatched_table_is_rejected(self, light, cfg):
        cfg = dict(cfg, brightness_labels=["LOW"])
        with pytest.raises(ValueError, match="differ in length"):
            brightness_levels.run(light, cfg)
