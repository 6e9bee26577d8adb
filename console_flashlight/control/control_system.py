#!/usr/bin/env python3
# control_system.py
# Main CLI orchestrator running the flashlight phases in order.


import argparse, json, os, sys
from importlib import import_module

from ..high_level.flashlight_system import FlashlightSystem

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
DEFAULT_CONFIG_PATH = os.path.normpath(os.path.join(BASE_DIR, "..", "utils", "flashlight_config.json"))

INTERRUPTED_EXIT = 130

# Fixed playback order; no phase is skipped or repeated.
PHASES = [
    {"module": "continuous_illumination", "title": "Phase 1: Continuous Illumination Mode"},
    {"module": "strobe_light",            "title": "Phase 2: Strobe Light Pattern"},
    {"module": "emergency_signal",        "title": "Phase 3: Emergency Signal Pattern"},
    {"module": "brightness_levels",       "title": "Phase 4: Brightness Level Demonstration"},
]

# ---------- Utils ----------
def die(msg: str, code: int = 1):
    print(f"[FATAL] {msg}")
    sys.exit(code)

def load_config(path: str = DEFAULT_CONFIG_PATH) -> dict:
    if not path or not os.path.exists(path):
        die(f"Configuration file not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            cfg = json.load(f)
    except (OSError, ValueError) as e:
        die(f"Configuration file could not be read: {e}")
    if not isinstance(cfg, dict):
        die("Configuration file does not contain a JSON object.")
    return cfg


def _run_phase(name: str, light: FlashlightSystem, cfg: dict):
    try:
        module = import_module(f"{__package__}.modes.{name}")
    except ModuleNotFoundError as exc:
        die(f"Phase module '{name}' not found: {exc}")
    runner = getattr(module, "run", None)
    if runner is None:
        die(f"Phase module '{name}' does not define a run() function.")
    try:
        return runner(light, cfg)
    except (KeyError, ValueError) as exc:
        die(str(exc))


def run_sequence(light: FlashlightSystem, cfg: dict):
    """Play all phases once, in order."""
    light.say("INITIATING FLASHLIGHT OPERATION SEQUENCE...")
    light.say()
    for index, phase in enumerate(PHASES):
        if index:
            light.say()
        light.say(phase["title"])
        _run_phase(phase["module"], light, cfg)


def main(argv=None, light: FlashlightSystem = None) -> int:
    ap = argparse.ArgumentParser(
        description="Console flashlight demo: steady light, strobe, SOS signal and brightness ramp."
    )
    ap.parse_args(argv)

    cfg = load_config(DEFAULT_CONFIG_PATH)
    light = light if light is not None else FlashlightSystem()

    try:
        light.header()
        light.initialize(cfg.get("init_delay_ms", 1000))
        run_sequence(light, cfg)
    except KeyboardInterrupt:
        light.shutdown()
        light.say()
        light.say("[WARN] Flashlight sequence interrupted.")
        return INTERRUPTED_EXIT
    finally:
        light.shutdown()

    light.terminate()
    return 0

if __name__ == "__main__":
    sys.exit(main())
