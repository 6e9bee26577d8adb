#!/usr/bin/env python3
# phase_common.py
# Shared helpers for flashlight phases.

"""Shared helpers for flashlight phases."""

FULL_POWER = 100


def require(cfg: dict, key: str):
    try:
        return cfg[key]
    except KeyError as exc:
        raise KeyError(f"Missing flashlight configuration key: {exc}") from exc
