#!/usr/bin/env python3
# __init__.py
# Control layer exposing the phase sequencer and its phases.

"""Control layer exposing the phase sequencer and its phases."""

from .control_system import main

__all__ = ["main"]
