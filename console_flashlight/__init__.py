#!/usr/bin/env python3
# __init__.py
# Package marker for the console flashlight.

"""
Console flashlight package.

Simulates a flashlight on the terminal: steady light, strobe, an SOS signal
and a brightness ramp, played once from start to finish.
"""

__version__ = "1.0.0"
