#!/usr/bin/env python3
# cli.py
# CLI entry point bridging arguments to the control system.

"""CLI entry point bridging arguments to the control system."""

import sys

from .control.control_system import main as control_main


def main(argv=None) -> int:
    """Run the full flashlight sequence and return the exit status."""
    return control_main(argv)


if __name__ == "__main__":
    sys.exit(main())
