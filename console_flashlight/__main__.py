#!/usr/bin/env python3
# __main__.py
# Allow `python -m console_flashlight` to launch the CLI entrypoint.

"""Allow `python -m console_flashlight` to launch the CLI entrypoint."""

import sys

from .cli import main


if __name__ == "__main__":
    sys.exit(main())
