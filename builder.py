#!/usr/bin/env python3
"""Shipyard - Main entry point.

Checks point costs and legality of starship squadrons written in the
printable one-line-per-ship format.
"""

import sys

from shipyard.interface.cli import main

if __name__ == "__main__":
    sys.exit(main())
