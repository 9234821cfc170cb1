#!/usr/bin/env python3
"""
JSONLogic Lab - Main entry point for running the benchmark.

Usage:
    python main.py [command] [options]

See ``jsonlogic_lab.cli`` for commands and options.
"""

import sys

from jsonlogic_lab.cli import main

if __name__ == "__main__":
    sys.exit(main())
