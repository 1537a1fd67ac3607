#!/usr/bin/env python3
"""
layoutmanager - Main entry point.

Launches the layout preview window.
"""

import sys

from layoutmanager.main import main


if __name__ == "__main__":
    sys.exit(main())
