#!/usr/bin/env python3
"""
commitgraph - commit history graph layout

This is a convenience wrapper for running from the repo root.
The actual entry point is commitgraph.main:main (for pip install).
"""

import sys

from commitgraph.main import main

if __name__ == "__main__":
    sys.exit(main())
