#!/usr/bin/env python3
"""
Enable running semantic_canvas as a module: python -m semantic_canvas

Usage:
    python -m semantic_canvas --help
    python -m semantic_canvas push ~/vault Board.canvas
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
