#!/usr/bin/env python3
"""vbookreader - A terminal text reader.

Usage:
    python main.py [filename]

Controls:
    Space: Mark the top visible line, or clear the mark
    Up/Down: Move the mark one line
    Ctrl-O: Open a file
    Ctrl-Q or q: Quit
    F1: Help
"""

import sys
from vbookreader.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
