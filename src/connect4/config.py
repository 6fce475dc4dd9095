# src/connect4/config.py

from __future__ import annotations

import os

ROWS = 6
COLS = 7
CONNECT_N = 4

# Display glyph per side (index = side)
CHECKERS = ("X", "O")

# Static evaluation weight by number of checkers in an open window
WEIGHTS = (0, 10, 100, 1000, 100000000)

# Finite sentinel for a won (+) or lost/drawn (-) line of play
MAX_SCORE = 2**31 - 1

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# “AI thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = 1  # short pause so AI moves aren’t instant

# AI defaults
DEFAULT_SEARCH_DEPTH = 5

LOG_LEVEL = os.environ.get("CONNECT4_LOG_LEVEL", "WARNING").upper()
