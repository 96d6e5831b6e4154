"""Application configuration constants."""

from __future__ import annotations

# Window
WINDOW_W = 400
WINDOW_H = 400
WINDOW_TITLE = "Bezier curves"

# Largest accepted canvas side, in pixels
MAX_CANVAS_DIMENSION = 8192

# Performance
# The window only idles after the first draw, poll input roughly every 5 ms.
POLL_INTERVAL_MS = 5
TARGET_FPS = 1000 // POLL_INTERVAL_MS

# Number of straight line segments each curve is approximated with.
# Low values give a jagged curve, high values a smooth one at more cost.
STEPS = 20

# Colors (r, g, b)
BG_COLOR = (0, 0, 0)
QUAD_COLOR = (0, 255, 0)
CUBIC_COLOR = (255, 0, 0)

# Palette used for curves that do not name a color, in order.
CURVE_PALETTE = [
    QUAD_COLOR,
    CUBIC_COLOR,
    (0, 128, 255),
    (255, 255, 0),
    (255, 0, 255),
    (0, 255, 255),
]

# Control points, normalized to the window.
# 0,0 is the upper-left of the window and 1,1 is the lower-right.
QUAD_POINTS = [
    (0.2, 0.2),
    (0.5, 0.9),
    (0.9, 0.1),
]

CUBIC_POINTS = [
    (0.1, 0.9),
    (0.3, 0.2),
    (0.5, 1.6),
    (0.8, 0.4),
]

# Supported control point counts: 3 = quadratic, 4 = cubic
CURVE_POINT_COUNTS = frozenset({3, 4})

# Hotkeys (raylib key codes)
# See: https://github.com/raysan5/raylib/blob/master/src/raylib.h
KEY_CLOSE = 256             # KEY_ESCAPE

# Exit codes
EXIT_OK = 0
EXIT_BAD_CONFIG = 1
EXIT_WINDOW_FAILED = 2
EXIT_EXPORT_FAILED = 3
