# config.py
"""
Contains all global constants and parameters for the cosmic sphere render.
"""

# --- Light Falloff ---
# Chord midpoints closer than LIGHT_NEAR to the light are dark, beyond LIGHT_FAR fully lit.
LIGHT_NEAR = 600.0
LIGHT_FAR = 1200.0

# --- Chord Appearance ---
LENGTH_ALPHA_SHORT = 1.0  # Alpha factor of a zero-length chord
LENGTH_ALPHA_LONG = 0.3   # Alpha factor of a diametric chord
STROKE_WEIGHT = 1.0
OCCLUDER_COLOR = (0, 0, 0, 255)

# --- Blend Modes ---
BLEND_NORMAL = "source-over"
BLEND_ADD = "lighter"

# --- Scene Defaults ---
CANVAS_WIDTH = 800
CANVAS_HEIGHT = 800
BACKGROUND_COLOR = (0, 0, 0)

SPHERE_RADIUS = 300.0
SPHERE_CENTER = (200.0, 200.0)  # Chords are sampled around twice this point
SPHERE_COLOR = (255, 120, 255, 60)
CHORD_COUNT = 4000

LIGHT_POSITION = (1400.0, -400.0)

# --- Logging ---
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
