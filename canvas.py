# canvas.py
"""
Defines the ColorCanvas class: a numpy RGB raster with the small drawing
vocabulary the sphere needs (blend mode, fill, stroke, circle, line).
Primitives are rasterised by OpenCV into anti-aliased coverage masks and
composited with numpy. Coordinates are pixels with the origin in the
top-left corner; pixel (i, j) has its centre at (i + 0.5, j + 0.5).
"""
import logging

import numpy as np
import cv2  # type: ignore

import config as cfg

logger = logging.getLogger(__name__)

SHIFT = 4  # Fractional bits handed to cv2 for sub-pixel coordinates
COORD_LIMIT = 1 << 26  # Largest magnitude that still fits cv2's fixed-point ints


# --- Core Calculation Functions ---
def normalize_color(color):
    """Convert a 0-255 (r, g, b[, a]) tuple to float rgb in [0, 1] and alpha in [0, 1]."""
    if len(color) not in (3, 4):
        raise ValueError(f"color must have 3 or 4 channels, got {color!r}")
    rgba = np.array(list(color) + [255] * (4 - len(color)), dtype=float) / 255.0
    rgba = np.clip(rgba, 0.0, 1.0)
    return rgba[:3], rgba[3]

def fixed_point(value):
    return int(round(value * (1 << SHIFT)))

def check_coords(*values):
    for v in values:
        if not np.isfinite(v) or abs(v) > COORD_LIMIT:
            raise ValueError(f"coordinate out of drawable range: {v!r}")

def circle_coverage(shape, cx, cy, radius, thickness):
    """Coverage in [0, 1] of a circle drawn into an empty mask; thickness -1 fills it."""
    mask = np.zeros(shape, dtype=np.uint8)
    cv2.circle(mask, (fixed_point(cx), fixed_point(cy)), fixed_point(radius),
               255, thickness, cv2.LINE_AA, SHIFT)
    return mask / 255.0

def line_coverage(shape, x1, y1, x2, y2, thickness):
    mask = np.zeros(shape, dtype=np.uint8)
    cv2.line(mask, (fixed_point(x1), fixed_point(y1)), (fixed_point(x2), fixed_point(y2)),
             255, thickness, cv2.LINE_AA, SHIFT)
    return mask / 255.0


# --- Color Canvas Class ---
class ColorCanvas:
    def __init__(self, width, height, background_color=cfg.BACKGROUND_COLOR):
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width, self.height = int(width), int(height)
        self.background_color, _ = normalize_color(background_color)
        self.pixels = np.empty((self.height, self.width, 3), dtype=float)
        self.mode = cfg.BLEND_NORMAL
        self.fill_color = (np.ones(3), 1.0)
        self.stroke_color = (np.zeros(3), 1.0)
        self.weight = 1.0
        self.clear()
        logger.debug("Created %dx%d canvas", self.width, self.height)

    def clear(self):
        self.pixels[:] = self.background_color

    # --- Drawing State ---
    def blend_mode(self, mode):
        if mode not in (cfg.BLEND_NORMAL, cfg.BLEND_ADD):
            raise ValueError(f"unknown blend mode {mode!r}")
        self.mode = mode

    def fill(self, color): self.fill_color = normalize_color(color)
    def no_fill(self): self.fill_color = None
    def stroke(self, color): self.stroke_color = normalize_color(color)
    def no_stroke(self): self.stroke_color = None

    def stroke_weight(self, weight):
        if weight < 0:
            raise ValueError(f"stroke weight must be non-negative, got {weight}")
        self.weight = float(weight)

    def _thickness(self):
        return max(int(round(self.weight)), 1)

    # --- Primitives ---
    def circle(self, x, y, diameter):
        """Fill and/or outline a circle centred on (x, y)."""
        check_coords(x, y, diameter)
        radius = abs(diameter) / 2.0
        pad = radius + self._thickness() + 2
        region = self._region(x - pad, y - pad, x + pad, y + pad)
        if region is None: return
        ys, xs = region
        shape = (ys.stop - ys.start, xs.stop - xs.start)
        cx, cy = x - 0.5 - xs.start, y - 0.5 - ys.start
        if self.fill_color is not None:
            self._composite(region, circle_coverage(shape, cx, cy, radius, cv2.FILLED), self.fill_color)
        if self.stroke_color is not None:
            self._composite(region, circle_coverage(shape, cx, cy, radius, self._thickness()), self.stroke_color)

    def line(self, x1, y1, x2, y2):
        """Stroke the segment (x1, y1)-(x2, y2) with the current weight, at least one pixel wide."""
        if self.stroke_color is None: return
        check_coords(x1, y1, x2, y2)
        pad = self._thickness() + 2
        region = self._region(min(x1, x2) - pad, min(y1, y2) - pad, max(x1, x2) + pad, max(y1, y2) + pad)
        if region is None: return
        ys, xs = region
        shape = (ys.stop - ys.start, xs.stop - xs.start)
        ox, oy = xs.start + 0.5, ys.start + 0.5
        coverage = line_coverage(shape, x1 - ox, y1 - oy, x2 - ox, y2 - oy, self._thickness())
        self._composite(region, coverage, self.stroke_color)

    def to_image(self):
        return np.round(np.clip(self.pixels, 0.0, 1.0) * 255).astype(np.uint8)

    # --- Internals ---
    def _region(self, x0, y0, x1, y1):
        """Clip a bounding box to the canvas; returns (row slice, column slice) or None."""
        c0, c1 = max(int(np.floor(x0)), 0), min(int(np.ceil(x1)) + 1, self.width)
        r0, r1 = max(int(np.floor(y0)), 0), min(int(np.ceil(y1)) + 1, self.height)
        if c0 >= c1 or r0 >= r1: return None
        return slice(r0, r1), slice(c0, c1)

    def _composite(self, region, coverage, color):
        rgb, alpha = color
        a = coverage[..., None] * alpha
        if alpha <= 0 or not a.any(): return
        dst = self.pixels[region]
        if self.mode == cfg.BLEND_ADD:
            dst[:] = np.minimum(dst + rgb * a, 1.0)
        else:
            dst[:] = rgb * a + dst * (1 - a)
