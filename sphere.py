# sphere.py
"""
Defines the CosmicSphere class: an occluding black disc overdrawn with random
chords that are blended additively and dimmed by chord length and by the
distance of each chord's midpoint from the light source.
"""
import logging
import math

import numpy as np

import config as cfg

logger = logging.getLogger(__name__)


class InvalidSphereConfig(ValueError):
    """Raised when a CosmicSphere is constructed with unusable parameters."""


# --- Core Calculation Functions ---
def map_range(value, start1, stop1, start2, stop2, clamp=False):
    """Linearly re-map value from [start1, stop1] onto [start2, stop2]."""
    if stop1 == start1:
        return start2
    mapped = start2 + (value - start1) * (stop2 - start2) / (stop1 - start1)
    if clamp:
        lo, hi = min(start2, stop2), max(start2, stop2)
        mapped = min(max(mapped, lo), hi)
    return mapped

def random_point_on_circle_edge(rng, radius, cx, cy):
    angle = rng.uniform(0.0, 2 * np.pi)
    return np.array([cx + radius * np.cos(angle), cy + radius * np.sin(angle)])

def length_alpha(length, radius):
    return map_range(length, 0.0, radius * 2, cfg.LENGTH_ALPHA_SHORT, cfg.LENGTH_ALPHA_LONG, clamp=True)

def light_alpha(distance):
    return map_range(distance, cfg.LIGHT_NEAR, cfg.LIGHT_FAR, 0.0, 1.0, clamp=True)

def as_light(light):
    light = np.asarray(light, dtype=float)
    if light.shape != (2,) or not np.isfinite(light).all():
        raise ValueError(f"light must be a finite (x, y) point, got {light!r}")
    return light

def chord_color(base_color, combined_alpha):
    """Green falls and alpha rises with combined_alpha; red and blue stay put."""
    c0, c1, c2, alpha = base_color
    return (c0, c1 - combined_alpha * c1, c2, alpha * combined_alpha)


# --- Cosmic Sphere Class ---
class CosmicSphere:
    __slots__ = ('radius', 'center', 'color', 'chord_count', 'rng')

    def __init__(self, radius, center, color, chord_count, rng=None):
        radius = float(radius)
        if not math.isfinite(radius) or radius <= 0:
            raise InvalidSphereConfig(f"radius must be a finite positive number, got {radius!r}")
        if isinstance(chord_count, bool) or not isinstance(chord_count, (int, np.integer)) or chord_count < 0:
            raise InvalidSphereConfig(f"chord_count must be a non-negative integer, got {chord_count!r}")
        if len(center) != 2 or not all(math.isfinite(float(c)) for c in center):
            raise InvalidSphereConfig(f"center must be a finite (x, y) pair, got {center!r}")
        if len(color) != 4 or any(not 0 <= c <= 255 for c in color):
            raise InvalidSphereConfig(f"color must be four channels in 0-255, got {color!r}")

        object.__setattr__(self, 'radius', radius)
        object.__setattr__(self, 'center', (float(center[0]), float(center[1])))
        object.__setattr__(self, 'color', tuple(color))
        object.__setattr__(self, 'chord_count', int(chord_count))
        object.__setattr__(self, 'rng', rng)

    def __setattr__(self, name, value):
        raise AttributeError(f"CosmicSphere is immutable; cannot set {name!r}")

    def __repr__(self):
        return (f"CosmicSphere(radius={self.radius}, center={self.center}, "
                f"color={self.color}, chord_count={self.chord_count})")

    def chords(self, light, rng=None):
        """
        Iterator of (p1, p2, color) for every chord of one frame; light is checked up front.
        Edge points are sampled around twice the stored center, matching the original look.
        """
        if rng is None:
            rng = self.rng if self.rng is not None else np.random.default_rng()
        return self._sample_chords(as_light(light), rng)

    def _sample_chords(self, light, rng):
        cx, cy = self.center[0] * 2, self.center[1] * 2

        for _ in range(self.chord_count):
            p1 = random_point_on_circle_edge(rng, self.radius, cx, cy)
            p2 = random_point_on_circle_edge(rng, self.radius, cx, cy)
            a_len = length_alpha(np.linalg.norm(p1 - p2), self.radius)
            mid_point = (p1 + p2) / 2.0
            a_light = light_alpha(np.linalg.norm(mid_point - light))
            yield p1, p2, chord_color(self.color, a_light * a_len)

    def render(self, surface, light, rng=None):
        """Draw the occluding disc and then the additive chords onto surface."""
        light = as_light(light)
        logger.debug("Rendering %r with light at (%.1f, %.1f)", self, light[0], light[1])

        surface.blend_mode(cfg.BLEND_NORMAL)
        surface.fill(cfg.OCCLUDER_COLOR)
        surface.circle(self.center[0], self.center[1], self.radius * 2)

        surface.blend_mode(cfg.BLEND_ADD)
        surface.no_fill()
        for p1, p2, color in self.chords(light, rng):
            surface.stroke(color)
            surface.stroke_weight(cfg.STROKE_WEIGHT)
            surface.line(p1[0], p1[1], p2[0], p2[1])
