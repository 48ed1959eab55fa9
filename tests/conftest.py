"""Shared fixtures: a surface that records draw calls and a scripted angle source."""
import matplotlib
matplotlib.use("Agg")

import pytest


class RecordingSurface:
    """Stand-in drawing surface that logs every call as (name, args)."""

    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        def record(*args):
            self.calls.append((name, args))
        return record

    def named(self, name):
        return [args for call, args in self.calls if call == name]


class ScriptedAngles:
    """Mimics numpy Generator.uniform by replaying fixed angles in order."""

    def __init__(self, angles):
        self.angles = list(angles)

    def uniform(self, low, high):
        return self.angles.pop(0)


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def scripted():
    return ScriptedAngles
