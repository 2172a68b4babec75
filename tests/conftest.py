import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest
from PIL import Image

from stamp_painter.render import Renderer
from stamp_painter.fitness import FitnessEvaluator


def solid(h, w, rgba):
    out = np.empty((h, w, 4), np.uint8)
    out[...] = rgba
    return out


def gradient_target(h=16, w=16):
    yy, xx = np.mgrid[0:h, 0:w]
    out = np.empty((h, w, 4), np.uint8)
    out[..., 0] = (xx * 255) // max(1, w - 1)
    out[..., 1] = (yy * 255) // max(1, h - 1)
    out[..., 2] = 128
    out[..., 3] = 255
    return out


class StubRng:
    """Fixed draws: offsets at `frac` of their range, fixed rotation and color deltas."""

    def __init__(self, frac=0.5, rotation=90.0, color=(0, 0, 0, 0), index=0):
        self.frac = frac
        self.rotation = rotation
        self.color = color
        self.index = index

    def uniform(self, low, high, size=None):
        if size is None:
            return self.rotation
        return np.full(size, low + (high - low) * self.frac)

    def integers(self, low, high=None, size=None, endpoint=False):
        if size is None:
            return self.index
        return np.array(self.color, np.int64)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def white_template():
    return solid(4, 4, (255, 255, 255, 255))


@pytest.fixture
def evaluator(white_template):
    return FitnessEvaluator(gradient_target(), Renderer(white_template))


@pytest.fixture
def asset_dir(tmp_path):
    Image.fromarray(gradient_target(32, 32)).save(tmp_path / "target.png")
    Image.fromarray(solid(8, 8, (255, 255, 255, 255))).save(tmp_path / "sprite.png")
    return tmp_path
