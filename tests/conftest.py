"""Pytest configuration and fixtures."""

import numpy as np
import pytest
from PIL import Image

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)


class RecordingSurface:
    """Surface fake that records every drawing call in order."""

    def __init__(self):
        self.calls = []

    def clear(self):
        self.calls.append(('clear',))

    def draw_oval(self, x0, y0, x1, y1, color):
        self.calls.append(('oval', x0, y0, x1, y1, tuple(color)))

    def draw_rectangle(self, x0, y0, x1, y1, color):
        self.calls.append(('rectangle', x0, y0, x1, y1, tuple(color)))

    def draw_line(self, x0, y0, x1, y1, color):
        self.calls.append(('line', x0, y0, x1, y1, tuple(color)))

    def draw_image(self, rgba, x, y):
        self.calls.append(('image', rgba, x, y))

    def kinds(self):
        return [c[0] for c in self.calls]


@pytest.fixture
def surface():
    """Fresh recording surface."""
    return RecordingSurface()


@pytest.fixture
def write_png(tmp_path):
    """Return a function writing an RGB/RGBA uint8 array to a PNG file."""
    def _write(pixels, name='image.png'):
        arr = np.asarray(pixels, dtype=np.uint8)
        path = tmp_path / name
        Image.fromarray(arr).save(path)
        return path
    return _write


@pytest.fixture
def four_pixel_png(write_png):
    """2x2 image: [white, black] / [red(200,0,0), white]."""
    pixels = np.array([
        [WHITE, BLACK],
        [(200, 0, 0), WHITE],
    ], dtype=np.uint8)
    return write_png(pixels, 'four.png')
