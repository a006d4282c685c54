"""Common types and exceptions for drawing_app."""

from collections import namedtuple
from typing import Tuple

import numpy as np

# Type aliases
ImageArray = np.ndarray
Color = Tuple[int, int, int]

# Pointer event kinds
PRESS = 'press'
DRAG = 'drag'
RELEASE = 'release'

PointerEvent = namedtuple('PointerEvent', ['kind', 'x', 'y'])


class ImageError(Exception):
    """Base exception for background image errors."""

    pass


class ImageReadError(ImageError):
    """Raised when an image file is missing, unreadable or cannot be decoded."""

    def __init__(self, path, reason=None):
        self.path = path
        self.reason = reason
        msg = f'Failed to load image: {path}'
        if reason:
            msg = f'{msg} ({reason})'
        super().__init__(msg)
