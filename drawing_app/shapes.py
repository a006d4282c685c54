"""Vector shapes drawn by the user.

A shape is one record tagged with its kind; geometry updates and drawing
dispatch on that tag. The set of kinds is fixed: Circle, Rectangle, Line.
"""
import math
from dataclasses import dataclass

from .types import Color

CIRCLE = 'Circle'
RECTANGLE = 'Rectangle'
LINE = 'Line'
SHAPE_KINDS = (CIRCLE, RECTANGLE, LINE)


@dataclass
class Shape:
    kind: str
    x: int
    y: int
    color: Color
    radius: int = 0
    width: int = 0
    height: int = 0
    x2: int = 0
    y2: int = 0

    @property
    def anchor(self):
        return self.x, self.y

    def bounds(self):
        """Normalized (x0, y0, x1, y1) bounding box."""
        if self.kind == CIRCLE:
            r = self.radius
            return self.x - r, self.y - r, self.x + r, self.y + r
        if self.kind == RECTANGLE:
            x1, y1 = self.x + self.width, self.y + self.height
        else:
            x1, y1 = self.x2, self.y2
        return min(self.x, x1), min(self.y, y1), max(self.x, x1), max(self.y, y1)


def create_shape(kind, x, y, color):
    """Create a zero-size shape anchored at (x, y); None for an unknown kind."""
    if kind not in SHAPE_KINDS:
        return None
    shape = Shape(kind=kind, x=int(x), y=int(y), color=tuple(color))
    if kind == LINE:
        shape.x2, shape.y2 = shape.x, shape.y
    return shape


def update_size(shape, x, y):
    """Resize `shape` so it reaches the pointer at (x, y). The anchor never moves."""
    if shape.kind == CIRCLE:
        # truncated toward zero, like an int cast
        shape.radius = int(math.hypot(x - shape.x, y - shape.y))
    elif shape.kind == RECTANGLE:
        shape.width = int(x) - shape.x
        shape.height = int(y) - shape.y
    elif shape.kind == LINE:
        shape.x2 = int(x)
        shape.y2 = int(y)


def draw_shape(shape, surface):
    """Stroke `shape` onto `surface` with its own color."""
    if shape.kind == CIRCLE:
        r = shape.radius
        surface.draw_oval(shape.x - r, shape.y - r, shape.x + r, shape.y + r, shape.color)
    elif shape.kind == RECTANGLE:
        # negative extents are flipped so the surface always gets top-left first
        x0, y0, x1, y1 = shape.bounds()
        surface.draw_rectangle(x0, y0, x1, y1, shape.color)
    elif shape.kind == LINE:
        surface.draw_line(shape.x, shape.y, shape.x2, shape.y2, shape.color)
