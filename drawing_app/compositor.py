"""Canvas compositor: the drawing session, independent of any widget.

Holds the ordered shape list, the optional two-tone background image, the
primary/secondary colors and the selected shape kind. Pointer events create
and resize shapes; ``render`` paints the image first, then every shape in
insertion order.
"""
import logging
from typing import List, Optional

from .quantize import load_quantized
from .settings import DEFAULT_KIND, DEFAULT_PRIMARY, DEFAULT_SECONDARY
from .shapes import Shape, create_shape, draw_shape, update_size
from .types import DRAG, PRESS, RELEASE, ImageError

logger = logging.getLogger(__name__)


class CanvasCompositor:
    def __init__(self, primary_color=DEFAULT_PRIMARY, secondary_color=DEFAULT_SECONDARY,
                 selected_kind=DEFAULT_KIND):
        self.shapes: List[Shape] = []
        self.active: Optional[Shape] = None
        self.image = None
        self.primary_color = tuple(primary_color)
        self.secondary_color = tuple(secondary_color)
        self.selected_kind = selected_kind

    @property
    def is_active(self):
        return self.active is not None

    # ---- settings ----
    def set_selected_kind(self, kind):
        self.selected_kind = kind

    def set_primary_color(self, color):
        # the loaded image keeps its quantization until the next load_image
        self.primary_color = tuple(color)

    def set_secondary_color(self, color):
        self.secondary_color = tuple(color)

    # ---- shape lifecycle ----
    def begin_shape(self, x, y):
        """Start a shape of the selected kind at (x, y); returns it, or None
        when the selected kind is not drawable."""
        shape = create_shape(self.selected_kind, x, y, self.primary_color)
        if shape is None:
            logger.debug(f'No shape for kind {self.selected_kind!r}')
            self.active = None
            return None
        self.shapes.append(shape)
        self.active = shape
        logger.debug(f'Began {shape.kind} at ({shape.x}, {shape.y})')
        return shape

    def drag_to(self, x, y):
        if self.active is None:
            return False
        update_size(self.active, x, y)
        return True

    def end_shape(self):
        if self.active is not None:
            logger.debug(f'Finished {self.active.kind} bounds={self.active.bounds()}')
        self.active = None

    def handle_pointer(self, event):
        """Dispatch a PointerEvent; returns True when a redraw is needed."""
        if event.kind == PRESS:
            return self.begin_shape(event.x, event.y) is not None
        if event.kind == DRAG:
            return self.drag_to(event.x, event.y)
        if event.kind == RELEASE:
            self.end_shape()
            return False
        return False

    # ---- background image ----
    def load_image(self, path):
        """Decode `path` and install its two-tone quantization as background.

        On failure the previous image and the shapes are left as they were and
        the ImageError propagates to the caller.
        """
        try:
            quantized = load_quantized(path, self.primary_color, self.secondary_color)
        except ImageError as e:
            logger.error(f'Image load failed: {e}')
            raise
        # single assignment: render sees either the old or the new image
        self.image = quantized
        h, w = quantized.shape[:2]
        logger.info(f'Loaded {path} ({w}x{h}) primary={self.primary_color} secondary={self.secondary_color}')
        return quantized

    # ---- painting ----
    def render(self, surface):
        surface.clear()
        image = self.image
        if image is not None:
            surface.draw_image(image, 0, 0)
        for shape in self.shapes:
            draw_shape(shape, surface)
