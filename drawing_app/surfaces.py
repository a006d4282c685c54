"""Rendering surfaces the compositor paints onto.

Every surface offers ``clear``, ``draw_oval``, ``draw_rectangle``,
``draw_line`` and ``draw_image``. Bounding boxes are (x0, y0, x1, y1) in
canvas pixels, origin top-left.
"""
import cv2
import numpy as np

from .types import ImageArray


def to_hex(color):
    """(r, g, b) -> '#rrggbb' for Tk options."""
    r, g, b = (int(c) for c in color[:3])
    return f'#{r:02x}{g:02x}{b:02x}'


class TkCanvasSurface:
    """Draws onto a tkinter Canvas with outline-only items.

    photo_factory turns an RGBA array into something `create_image` accepts;
    defaults to ui_helpers.to_photoimage_from_rgba.
    """

    def __init__(self, canvas, photo_factory=None, line_width=1):
        self.canvas = canvas
        if photo_factory is None:
            from .ui_helpers import to_photoimage_from_rgba as photo_factory
        self.photo_factory = photo_factory
        self.line_width = line_width
        # Tk drops images that have no Python reference
        self._photo = None
        self._photo_source = None

    def clear(self):
        self.canvas.delete('all')

    def draw_oval(self, x0, y0, x1, y1, color):
        self.canvas.create_oval(x0, y0, x1, y1, outline=to_hex(color), width=self.line_width)

    def draw_rectangle(self, x0, y0, x1, y1, color):
        self.canvas.create_rectangle(x0, y0, x1, y1, outline=to_hex(color), width=self.line_width)

    def draw_line(self, x0, y0, x1, y1, color):
        self.canvas.create_line(x0, y0, x1, y1, fill=to_hex(color), width=self.line_width)

    def draw_image(self, rgba: ImageArray, x, y):
        # background arrays are replaced, never edited, so identity is enough
        if rgba is not self._photo_source:
            self._photo = self.photo_factory(rgba)
            self._photo_source = rgba
        self.canvas.create_image(x, y, image=self._photo, anchor='nw')


class ArraySurface:
    """Off-screen RGB frame drawn with OpenCV primitives (no anti-aliasing)."""

    def __init__(self, width, height, background=(255, 255, 255)):
        self.width = int(width)
        self.height = int(height)
        self.background = tuple(int(c) for c in background[:3])
        self.frame = np.empty((self.height, self.width, 3), dtype=np.uint8)
        self.clear()

    @staticmethod
    def _cv_color(color):
        # frame is RGB; OpenCV writes the values in the given order
        return tuple(int(c) for c in color[:3])

    def clear(self):
        self.frame[:] = self.background

    def draw_oval(self, x0, y0, x1, y1, color):
        center = ((x0 + x1) // 2, (y0 + y1) // 2)
        axes = (abs(x1 - x0) // 2, abs(y1 - y0) // 2)
        cv2.ellipse(self.frame, center, axes, 0, 0, 360, self._cv_color(color), 1, cv2.LINE_8)

    def draw_rectangle(self, x0, y0, x1, y1, color):
        cv2.rectangle(self.frame, (x0, y0), (x1, y1), self._cv_color(color), 1, cv2.LINE_8)

    def draw_line(self, x0, y0, x1, y1, color):
        cv2.line(self.frame, (x0, y0), (x1, y1), self._cv_color(color), 1, cv2.LINE_8)

    def draw_image(self, rgba: ImageArray, x, y):
        """Alpha-composite an RGBA array with its top-left at (x, y), clipped."""
        h, w = rgba.shape[:2]
        fx0, fy0 = max(0, x), max(0, y)
        fx1, fy1 = min(self.width, x + w), min(self.height, y + h)
        if fx1 <= fx0 or fy1 <= fy0:
            return
        src = rgba[fy0 - y:fy1 - y, fx0 - x:fx1 - x]
        dst = self.frame[fy0:fy1, fx0:fx1]
        if src.shape[2] == 4:
            alpha = src[..., 3:4].astype(np.float32) / 255.0
        else:
            alpha = np.ones(src.shape[:2] + (1,), np.float32)
        blended = alpha * src[..., :3].astype(np.float32) + (1.0 - alpha) * dst.astype(np.float32)
        dst[:] = np.clip(np.round(blended), 0, 255).astype(np.uint8)
