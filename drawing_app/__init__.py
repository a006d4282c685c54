"""drawing_app package: two-tone background quantization and shape drawing."""

from .compositor import CanvasCompositor
from .quantize import SIMILARITY_THRESHOLD, classify_pixels, quantize_two_tone, read_rgba
from .shapes import CIRCLE, LINE, RECTANGLE, SHAPE_KINDS, Shape, create_shape, draw_shape, update_size
from .surfaces import ArraySurface, TkCanvasSurface, to_hex
from .types import ImageError, ImageReadError, PointerEvent

__all__ = [
    'CanvasCompositor',
    'SIMILARITY_THRESHOLD', 'classify_pixels', 'quantize_two_tone', 'read_rgba',
    'CIRCLE', 'LINE', 'RECTANGLE', 'SHAPE_KINDS', 'Shape', 'create_shape', 'draw_shape', 'update_size',
    'ArraySurface', 'TkCanvasSurface', 'to_hex',
    'ImageError', 'ImageReadError', 'PointerEvent',
]
