"""Two-tone color quantization of background images."""
import logging

import cv2
import numpy as np

from .types import Color, ImageArray, ImageReadError

logger = logging.getLogger(__name__)

SIMILARITY_THRESHOLD = 50

# pixel labels
TRANSPARENT = 0
PRIMARY = 1
SECONDARY = 2


def read_rgba(path) -> ImageArray:
    """Read an image as uint8 RGBA, robust to gray, BGR, BGRA and 16-bit inputs.
    - Loads with IMREAD_UNCHANGED to keep the alpha channel and bit depth.
    - 16-bit images are scaled down to 0..255.
    - Raises ImageReadError when the file is missing or cannot be decoded.
    """
    try:
        img = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
    except cv2.error as e:
        raise ImageReadError(path, str(e)) from e
    if img is None or img.size == 0:
        raise ImageReadError(path)
    # Normalize to uint8
    if img.dtype == np.uint16:
        img = (img // 257).astype(np.uint8)
    elif img.dtype != np.uint8:
        img = cv2.normalize(img, None, alpha=0, beta=255, norm_type=cv2.NORM_MINMAX).astype(np.uint8)
    if img.ndim == 2:
        return cv2.cvtColor(img, cv2.COLOR_GRAY2RGBA)
    channels = img.shape[2]
    if channels == 1:
        return cv2.cvtColor(img[..., 0], cv2.COLOR_GRAY2RGBA)
    if channels == 3:
        return cv2.cvtColor(img, cv2.COLOR_BGR2RGBA)
    if channels == 4:
        return cv2.cvtColor(img, cv2.COLOR_BGRA2RGBA)
    raise ImageReadError(path, f'unsupported channel count {channels}')


def channel_sum_difference(rgb: ImageArray, color: Color) -> ImageArray:
    """Sum of absolute R, G, B differences between every pixel and `color`.

    Accepts (H, W, 3) or (H, W, 4) arrays; alpha is ignored.
    """
    px = np.asarray(rgb)[..., :3].astype(np.int16)
    ref = np.asarray(color[:3], dtype=np.int16)
    return np.abs(px - ref).sum(axis=-1)


def classify_pixels(rgba: ImageArray, primary: Color, secondary: Color,
                    threshold: int = SIMILARITY_THRESHOLD) -> ImageArray:
    """Label each pixel PRIMARY, SECONDARY or TRANSPARENT.

    Primary takes precedence; a pixel is similar only when its channel-sum
    difference is strictly below `threshold`.
    """
    is_primary = channel_sum_difference(rgba, primary) < threshold
    is_secondary = ~is_primary & (channel_sum_difference(rgba, secondary) < threshold)
    labels = np.full(is_primary.shape, TRANSPARENT, dtype=np.uint8)
    labels[is_secondary] = SECONDARY
    labels[is_primary] = PRIMARY
    return labels


def quantize_two_tone(rgba: ImageArray, primary: Color, secondary: Color,
                      threshold: int = SIMILARITY_THRESHOLD) -> ImageArray:
    """Return an RGBA uint8 image holding only opaque primary, opaque secondary
    or fully transparent pixels, same size as `rgba`."""
    labels = classify_pixels(rgba, primary, secondary, threshold)
    out = np.zeros(labels.shape + (4,), dtype=np.uint8)
    out[labels == PRIMARY] = (*primary[:3], 255)
    out[labels == SECONDARY] = (*secondary[:3], 255)
    return out


def load_quantized(path, primary: Color, secondary: Color) -> ImageArray:
    rgba = read_rgba(path)
    h, w = rgba.shape[:2]
    logger.debug(f'Decoded {path}: {w}x{h}')
    return quantize_two_tone(rgba, primary, secondary)
