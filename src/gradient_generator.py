import numpy as np
from math import floor

from gradient_config import BLUE_RATIO, MAX_CHANNEL, RASTER_SCALE

def channel_from_ratio(ratio, scale=RASTER_SCALE):
    """
    Converts a ratio in [0, 1] to an 8-bit channel value.
    Args:
        ratio (float): Fractional position along an axis.
        scale (float): Multiplier applied before truncation (255.99 or 255.999).
    Returns:
        int: floor(ratio * scale), truncated into [0, 255].
    """
    value = floor(scale * ratio)
    return max(0, min(MAX_CHANNEL, value))

def pixel_color(x, y, dims, scale=RASTER_SCALE):
    """
    Computes the color of one pixel of the gradient.
    Red follows x, green follows y, blue is fixed.
    Args:
        x (int): Column, 0 <= x < dims.width.
        y (int): Row, 0 <= y < dims.height.
        dims (ImageDimensions): Size of the image.
        scale (float): Channel scale constant.
    Returns:
        tuple: (r, g, b) integers in [0, 255].
    """
    if not (0 <= x < dims.width and 0 <= y < dims.height):
        raise ValueError(f"Coordinate ({x}, {y}) outside {dims.width}x{dims.height} image.")

    r = x / (dims.width - 1)
    g = y / (dims.height - 1)
    b = BLUE_RATIO

    return (channel_from_ratio(r, scale),
            channel_from_ratio(g, scale),
            channel_from_ratio(b, scale))

def gradient_array(dims, scale=RASTER_SCALE, flip_vertical=False):
    """
    Vectorized version of pixel_color over the whole image.
    Returns an (H, W, 3) uint8 array equal to calling pixel_color on every
    coordinate, indexed [y, x]. With flip_vertical=True the rows come out in
    descending y, which is the order the text writer emits them.
    """
    # Same IEEE operations as pixel_color: x / (W-1) first, then * scale
    r = np.arange(dims.width, dtype=np.float64) / (dims.width - 1)
    g = np.arange(dims.height, dtype=np.float64) / (dims.height - 1)

    r_channel = np.clip(np.floor(scale * r), 0, MAX_CHANNEL).astype(np.uint8)
    g_channel = np.clip(np.floor(scale * g), 0, MAX_CHANNEL).astype(np.uint8)
    b_value = channel_from_ratio(BLUE_RATIO, scale)

    image = np.empty(dims.shape, dtype=np.uint8)
    image[:, :, 0] = r_channel.reshape(1, dims.width)
    image[:, :, 1] = g_channel.reshape(dims.height, 1)
    image[:, :, 2] = b_value

    if flip_vertical:
        image = image[::-1]
    return image
