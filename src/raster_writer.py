import sys

import numpy as np
from PIL import Image

from gradient_config import OUTPUT_PATH, RASTER_SCALE
from gradient_generator import pixel_color


class RasterWriteError(Exception):
    """The encoded image could not be written to storage."""


class RasterEncoder:
    """Persists a populated (H, W, 3) uint8 buffer to a path."""

    def persist(self, buffer, path):
        raise NotImplementedError


class PillowEncoder(RasterEncoder):
    """Encodes with Pillow; the format is picked from the file extension (PNG for image.png)."""

    def persist(self, buffer, path):
        try:
            Image.fromarray(buffer).save(path)
        except (OSError, ValueError) as exc:
            raise RasterWriteError(str(exc)) from exc


def allocate_buffer(dims):
    return np.zeros(dims.shape, dtype=np.uint8)

def populate_buffer(buffer, dims, scale=RASTER_SCALE):
    """
    Fills buffer[y, x] with the gradient color of every coordinate, in place.
    y grows downwards with the buffer rows (no vertical inversion).
    Args:
        buffer (np.ndarray): uint8 array of shape (H, W, 3).
        dims (ImageDimensions): Size of the image.
        scale (float): Channel scale constant.
    Returns:
        np.ndarray: The same buffer.
    """
    if buffer.shape != dims.shape:
        raise ValueError(f"Buffer shape {buffer.shape} does not match image shape {dims.shape}.")

    for y in range(dims.height):
        for x in range(dims.width):
            buffer[y, x] = pixel_color(x, y, dims, scale)

    return buffer

def write_raster_image(dims, path=OUTPUT_PATH, encoder=None, abort_on_error=False,
                       out=None, err=None):
    """
    Generates the gradient into a buffer and persists it with a single write attempt.
    Args:
        dims (ImageDimensions): Size of the image.
        path (str): Destination file.
        encoder (RasterEncoder): Serialization capability, PillowEncoder if None.
        abort_on_error (bool): Re-raise RasterWriteError instead of reporting it.
        out, err: Streams for the "Done." notice and error reports (stdout/stderr if None).
    Returns:
        bool: True if the file was written, False if the failure was reported.
    """
    if encoder is None:
        encoder = PillowEncoder()
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err

    buffer = populate_buffer(allocate_buffer(dims), dims)

    try:
        encoder.persist(buffer, path)
    except RasterWriteError as exc:
        if abort_on_error:
            raise
        print(f"Error writing file: {exc}", file=err)
        return False

    print("Done.", file=out)
    return True
