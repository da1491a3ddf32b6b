from gradient_config import MAX_CHANNEL, PPM_MAGIC, TEXT_SCALE
from gradient_generator import pixel_color

def write_ppm(stream, dims, progress=None, scale=TEXT_SCALE):
    """
    Writes the gradient as a plain-text PPM (P3) image to a text stream.
    Rows go from y = H-1 down to 0, columns from x = 0 to W-1, one pixel per line.
    Args:
        stream: Writable text stream receiving the image.
        dims (ImageDimensions): Size of the image.
        progress: Stream for per-row "Scanlines remaining" notices, or None.
        scale (float): Channel scale constant.
    Errors raised by the streams are not caught.
    """
    stream.write(f"{PPM_MAGIC}\n{dims.width} {dims.height}\n{MAX_CHANNEL}\n")

    for y in range(dims.height - 1, -1, -1):
        if progress is not None:
            print(f"Scanlines remaining: {y}", file=progress, flush=True)
        for x in range(dims.width):
            r, g, b = pixel_color(x, y, dims, scale)
            stream.write(f"{r} {g} {b}\n")

    stream.flush()

def save_ppm(path, dims, progress=None, scale=TEXT_SCALE):
    """Writes the PPM image to a file at path."""
    with open(path, "w", encoding="ascii") as f:
        write_ppm(f, dims, progress=progress, scale=scale)
