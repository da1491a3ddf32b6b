from dataclasses import dataclass

# --- Fixed image parameters ---
IMAGE_WIDTH = 256
IMAGE_HEIGHT = 256
OUTPUT_PATH = "image.png"

# Scale constants used to turn a ratio in [0, 1] into a channel value.
# The text path and the raster path use slightly different ones.
TEXT_SCALE = 255.99
RASTER_SCALE = 255.999

BLUE_RATIO = 0.25
MAX_CHANNEL = 255
PPM_MAGIC = "P3"


@dataclass(frozen=True)
class ImageDimensions:
    """
    Width and height of a generated image.
    Both axes need at least 2 pixels, since ratios are computed as x / (W - 1).
    """
    width: int
    height: int

    def __post_init__(self):
        for name, value in (("width", self.width), ("height", self.height)):
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value < 2:
                raise ValueError(f"{name} must be at least 2, got {value}")

    @property
    def pixel_count(self):
        return self.width * self.height

    @property
    def shape(self):
        """numpy shape (rows, cols, channels) of an RGB buffer of this size."""
        return (self.height, self.width, 3)


DEFAULT_DIMENSIONS = ImageDimensions(IMAGE_WIDTH, IMAGE_HEIGHT)
