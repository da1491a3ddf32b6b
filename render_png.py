import os
import sys

# Append src to sys.path
sys.path.append(os.path.join(os.path.dirname(__file__), 'src'))

from gradient_config import DEFAULT_DIMENSIONS, OUTPUT_PATH
from raster_writer import write_raster_image

def main():
    # Write failures are reported on stderr; the exit status stays 0 either way
    write_raster_image(DEFAULT_DIMENSIONS, path=OUTPUT_PATH)

if __name__ == '__main__':
    main()
