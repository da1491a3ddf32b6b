import os
import sys

# Append src to sys.path
sys.path.append(os.path.join(os.path.dirname(__file__), 'src'))

from gradient_config import DEFAULT_DIMENSIONS
from ppm_writer import write_ppm

def main():
    # Image goes to stdout, progress to stderr: python render_ppm.py > image.ppm
    write_ppm(sys.stdout, DEFAULT_DIMENSIONS, progress=sys.stderr)
    print("Done.", file=sys.stderr)

if __name__ == '__main__':
    main()
