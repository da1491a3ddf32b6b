import os
import sys
import tempfile
import time # For basic timing

# Append src to sys.path
sys.path.append(os.path.join(os.path.dirname(__file__), 'src'))

from gradient_config import DEFAULT_DIMENSIONS, RASTER_SCALE, TEXT_SCALE
from compare_outputs import compare_ppm_png
from ppm_writer import save_ppm
from raster_writer import write_raster_image

def main():
    dims = DEFAULT_DIMENSIONS
    print(f"\n--- Rendering {dims.width}x{dims.height} gradient ---")

    with tempfile.TemporaryDirectory() as tmp_dir:
        ppm_path = os.path.join(tmp_dir, "image.ppm")
        png_path = os.path.join(tmp_dir, "image.png")

        start_time = time.time()
        save_ppm(ppm_path, dims)
        print(f"Text path (scale {TEXT_SCALE}) completed in {time.time() - start_time:.4f} seconds.")

        start_time = time.time()
        if not write_raster_image(dims, path=png_path):
            sys.exit(1)
        print(f"Raster path (scale {RASTER_SCALE}) completed in {time.time() - start_time:.4f} seconds.")

        psnr, mse, max_abs_diff = compare_ppm_png(ppm_path, png_path)

    print("\n--- Text path vs raster path ---")
    print(f"  MSE: {mse:.4f}")
    print(f"  PSNR: {psnr:.4f} dB")
    print(f"  Max absolute channel difference: {max_abs_diff}")

if __name__ == '__main__':
    main()
