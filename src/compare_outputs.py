import numpy as np
from PIL import Image
from skimage.metrics import peak_signal_noise_ratio

def load_image_array(path):
    """Reads a PPM or PNG file into an (H, W, 3) uint8 array."""
    with Image.open(path) as img:
        return np.array(img.convert("RGB"), dtype=np.uint8)

def calculate_psnr_mse(img1, img2):
    """Calculates PSNR and MSE between two uint8 images."""
    if img1.shape != img2.shape:
        raise ValueError(f"Images must have the same dimensions, got {img1.shape} and {img2.shape}.")

    mse = np.mean((img1.astype(np.float64) - img2.astype(np.float64))**2)
    if mse == 0:
        psnr = float('inf')
    else:
        psnr = peak_signal_noise_ratio(img1, img2, data_range=255)
    return psnr, mse

def compare_ppm_png(ppm_path, png_path):
    """
    Compares the text-path and raster-path renderings of the gradient.
    The PPM rows run from y = H-1 to 0, so it is flipped back before comparing.
    Returns:
        tuple: (psnr, mse, max_abs_diff)
    """
    ppm = load_image_array(ppm_path)[::-1]
    png = load_image_array(png_path)

    psnr, mse = calculate_psnr_mse(ppm, png)
    max_abs_diff = int(np.max(np.abs(ppm.astype(np.int16) - png.astype(np.int16))))
    return psnr, mse, max_abs_diff
