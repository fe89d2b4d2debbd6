# renderer/tone_mapping.py
import numpy as np
from numba import njit

@njit(cache=False)
def quantize_kernel(linear_image, output_image):
    height, width, channels = linear_image.shape
    for y in range(height):
        for x in range(width):
            for c in range(channels):
                v = linear_image[y, x, c]
                if v < 0.0:
                    v = 0.0
                elif v > 1.0:
                    v = 1.0
                output_image[y, x, c] = np.uint8(round(v * 255.0))

def quantize(linear_image: np.ndarray) -> np.ndarray:
    """
    Clamp a linear (height, width, 3) image to [0, 1] and map each channel to
    an integer in [0, 255] with round(c * 255). No gamma is applied.
    """
    linear = np.ascontiguousarray(linear_image, dtype=np.float64)
    output = np.empty(linear.shape, dtype=np.uint8)
    quantize_kernel(linear, output)
    return output
