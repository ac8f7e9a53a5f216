# renderer/tone_mapping.py
import math

import numpy as np
from numba import njit


@njit
def gamma_quantize_kernel(accumulated, scale, output):
    """
    Gamma-correct (gamma 2) and quantize summed linear radiance into bytes.
    """
    rows, cols, channels = accumulated.shape
    for y in range(rows):
        for x in range(cols):
            for c in range(channels):
                value = accumulated[y, x, c] * scale
                if value > 0.0:
                    value = math.sqrt(value)
                else:
                    value = 0.0
                if value > 0.999:
                    value = 0.999
                output[y, x, c] = int(value * 256.0)


def gamma_quantize(accumulated: np.ndarray, samples_per_pixel: int) -> np.ndarray:
    """
    Convert a buffer of per-pixel color sums into an 8-bit RGB image.

    Each channel is averaged over samples_per_pixel, square-rooted,
    clamped to [0, 0.999] and scaled by 256, so a full-intensity pixel maps
    to 255 and a black one to 0.
    """
    accumulated = np.ascontiguousarray(accumulated, dtype=np.float64)
    if accumulated.ndim != 3 or accumulated.shape[2] != 3:
        raise ValueError(f"Expected an (h, w, 3) buffer, got shape {accumulated.shape}")
    output = np.zeros(accumulated.shape, dtype=np.uint8)
    gamma_quantize_kernel(accumulated, 1.0 / samples_per_pixel, output)
    return output
