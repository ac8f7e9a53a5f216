# renderer/export.py
import logging
import os
from typing import Union

import numpy as np
from PIL import Image

from raytrace.config import RowOrder

logger = logging.getLogger(__name__)


def to_image(pixels: np.ndarray, row_order: RowOrder = RowOrder.TOP_DOWN) -> Image.Image:
    """
    Wraps a rendered (h, w, 3) uint8 grid in an upright PIL image.
    Bottom-up grids are flipped so the first image row is the top.
    """
    if pixels.dtype != np.uint8 or pixels.ndim != 3 or pixels.shape[2] != 3:
        raise ValueError(
            f"Expected an (h, w, 3) uint8 array, got {pixels.dtype} with shape {pixels.shape}"
        )
    if row_order is RowOrder.BOTTOM_UP:
        pixels = pixels[::-1]
    return Image.fromarray(np.ascontiguousarray(pixels))


def save_png(pixels: np.ndarray, path: Union[str, os.PathLike],
             row_order: RowOrder = RowOrder.TOP_DOWN) -> None:
    """
    Writes a rendered grid to a PNG file.

    Raises:
        ValueError: If pixels is not an (h, w, 3) uint8 array.
        OSError: If the file cannot be written.
    """
    image = to_image(pixels, row_order)
    directory = os.path.dirname(os.fspath(path))
    if directory:
        os.makedirs(directory, exist_ok=True)
    image.save(path, format="PNG")
    logger.info("Wrote %dx%d image to %s", image.width, image.height, path)
