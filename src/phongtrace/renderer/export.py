# renderer/export.py
"""
Image export for rendered pixel buffers (8-bit RGB PNG via Pillow).
"""
import logging
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from phongtrace.renderer.buffer import unpack_argb
from phongtrace.renderer.raytracer import Renderer

logger = logging.getLogger(__name__)


def save_png_from_buffer(buffer: np.ndarray, width: int, height: int,
                         filepath: Union[str, Path]) -> Path:
    """
    Saves a flat ARGB buffer as a PNG file and returns its path.
    """
    path = Path(filepath)
    image = Image.fromarray(unpack_argb(buffer, width, height))
    image.save(path)
    logger.info("Saved %dx%d image to %s", width, height, path)
    return path


def save_png(renderer: Renderer, filepath: Union[str, Path]) -> Path:
    return save_png_from_buffer(renderer.buffer, renderer.width, renderer.height, filepath)
