# renderer/buffer.py
"""
Conversions between packed ARGB pixel buffers and RGB image arrays.
"""
import numpy as np
from numba import njit, prange


@njit(parallel=True)
def _unpack_argb_kernel(buffer, output, width, height):
    for y in prange(height):
        for x in range(width):
            pixel = buffer[y * width + x]
            output[y, x, 0] = (pixel >> 16) & 0xFF
            output[y, x, 1] = (pixel >> 8) & 0xFF
            output[y, x, 2] = pixel & 0xFF


@njit(parallel=True)
def _pack_rgb_kernel(image, buffer, width, height):
    for y in prange(height):
        for x in range(width):
            buffer[y * width + x] = (
                np.uint32(0xFF000000)
                | (np.uint32(image[y, x, 0]) << np.uint32(16))
                | (np.uint32(image[y, x, 1]) << np.uint32(8))
                | np.uint32(image[y, x, 2])
            )


def unpack_argb(buffer: np.ndarray, width: int, height: int) -> np.ndarray:
    """
    Converts a flat ARGB buffer indexed y*width+x into a (height, width, 3)
    uint8 RGB image. Alpha is dropped.
    """
    if buffer.size != width * height:
        raise ValueError(f"Buffer has {buffer.size} pixels, expected {width}x{height}")
    output = np.empty((height, width, 3), dtype=np.uint8)
    _unpack_argb_kernel(buffer.astype(np.uint32, copy=False), output, width, height)
    return output


def pack_rgb(image: np.ndarray) -> np.ndarray:
    """
    Converts a (height, width, 3) uint8 image into a flat ARGB buffer with
    opaque alpha.
    """
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError(f"Expected an (H, W, 3) image, got shape {image.shape}")
    height, width = image.shape[0], image.shape[1]
    buffer = np.empty(width * height, dtype=np.uint32)
    _pack_rgb_kernel(image.astype(np.uint8, copy=False), buffer, width, height)
    return buffer
