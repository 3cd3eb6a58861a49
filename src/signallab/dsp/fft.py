"""In-place iterative radix-2 decimation-in-time FFT.

The transform follows the classic Cooley-Tukey layout: reorder the input by
bit-reversed index, then combine pairs of sub-transforms in stages of
doubling size. Each stage is applied to every block at once with numpy
views, so the buffer is rewritten in place without allocating a second
full-length array per stage.

Only the forward, unnormalized transform is provided. Scaling is left to
the caller (see `signallab.dsp.frequency.analyze`).
"""

from __future__ import annotations

from functools import lru_cache

import numpy as np
import numpy.typing as npt

from signallab.domain.models import ComplexBuffer
from signallab.errors import InvalidTransformSize


FloatArray = npt.NDArray[np.float64]
IndexArray = npt.NDArray[np.intp]


def is_power_of_two(n: int) -> bool:
    """True for 1, 2, 4, 8, ..."""
    return n >= 1 and (n & (n - 1)) == 0


def require_power_of_two(n: int, *, minimum: int = 1) -> int:
    """Validate a transform size and return its base-2 logarithm."""
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise InvalidTransformSize(f"transform size must be an integer, got {n!r}")
    size = int(n)
    if size < minimum or not is_power_of_two(size):
        raise InvalidTransformSize(f"transform size must be a power of two >= {minimum}, got {size}")
    return size.bit_length() - 1


def reverse_bits(value: int, bit_count: int) -> int:
    """Reverse the lowest `bit_count` bits of `value`."""
    if bit_count < 0:
        raise ValueError("bit_count must be >= 0")
    if not 0 <= value < (1 << bit_count):
        raise ValueError(f"value {value} does not fit in {bit_count} bits")
    result = 0
    for _ in range(bit_count):
        result = (result << 1) | (value & 1)
        value >>= 1
    return result


@lru_cache(maxsize=32)
def bit_reversal_permutation(n: int) -> IndexArray:
    """Bit-reversed index table for a power-of-two length `n`."""
    levels = require_power_of_two(n)
    table = np.fromiter((reverse_bits(i, levels) for i in range(n)), dtype=np.intp, count=n)
    table.setflags(write=False)
    return table


@lru_cache(maxsize=32)
def twiddle_tables(n: int) -> tuple[FloatArray, FloatArray]:
    """Cosine and sine of `2*pi*i/n` for `i` in `[0, n/2)`."""
    require_power_of_two(n)
    angles = 2.0 * np.pi * np.arange(n // 2, dtype=np.float64) / n
    cos_table = np.cos(angles)
    sin_table = np.sin(angles)
    cos_table.setflags(write=False)
    sin_table.setflags(write=False)
    return cos_table, sin_table


def transform_in_place(buffer: ComplexBuffer) -> ComplexBuffer:
    """Overwrite `buffer` with its forward DFT in natural order and return it."""
    n = buffer.size
    require_power_of_two(n)
    if n == 1:
        return buffer

    re = buffer.real
    im = buffer.imag
    cos_table, sin_table = twiddle_tables(n)

    _swap_bit_reversed_pairs(re, im, bit_reversal_permutation(n))

    size = 2
    while size <= n:
        half = size // 2
        stride = n // size
        cos_k = cos_table[::stride][:half]
        sin_k = sin_table[::stride][:half]

        # Rows are blocks of `size`; columns [0, half) and [half, size) are the butterfly pairs.
        blocks_re = re.reshape(-1, size)
        blocks_im = im.reshape(-1, size)
        top_re = blocks_re[:, :half].copy()
        top_im = blocks_im[:, :half].copy()
        bottom_re = blocks_re[:, half:]
        bottom_im = blocks_im[:, half:]

        t_re = bottom_re * cos_k + bottom_im * sin_k
        t_im = -bottom_re * sin_k + bottom_im * cos_k

        blocks_re[:, half:] = top_re - t_re
        blocks_im[:, half:] = top_im - t_im
        blocks_re[:, :half] = top_re + t_re
        blocks_im[:, :half] = top_im + t_im
        size *= 2

    return buffer


def _swap_bit_reversed_pairs(re: FloatArray, im: FloatArray, permutation: IndexArray) -> None:
    indices = np.arange(permutation.size, dtype=np.intp)
    # j > i selects each unordered pair once; fixed points are skipped.
    mask = permutation > indices
    i = indices[mask]
    j = permutation[mask]
    re[i], re[j] = re[j], re[i]
    im[i], im[j] = im[j], im[i]
