# -*- coding: utf-8 -*-
"""
Range FFT Helpers - Forward/inverse transforms along the range axis.

Thin wrappers over ``scipy.fft`` that fix the transform axis to range
(axis 1, columns) for ``(lines, pixels)`` data blocks, plus 1D
fftshift/ifftshift for filter windows.

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-03-02

Modified
--------
2026-03-02
"""

# Third-party
import numpy as np
from scipy import fft as sp_fft

RANGE_AXIS = 1


def range_fft(block: np.ndarray, overwrite: bool = False) -> np.ndarray:
    """Forward FFT of every line of *block* along range.

    Parameters
    ----------
    block : np.ndarray
        Complex data, shape ``(lines, pixels)``.
    overwrite : bool
        Allow scipy to reuse the input buffer. Default False.

    Returns
    -------
    np.ndarray
        Complex spectrum, same shape, in FFT-native (zero-first) order.
    """
    return sp_fft.fft(block, axis=RANGE_AXIS, overwrite_x=overwrite)


def inverse_range_fft(
    spectrum: np.ndarray, overwrite: bool = False
) -> np.ndarray:
    """Inverse FFT of every line of *spectrum* along range."""
    return sp_fft.ifft(spectrum, axis=RANGE_AXIS, overwrite_x=overwrite)


def fftshift_1d(vector: np.ndarray) -> np.ndarray:
    """Move the zero-frequency sample of a 1D vector to the centre."""
    return sp_fft.fftshift(vector)


def ifftshift_1d(vector: np.ndarray) -> np.ndarray:
    """Inverse of :func:`fftshift_1d` (zero-centred -> zero-first)."""
    return sp_fft.ifftshift(vector)
