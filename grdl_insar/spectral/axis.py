# -*- coding: utf-8 -*-
"""
Frequency Axis - Symmetric range-frequency axis for a data block.

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


def frequency_axis(num_pixels: int, rsr: float) -> np.ndarray:
    """Build the zero-centred range-frequency axis.

    ``freq[i] = -rsr/2 + i * rsr/num_pixels`` for ``i = 0..num_pixels-1``,
    i.e. the frequencies of an fftshifted spectrum of *num_pixels*
    samples taken at range sampling rate *rsr*.

    Parameters
    ----------
    num_pixels : int
        Number of range samples (power of two; checked by the caller).
    rsr : float
        Range sampling rate.

    Returns
    -------
    np.ndarray
        Float64 axis, shape ``(num_pixels,)``. Treated as read-only.
    """
    delta_f = rsr / num_pixels
    axis = -rsr / 2.0 + np.arange(num_pixels, dtype=np.float64) * delta_f
    axis.setflags(write=False)
    return axis
