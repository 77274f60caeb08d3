# -*- coding: utf-8 -*-
"""
Spectral Weighting Windows - Hamming, rectangular, and inverse Hamming.

Windows are evaluated on an explicit frequency axis rather than on a
sample count, so the same generator serves both the full acquisition
band and the reduced, shifted common band of the range filter.

The Hamming window follows the usual SAR spectral weighting form::

    w(f) = alpha + (1 - alpha) * cos(2 * pi * f / B)    for |f| < B / 2
    w(f) = 0                                            otherwise

which is strictly positive inside the passband for ``alpha >= 0.5``, so
its inverse is well defined wherever the window is non-zero.

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
2026-03-06
"""

# Third-party
import numpy as np

# grdl-insar internal
from grdl_insar.exceptions import ValidationError


def hamming_window(
    axis: np.ndarray,
    bandwidth: float,
    sampling_rate: float,
    alpha: float,
) -> np.ndarray:
    """Evaluate a Hamming window of *bandwidth* on *axis*.

    Parameters
    ----------
    axis : np.ndarray
        Frequencies at which to evaluate the window, 1D.
    bandwidth : float
        Window (pass) bandwidth, same unit as *axis*. A non-positive
        bandwidth gives an all-zero window.
    sampling_rate : float
        Sampling rate the axis spans. *bandwidth* may not exceed it.
    alpha : float
        Hamming coefficient in ``[0.5, 1.0]``; ``1.0`` is a box.

    Returns
    -------
    np.ndarray
        Float64 window, same shape as *axis*.

    Raises
    ------
    ValidationError
        If *bandwidth* exceeds *sampling_rate* or *alpha* is out of range.
    """
    if bandwidth > sampling_rate:
        raise ValidationError(
            f"hamming bandwidth {bandwidth!r} exceeds sampling rate "
            f"{sampling_rate!r}"
        )
    if not 0.5 <= alpha <= 1.0:
        raise ValidationError(
            f"hamming alpha must be in [0.5, 1.0], got {alpha!r}"
        )

    axis = np.asarray(axis, dtype=np.float64)
    window = np.zeros(axis.shape, dtype=np.float64)
    if bandwidth <= 0:
        return window

    inside = np.abs(axis) < bandwidth / 2.0
    window[inside] = alpha + (1.0 - alpha) * np.cos(
        2.0 * np.pi * axis[inside] / bandwidth
    )
    return window


def rect_window(x: np.ndarray) -> np.ndarray:
    """Unit box on a normalised axis: 1 where ``|x| <= 0.5``, else 0."""
    x = np.asarray(x, dtype=np.float64)
    return np.where(np.abs(x) <= 0.5, 1.0, 0.0)


def inverse_hamming_window(
    axis: np.ndarray,
    bandwidth: float,
    sampling_rate: float,
    alpha: float,
) -> np.ndarray:
    """Element-wise inverse of :func:`hamming_window`.

    Samples where the Hamming window is zero (outside the passband) are
    set to zero instead of infinity.

    Returns
    -------
    np.ndarray
        Float64 de-weighting window, same shape as *axis*.
    """
    window = hamming_window(axis, bandwidth, sampling_rate, alpha)
    inverse = np.zeros_like(window)
    nonzero = window != 0.0
    inverse[nonzero] = 1.0 / window[nonzero]
    return inverse
