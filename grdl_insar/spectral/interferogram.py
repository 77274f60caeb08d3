# -*- coding: utf-8 -*-
"""
Interferogram Formation - Range oversampling, complex interferogram, intensity.

``compute_interferogram`` forms ``master * conj(slave)`` after optionally
oversampling both images in range. Oversampling is done by zero-padding
the range spectrum, which sharpens the interferogram spectrum so a small
fringe frequency is better separated from the zero bin.

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
from grdl_insar.spectral.fft import inverse_range_fft, range_fft
from grdl_insar.validation import validate_power_of_two


def oversample_range(block: np.ndarray, factor: int) -> np.ndarray:
    """Oversample a complex block in range by frequency zero-padding.

    The Nyquist bin of an even-length spectrum is split evenly between
    the positive and negative ends of the padded spectrum. Amplitudes
    are preserved (the inverse transform is rescaled by *factor*).

    Parameters
    ----------
    block : np.ndarray
        Complex data, shape ``(lines, pixels)``.
    factor : int
        Oversampling factor, a power of two.

    Returns
    -------
    np.ndarray
        Complex128 block, shape ``(lines, pixels * factor)``.
    """
    validate_power_of_two(factor, 'oversample factor')
    if factor == 1:
        return np.array(block, dtype=np.complex128)

    lines, pixels = block.shape
    out_pixels = pixels * factor
    spectrum = range_fft(block)
    padded = np.zeros((lines, out_pixels), dtype=np.complex128)

    if pixels == 1:
        padded[:, 0] = spectrum[:, 0]
    else:
        half = pixels // 2
        padded[:, :half] = spectrum[:, :half]
        padded[:, half] = 0.5 * spectrum[:, half]
        padded[:, out_pixels - half] = 0.5 * spectrum[:, half]
        padded[:, out_pixels - half + 1:] = spectrum[:, half + 1:]

    return inverse_range_fft(padded, overwrite=True) * factor


def compute_interferogram(
    master: np.ndarray,
    slave: np.ndarray,
    ovs_factor: int = 1,
) -> np.ndarray:
    """Complex interferogram ``master * conj(slave)``.

    Parameters
    ----------
    master, slave : np.ndarray
        Equal-shaped complex blocks, shape ``(lines, pixels)``.
    ovs_factor : int
        Range oversampling factor applied to both images before the
        product. Must be a power of two. Default 1 (no oversampling).

    Returns
    -------
    np.ndarray
        Complex128 interferogram, shape ``(lines, pixels * ovs_factor)``.
    """
    validate_power_of_two(ovs_factor, 'oversample factor')
    if ovs_factor != 1:
        master = oversample_range(master, ovs_factor)
        slave = oversample_range(slave, ovs_factor)
    return np.asarray(master, dtype=np.complex128) * np.conj(slave)


def intensity(data: np.ndarray) -> np.ndarray:
    """Squared magnitude of complex *data*, float64."""
    return np.real(data) ** 2 + np.imag(data) ** 2
