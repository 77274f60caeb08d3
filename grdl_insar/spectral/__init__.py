# -*- coding: utf-8 -*-
"""
Spectral Utilities - FFT, frequency axis, windows, and interferogram helpers.

Building blocks shared by the InSAR spectral filters:

fft.py
    Range-axis forward/inverse FFT and 1D (i)fftshift via ``scipy.fft``.
axis.py
    ``frequency_axis`` -- zero-centred range-frequency axis.
windows.py
    ``hamming_window``, ``rect_window``, ``inverse_hamming_window``.
interferogram.py
    ``oversample_range``, ``compute_interferogram``, ``intensity``.

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

from grdl_insar.spectral.axis import frequency_axis
from grdl_insar.spectral.fft import (
    fftshift_1d,
    ifftshift_1d,
    inverse_range_fft,
    range_fft,
)
from grdl_insar.spectral.interferogram import (
    compute_interferogram,
    intensity,
    oversample_range,
)
from grdl_insar.spectral.windows import (
    hamming_window,
    inverse_hamming_window,
    rect_window,
)

__all__ = [
    'frequency_axis',
    'range_fft',
    'inverse_range_fft',
    'fftshift_1d',
    'ifftshift_1d',
    'compute_interferogram',
    'intensity',
    'oversample_range',
    'hamming_window',
    'inverse_hamming_window',
    'rect_window',
]
