# -*- coding: utf-8 -*-
"""
InSAR Image Processing - Processors operating on co-registered image pairs.

Adaptive Range Filtering
    ``RangeFilter`` -- estimates the range spectral shift between master
    and slave line by line from the interferogram power spectrum and
    filters both images to their common band. ``filter_block`` is the
    functional entry point; the per-line helpers (``detect_peak``,
    ``normalize_shift``, ``choose_shift``, ``build_range_filter``,
    ``filter_line``) and the sliding power sum (``initial_window_sum``,
    ``advance_window_sum``, with ``power_floor`` bounding its rounding
    residue) are exported for inspection and testing.

Usage
-----
    >>> from grdl_insar.image_processing.insar import RangeFilter
    >>>
    >>> rf = RangeFilter(nl_mean=15, snr_threshold=5.0,
    ...                  rsr=18.96e6, rbw=15.55e6, alpha_hamming=0.75)
    >>> result = rf.apply(master_block, slave_block)   # in place
    >>> print(result.mean_shift_hz, result.mean_snr)

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-03-03

Modified
--------
2026-03-11
"""

from grdl_insar.image_processing.insar.range_filter import (
    HAMMING_ALPHA_LIMIT,
    QUALITY_FALLBACK_PERCENT,
    FilterState,
    RangeFilter,
    RangeFilterResult,
    advance_window_sum,
    apply_filter,
    build_range_filter,
    choose_shift,
    correct_power_bias,
    detect_peak,
    estimate_power_spectrum,
    filter_block,
    filter_line,
    initial_window_sum,
    normalize_shift,
    power_floor,
)

__all__ = [
    'HAMMING_ALPHA_LIMIT',
    'QUALITY_FALLBACK_PERCENT',
    'FilterState',
    'RangeFilter',
    'RangeFilterResult',
    'advance_window_sum',
    'apply_filter',
    'build_range_filter',
    'choose_shift',
    'correct_power_bias',
    'detect_peak',
    'estimate_power_spectrum',
    'filter_block',
    'filter_line',
    'initial_window_sum',
    'normalize_shift',
    'power_floor',
]
