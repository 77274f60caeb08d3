# -*- coding: utf-8 -*-
"""
grdl-insar - Interferometric SAR building blocks for GRDL-style pipelines.

Provides spectral utilities (range FFT, frequency axis, weighting windows,
interferogram formation) and the adaptive common-band range filter for
co-registered complex SAR image pairs.

Dependencies
------------
numpy
scipy

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
2026-03-11
"""

__version__ = "0.1.0"

from grdl_insar.exceptions import (
    InsarError,
    ValidationError,
    ShapeMismatchError,
    ProcessorError,
    QualityWarning,
)
from grdl_insar.vocabulary import (
    ImageModality,
    ProcessorCategory,
    SpectralWeighting,
)
from grdl_insar.image_processing.insar import (
    RangeFilter,
    RangeFilterResult,
    filter_block,
)

__all__ = [
    'InsarError',
    'ValidationError',
    'ShapeMismatchError',
    'ProcessorError',
    'QualityWarning',
    'ImageModality',
    'ProcessorCategory',
    'SpectralWeighting',
    'RangeFilter',
    'RangeFilterResult',
    'filter_block',
    '__version__',
]
