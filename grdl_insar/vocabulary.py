# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical enums for grdl-insar processors.

Controlled vocabularies used to tag processors and describe filter
configuration: image modalities, processor categories, and the spectral
weighting applied by the range filter.

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

from enum import Enum


class ImageModality(Enum):
    """Imagery modalities a processor is designed for."""

    SAR = "SAR"
    INSAR = "INSAR"


class ProcessorCategory(Enum):
    """Functional grouping of processors."""

    FILTERS = "filters"


class SpectralWeighting(Enum):
    """Window shape used when building the per-line range filter.

    ``HAMMING`` de-weights the spectrum with the inverse of the
    acquisition Hamming window and re-weights it with a Hamming window
    matched to the reduced common bandwidth. ``RECTANGULAR`` applies a
    plain box over the common band.
    """

    HAMMING = "hamming"
    RECTANGULAR = "rectangular"
