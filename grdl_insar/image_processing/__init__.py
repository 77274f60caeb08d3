# -*- coding: utf-8 -*-
"""
Image Processing Module - Processor infrastructure and InSAR processors.

Sub-modules
-----------
insar/
    Pair processors for interferometry -- adaptive range filtering.
base.py
    ``ImageProcessor`` common base class.
versioning.py
    ``@processor_version`` and ``@processor_tags`` decorators.
params.py
    ``Range`` and ``Desc`` constraint markers for tunable
    parameters via ``Annotated`` type hints.

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
2026-03-03
"""

from grdl_insar.image_processing.base import ImageProcessor
from grdl_insar.image_processing.params import Desc, ParamSpec, Range
from grdl_insar.image_processing.versioning import (
    processor_tags,
    processor_version,
)
from grdl_insar.image_processing.insar import (
    RangeFilter,
    RangeFilterResult,
    filter_block,
)

__all__ = [
    'ImageProcessor',
    'Desc',
    'ParamSpec',
    'Range',
    'processor_tags',
    'processor_version',
    'RangeFilter',
    'RangeFilterResult',
    'filter_block',
]
