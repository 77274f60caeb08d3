# -*- coding: utf-8 -*-
"""
Processor Versioning - Version and capability tag decorators.

``@processor_version`` stamps a semantic version string on a processor
class; ``@processor_tags`` stamps modality / category / description
metadata used to discover processors by capability.

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

# Standard library
import importlib.metadata
from typing import Optional, Sequence, Type, TypeVar

# grdl-insar vocabulary
from grdl_insar.vocabulary import ImageModality, ProcessorCategory

T = TypeVar('T')

DISTRIBUTION_NAME = 'grdl-insar'


def processor_version(version: Optional[str] = None):
    """Class decorator that stamps ``__processor_version__``.

    Parameters
    ----------
    version : str, optional
        Semantic version string (e.g. ``'1.0.0'``). When omitted, the
        installed ``grdl-insar`` distribution version is used, or
        ``'unknown'`` if the package is not installed.

    Examples
    --------
    >>> @processor_version('1.0.0')
    ... class MyFilter(ImageProcessor):
    ...     pass
    >>> MyFilter.__processor_version__
    '1.0.0'
    """
    def decorator(cls: Type[T]) -> Type[T]:
        if version:
            cls.__processor_version__ = version
        else:
            try:
                cls.__processor_version__ = importlib.metadata.version(
                    DISTRIBUTION_NAME
                )
            except importlib.metadata.PackageNotFoundError:
                cls.__processor_version__ = "unknown"
        return cls
    return decorator


def processor_tags(
    modalities: Optional[Sequence[ImageModality]] = None,
    category: Optional[ProcessorCategory] = None,
    description: Optional[str] = None,
):
    """Class decorator for processor capability metadata.

    Stamps ``__processor_tags__`` as a dict with keys ``'modalities'``
    (tuple), ``'category'`` and ``'description'``.

    Raises
    ------
    TypeError
        If a modality is not an ``ImageModality`` or *category* is not a
        ``ProcessorCategory``. Checked eagerly so typos fail at import.
    """
    if modalities is not None:
        for m in modalities:
            if not isinstance(m, ImageModality):
                raise TypeError(
                    f"modalities must be ImageModality members, got {m!r}"
                )
    if category is not None and not isinstance(category, ProcessorCategory):
        raise TypeError(
            f"category must be a ProcessorCategory member, got {category!r}"
        )

    def decorator(cls: Type[T]) -> Type[T]:
        cls.__processor_tags__ = {
            'modalities': tuple(modalities) if modalities else (),
            'category': category,
            'description': description,
        }
        return cls
    return decorator
