# -*- coding: utf-8 -*-
"""
Image Processing Base Class - Common interface for grdl-insar processors.

``ImageProcessor`` provides version checking at first instantiation,
``typing.Annotated``-based tunable parameter declarations with automatic
``__init__`` generation, per-call parameter overrides through
``**kwargs``, and optional progress reporting.

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
2026-03-05
"""

# Standard library
import logging
import warnings
from abc import ABC
from typing import Any, Dict, Tuple

# grdl-insar internal
from grdl_insar.image_processing.params import (
    ParamSpec,
    _make_init,
    collect_param_specs,
)

logger = logging.getLogger(__name__)


class ImageProcessor(ABC):
    """
    Common base class for all image processors.

    **Version checking**: concrete subclasses that do not declare a
    version via ``@processor_version('x.y.z')`` trigger a ``UserWarning``
    at first instantiation. The check runs in ``__new__`` so class
    decorators have already been applied.

    **Tunable parameters**: subclasses declare parameters as
    ``Annotated`` class fields using markers from
    :mod:`grdl_insar.image_processing.params`. ``__init_subclass__``
    collects them into ``__param_specs__`` and generates a keyword-only
    ``__init__`` unless the subclass defines its own. At call time
    ``_resolve_params(kwargs)`` merges instance values with overrides
    and validates them.
    """

    # Classes already checked for a version, to warn once per class.
    _version_warned_classes: set = set()

    __param_specs__: Tuple[ParamSpec, ...] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.__param_specs__ = collect_param_specs(cls)
        if cls.__param_specs__ and '__init__' not in cls.__dict__:
            cls.__init__ = _make_init(cls.__param_specs__)

    def __new__(cls, *args: Any, **kwargs: Any) -> 'ImageProcessor':
        if cls not in ImageProcessor._version_warned_classes:
            ImageProcessor._version_warned_classes.add(cls)
            if (
                not getattr(cls, '__processor_version__', None)
                and not getattr(cls, '__abstractmethods__', None)
            ):
                warnings.warn(
                    f"{cls.__qualname__} does not declare a processor version. "
                    f"Use @processor_version('x.y.z') to declare one.",
                    UserWarning,
                    stacklevel=2,
                )
        logger.debug("Instantiating %s", cls.__qualname__)
        return super().__new__(cls)

    def _resolve_params(self, kwargs: Dict[str, Any]) -> Dict[str, Any]:
        """Merge instance parameter values with runtime *kwargs* overrides.

        Keys in *kwargs* that are not declared parameters (for example
        ``progress_callback``) are ignored.

        Parameters
        ----------
        kwargs : Dict[str, Any]
            Runtime keyword arguments.

        Returns
        -------
        Dict[str, Any]
            ``{param_name: resolved_value}`` for every declared parameter.

        Raises
        ------
        TypeError
            If a value has the wrong type.
        ValueError
            If a value violates a range constraint.
        """
        resolved: Dict[str, Any] = {}
        for spec in type(self).__param_specs__:
            value = kwargs[spec.name] if spec.name in kwargs else getattr(
                self, spec.name
            )
            spec.validate(value)
            resolved[spec.name] = value
        return resolved

    def _report_progress(
        self, kwargs: Dict[str, Any], fraction: float
    ) -> None:
        """Call ``kwargs['progress_callback']`` with *fraction*, if given."""
        cb = kwargs.get('progress_callback')
        if cb is not None:
            cb(float(fraction))
