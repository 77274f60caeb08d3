# -*- coding: utf-8 -*-
"""
Tunable Parameter Annotations - Declarative processor configuration.

Processor configuration is declared as ``typing.Annotated`` class-body
fields carrying constraint markers (``Range``, ``Desc``)::

    class RangeFilter(ImageProcessor):
        nl_mean: Annotated[int, Range(min=1), Desc('Lines averaged')] = 15

``collect_param_specs`` turns those fields into ``ParamSpec`` objects
that ``ImageProcessor`` validates at construction and again for every
per-call override passed through ``**kwargs``.

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
import inspect
from typing import (
    Annotated,
    Any,
    List,
    Optional,
    Tuple,
    Union,
    get_origin,
    get_type_hints,
)

Number = Union[int, float]


# =====================================================================
# Constraint markers (used inside Annotated[...])
# =====================================================================

class ParamMeta:
    """Base marker: any ``Annotated`` field carrying one is a parameter."""


class Range(ParamMeta):
    """Inclusive numeric range constraint.

    Parameters
    ----------
    min : int or float, optional
        Minimum allowed value (inclusive).
    max : int or float, optional
        Maximum allowed value (inclusive).
    """

    __slots__ = ('min', 'max')

    def __init__(
        self,
        min: Optional[Number] = None,
        max: Optional[Number] = None,
    ) -> None:
        if min is not None and max is not None and min > max:
            raise ValueError(f"Range min {min!r} is above max {max!r}")
        self.min = min
        self.max = max

    def __repr__(self) -> str:
        return f"Range(min={self.min!r}, max={self.max!r})"


class Desc(ParamMeta):
    """Human-readable parameter description."""

    __slots__ = ('text',)

    def __init__(self, text: str) -> None:
        self.text = text

    def __repr__(self) -> str:
        return f"Desc({self.text!r})"


# =====================================================================
# ParamSpec
# =====================================================================

class ParamSpec:
    """Resolved specification for a single tunable parameter.

    Attributes
    ----------
    name : str
        Parameter name (keyword-argument key).
    param_type : type
        Expected Python type.
    default : Any
        Default value (``None`` when the parameter is required).
    description : str
        Human-readable description.
    min_value, max_value : int, float, or None
        Inclusive bounds from ``Range``.
    """

    __slots__ = (
        'name', 'param_type', 'default', '_has_default',
        'description', 'min_value', 'max_value',
    )

    def __init__(
        self,
        name: str,
        param_type: type,
        default: Any,
        has_default: bool,
        description: str = '',
        min_value: Optional[Number] = None,
        max_value: Optional[Number] = None,
    ) -> None:
        self.name = name
        self.param_type = param_type
        self.default = default
        self._has_default = has_default
        self.description = description
        self.min_value = min_value
        self.max_value = max_value

    @property
    def required(self) -> bool:
        """Whether this parameter has no default."""
        return not self._has_default

    def validate(self, value: Any) -> None:
        """Validate *value* against type and range.

        ``int`` is accepted for ``float`` parameters; ``bool`` is never
        accepted for numeric parameters.

        Raises
        ------
        TypeError
            If *value* has the wrong type.
        ValueError
            If *value* violates a range constraint.
        """
        if self.param_type in (int, float):
            allowed = (int, float) if self.param_type is float else (int,)
            if isinstance(value, bool) or not isinstance(value, allowed):
                raise TypeError(
                    f"Parameter '{self.name}' must be "
                    f"{self.param_type.__name__}, got {type(value).__name__}"
                )
        elif self.param_type is not object:
            if not isinstance(value, self.param_type):
                raise TypeError(
                    f"Parameter '{self.name}' must be "
                    f"{self.param_type.__name__}, got {type(value).__name__}"
                )

        if self.min_value is not None and value < self.min_value:
            raise ValueError(
                f"Parameter '{self.name}' value {value!r} "
                f"is below minimum {self.min_value!r}"
            )
        if self.max_value is not None and value > self.max_value:
            raise ValueError(
                f"Parameter '{self.name}' value {value!r} "
                f"is above maximum {self.max_value!r}"
            )

    def __repr__(self) -> str:
        text = (
            f"ParamSpec(name={self.name!r}, "
            f"param_type={self.param_type.__name__}"
        )
        if not self.required:
            text += f", default={self.default!r}"
        return text + ")"


# =====================================================================
# Collection and __init__ generation
# =====================================================================

_MISSING = object()


def collect_param_specs(cls: type) -> Tuple[ParamSpec, ...]:
    """Parse ``Annotated`` class fields of *cls* into ``ParamSpec`` objects.

    Fields are ordered parent-first, in declaration order.
    """
    try:
        hints = get_type_hints(cls, include_extras=True)
    except (NameError, TypeError):
        return ()

    ordered: List[str] = []
    for klass in reversed(cls.__mro__):
        for name in getattr(klass, '__annotations__', {}):
            if name in hints and name not in ordered:
                ordered.append(name)

    specs: List[ParamSpec] = []
    for name in ordered:
        hint = hints[name]
        if get_origin(hint) is not Annotated:
            continue
        metas = [m for m in hint.__metadata__ if isinstance(m, ParamMeta)]
        if not metas:
            continue

        range_meta = next((m for m in metas if isinstance(m, Range)), None)
        desc_meta = next((m for m in metas if isinstance(m, Desc)), None)

        default = getattr(cls, name, _MISSING)
        has_default = default is not _MISSING
        specs.append(ParamSpec(
            name=name,
            param_type=hint.__args__[0],
            default=default if has_default else None,
            has_default=has_default,
            description=desc_meta.text if desc_meta else '',
            min_value=range_meta.min if range_meta else None,
            max_value=range_meta.max if range_meta else None,
        ))
    return tuple(specs)


def _make_init(param_specs: Tuple[ParamSpec, ...]):
    """Build a keyword-only ``__init__`` that validates every parameter.

    Calls ``self.__post_init__()`` afterwards when the class defines one.
    """
    expected = {spec.name for spec in param_specs}

    def __init__(self, **kwargs):
        unexpected = set(kwargs) - expected
        if unexpected:
            raise TypeError(
                f"{type(self).__name__}() got unexpected "
                f"keyword arguments: {', '.join(sorted(unexpected))}"
            )
        for spec in param_specs:
            if spec.name in kwargs:
                value = kwargs[spec.name]
            elif not spec.required:
                value = spec.default
            else:
                raise TypeError(
                    f"{type(self).__name__}() missing required "
                    f"keyword argument: '{spec.name}'"
                )
            spec.validate(value)
            object.__setattr__(self, spec.name, value)

        if hasattr(self, '__post_init__'):
            self.__post_init__()

    params = [inspect.Parameter('self', inspect.Parameter.POSITIONAL_OR_KEYWORD)]
    for spec in param_specs:
        params.append(inspect.Parameter(
            spec.name,
            inspect.Parameter.KEYWORD_ONLY,
            default=(
                inspect.Parameter.empty if spec.required else spec.default
            ),
        ))
    __init__.__signature__ = inspect.Signature(params)
    __init__.__qualname__ = '__init__'
    return __init__
