# -*- coding: utf-8 -*-
"""
Validation Helpers - Integer and block-pair precondition checks.

Provides the odd / power-of-two predicates used by the range filter and
raising variants that produce consistent ``ValidationError`` messages.
``validate_block_pair`` checks that a master/slave pair is a pair of
equal-shaped 2D complex numpy arrays.

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

# Standard library
import numbers

# Third-party
import numpy as np

# grdl-insar internal
from grdl_insar.exceptions import ShapeMismatchError, ValidationError


def is_odd(value: int) -> bool:
    """Return True if *value* is an odd integer."""
    return isinstance(value, numbers.Integral) and value % 2 == 1


def is_power_of_two(value: int) -> bool:
    """Return True if *value* is a positive integral power of two.

    ``1`` counts as a power of two (``2**0``).
    """
    if not isinstance(value, numbers.Integral) or isinstance(value, bool):
        return False
    value = int(value)
    return value > 0 and (value & (value - 1)) == 0


def validate_odd(value: int, name: str) -> None:
    """Raise ``ValidationError`` unless *value* is odd.

    Parameters
    ----------
    value : int
        Value to check.
    name : str
        Parameter name for the error message.

    Raises
    ------
    ValidationError
        If *value* is not an odd integer.
    """
    if not is_odd(value):
        raise ValidationError(f"{name} has to be odd, got {value!r}")


def validate_power_of_two(value: int, name: str) -> None:
    """Raise ``ValidationError`` unless *value* is a power of two.

    Parameters
    ----------
    value : int
        Value to check.
    name : str
        Parameter name for the error message.

    Raises
    ------
    ValidationError
        If *value* is not a positive power of two.
    """
    if not is_power_of_two(value):
        raise ValidationError(
            f"{name} has to be a power of 2, got {value!r}"
        )


def validate_block_pair(master: np.ndarray, slave: np.ndarray) -> None:
    """Validate a master/slave pair of complex data blocks.

    Parameters
    ----------
    master : np.ndarray
        Master block, shape ``(lines, pixels)``.
    slave : np.ndarray
        Slave block, must match *master* in shape.

    Raises
    ------
    ValidationError
        If either block is not a 2D complex numpy array.
    ShapeMismatchError
        If the block shapes differ.
    """
    for name, block in (('master', master), ('slave', slave)):
        if not isinstance(block, np.ndarray):
            raise ValidationError(
                f"{name} must be a numpy ndarray, got {type(block).__name__}"
            )
        if not np.iscomplexobj(block):
            raise ValidationError(
                f"{name} must be complex-valued (complex64 or complex128), "
                f"got {block.dtype}"
            )
        if block.ndim != 2:
            raise ValidationError(
                f"{name} must be 2D (lines, pixels), got {block.ndim}D "
                f"with shape {block.shape}"
            )
    if master.shape != slave.shape:
        raise ShapeMismatchError(
            f"slave not same size as master: master {master.shape}, "
            f"slave {slave.shape}"
        )
