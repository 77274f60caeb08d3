# -*- coding: utf-8 -*-
"""
Tests for validation helpers - odd / power-of-two checks and block pairs.

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-03-04

Modified
--------
2026-03-06
"""

import numpy as np
import pytest

from grdl_insar.exceptions import ShapeMismatchError, ValidationError
from grdl_insar.validation import (
    is_odd,
    is_power_of_two,
    validate_block_pair,
    validate_odd,
    validate_power_of_two,
)


class TestPredicates:
    """Tests for the boolean predicates."""

    @pytest.mark.parametrize('value', [1, 3, 5, 15, 101])
    def test_odd_values(self, value):
        assert is_odd(value)

    @pytest.mark.parametrize('value', [0, 2, 4, 16])
    def test_even_values(self, value):
        assert not is_odd(value)

    def test_odd_rejects_float(self):
        assert not is_odd(3.0)

    def test_odd_accepts_numpy_int(self):
        assert is_odd(np.int64(7))

    @pytest.mark.parametrize('value', [1, 2, 4, 64, 1024, 2 ** 20])
    def test_powers_of_two(self, value):
        assert is_power_of_two(value)

    @pytest.mark.parametrize('value', [0, -2, 3, 6, 96, 1000])
    def test_not_powers_of_two(self, value):
        assert not is_power_of_two(value)

    def test_power_of_two_rejects_bool_and_float(self):
        assert not is_power_of_two(True)
        assert not is_power_of_two(4.0)


class TestRaisingValidators:
    """Tests for validate_odd / validate_power_of_two."""

    def test_validate_odd_passes(self):
        validate_odd(5, 'nl_mean')

    def test_validate_odd_raises(self):
        with pytest.raises(ValidationError, match="nl_mean has to be odd"):
            validate_odd(4, 'nl_mean')

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            validate_odd(4, 'nl_mean')

    def test_validate_power_of_two_raises(self):
        with pytest.raises(ValidationError, match="power of 2"):
            validate_power_of_two(96, 'numPixels')


class TestBlockPair:
    """Tests for validate_block_pair."""

    def test_valid_pair(self):
        block = np.zeros((4, 8), dtype=np.complex64)
        validate_block_pair(block, block.copy())

    def test_shape_mismatch(self):
        master = np.zeros((4, 8), dtype=np.complex64)
        slave = np.zeros((4, 16), dtype=np.complex64)
        with pytest.raises(ShapeMismatchError, match="slave not same size"):
            validate_block_pair(master, slave)

    def test_line_count_mismatch_is_validation_error(self):
        master = np.zeros((4, 8), dtype=np.complex64)
        slave = np.zeros((5, 8), dtype=np.complex64)
        with pytest.raises(ValidationError):
            validate_block_pair(master, slave)

    def test_real_input_rejected(self):
        real = np.zeros((4, 8))
        with pytest.raises(ValidationError, match="complex"):
            validate_block_pair(real, real)

    def test_non_array_rejected(self):
        with pytest.raises(ValidationError, match="numpy ndarray"):
            validate_block_pair([[1j]], np.zeros((1, 1), dtype=complex))

    def test_3d_rejected(self):
        cube = np.zeros((2, 4, 8), dtype=np.complex64)
        with pytest.raises(ValidationError, match="2D"):
            validate_block_pair(cube, cube)
