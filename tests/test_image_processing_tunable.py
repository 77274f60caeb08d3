# -*- coding: utf-8 -*-
"""
Annotated Tunable Parameter Tests.

Tests for the typing.Annotated-based tunable parameter system: constraint
markers (Range, Desc), ParamSpec validation, annotation
collection, the generated keyword-only __init__, __post_init__, runtime
overrides through _resolve_params, and the versioning decorators.

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-03-05

Modified
--------
2026-03-11
"""

import warnings
from typing import Annotated

import pytest

from grdl_insar.image_processing.base import ImageProcessor
from grdl_insar.image_processing.params import (
    Desc,
    ParamMeta,
    ParamSpec,
    Range,
    collect_param_specs,
)
from grdl_insar.image_processing.versioning import (
    processor_tags,
    processor_version,
)
from grdl_insar.vocabulary import ImageModality, ProcessorCategory


# ---------------------------------------------------------------------------
# Fixtures: small processors
# ---------------------------------------------------------------------------

@processor_version('0.0.1')
class _Looks(ImageProcessor):
    looks: Annotated[int, Range(min=1, max=9), Desc('Number of looks')] = 3
    gain: Annotated[float, Range(min=0.0)] = 1.0
    mode: Annotated[str, Desc('Reduction name')] = 'mean'
    plain_attr: int = 0

    def __post_init__(self):
        self.post_init_ran = True


@processor_version('0.0.2')
class _LooksChild(_Looks):
    offset: Annotated[float, Desc('Additive offset')] = 0.0


@processor_version('0.0.3')
class _Required(ImageProcessor):
    size: Annotated[int, Range(min=1)]


# ---------------------------------------------------------------------------
# Constraint markers
# ---------------------------------------------------------------------------

class TestMarkers:
    """Test Range and Desc markers."""

    def test_range_basic(self):
        r = Range(min=0.0, max=1.0)
        assert (r.min, r.max) == (0.0, 1.0)

    def test_range_defaults_none(self):
        r = Range()
        assert r.min is None and r.max is None

    def test_range_min_above_max(self):
        with pytest.raises(ValueError):
            Range(min=2, max=1)

    def test_desc_text(self):
        assert Desc('x').text == 'x'

    def test_all_are_param_meta(self):
        for marker in (Range(), Desc('d')):
            assert isinstance(marker, ParamMeta)

    def test_repr(self):
        assert 'min=0' in repr(Range(min=0, max=1))


# ---------------------------------------------------------------------------
# ParamSpec validation
# ---------------------------------------------------------------------------

class TestParamSpecValidate:
    """Test ParamSpec.validate type and range checks."""

    def _spec(self, param_type, **kw):
        return ParamSpec('p', param_type, None, True, **kw)

    def test_int_accepted_for_float(self):
        self._spec(float).validate(3)

    def test_float_rejected_for_int(self):
        with pytest.raises(TypeError):
            self._spec(int).validate(3.0)

    def test_bool_rejected_for_numeric(self):
        with pytest.raises(TypeError):
            self._spec(int).validate(True)
        with pytest.raises(TypeError):
            self._spec(float).validate(False)

    def test_wrong_type(self):
        with pytest.raises(TypeError, match="must be str"):
            self._spec(str).validate(1)

    def test_below_minimum(self):
        with pytest.raises(ValueError, match="below minimum"):
            self._spec(float, min_value=0.0).validate(-1.0)

    def test_above_maximum(self):
        with pytest.raises(ValueError, match="above maximum"):
            self._spec(int, max_value=5).validate(6)

    def test_required_flag(self):
        assert ParamSpec('p', int, None, False).required
        assert not ParamSpec('p', int, 1, True).required


# ---------------------------------------------------------------------------
# Collection and generated __init__
# ---------------------------------------------------------------------------

class TestCollection:
    """Test annotation collection into __param_specs__."""

    def test_only_annotated_fields(self):
        names = [s.name for s in _Looks.__param_specs__]
        assert names == ['looks', 'gain', 'mode']

    def test_spec_contents(self):
        looks = _Looks.__param_specs__[0]
        assert looks.param_type is int
        assert looks.default == 3
        assert (looks.min_value, looks.max_value) == (1, 9)
        assert looks.description == 'Number of looks'

    def test_inherited_parent_first(self):
        names = [s.name for s in _LooksChild.__param_specs__]
        assert names == ['looks', 'gain', 'mode', 'offset']

    def test_collect_function_matches(self):
        assert [s.name for s in collect_param_specs(_Looks)] == [
            s.name for s in _Looks.__param_specs__
        ]


class TestGeneratedInit:
    """Test the keyword-only __init__ built from the specs."""

    def test_defaults(self):
        p = _Looks()
        assert (p.looks, p.gain, p.mode) == (3, 1.0, 'mean')

    def test_post_init_runs(self):
        assert _Looks().post_init_ran

    def test_override(self):
        p = _Looks(looks=5, mode='median')
        assert p.looks == 5 and p.mode == 'median'

    def test_invalid_value(self):
        with pytest.raises(ValueError):
            _Looks(looks=10)

    def test_wrong_type_value(self):
        with pytest.raises(TypeError, match="must be str"):
            _Looks(mode=3)

    def test_positional_rejected(self):
        with pytest.raises(TypeError):
            _Looks(5)

    def test_unexpected_keyword(self):
        with pytest.raises(TypeError, match="unexpected"):
            _Looks(bogus=1)

    def test_required_missing(self):
        with pytest.raises(TypeError, match="missing required"):
            _Required()

    def test_required_given(self):
        assert _Required(size=4).size == 4


class TestResolveParams:
    """Test per-call overrides through _resolve_params."""

    def test_instance_values(self):
        p = _Looks(looks=4)
        assert p._resolve_params({}) == {
            'looks': 4, 'gain': 1.0, 'mode': 'mean',
        }

    def test_override_does_not_persist(self):
        p = _Looks()
        resolved = p._resolve_params({'gain': 2.5})
        assert resolved['gain'] == 2.5
        assert p.gain == 1.0

    def test_override_validated(self):
        with pytest.raises(ValueError):
            _Looks()._resolve_params({'gain': -1.0})

    def test_extra_keys_ignored(self):
        resolved = _Looks()._resolve_params({'progress_callback': print})
        assert 'progress_callback' not in resolved

    def test_report_progress(self):
        seen = []
        _Looks()._report_progress({'progress_callback': seen.append}, 1)
        assert seen == [1.0]
        _Looks()._report_progress({}, 0.5)


# ---------------------------------------------------------------------------
# Versioning and tags
# ---------------------------------------------------------------------------

class TestVersioning:
    """Test @processor_version and @processor_tags."""

    def test_version_stamped(self):
        assert _Looks.__processor_version__ == '0.0.1'

    def test_default_version_is_string(self):
        @processor_version()
        class _Auto(ImageProcessor):
            pass
        assert isinstance(_Auto.__processor_version__, str)
        assert _Auto.__processor_version__

    def test_missing_version_warns_once(self):
        class _Unversioned(ImageProcessor):
            pass

        with pytest.warns(UserWarning, match="does not declare"):
            _Unversioned()
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            _Unversioned()

    def test_tags(self):
        @processor_tags(
            modalities=[ImageModality.INSAR],
            category=ProcessorCategory.FILTERS,
            description='demo',
        )
        class _Tagged(ImageProcessor):
            pass
        tags = _Tagged.__processor_tags__
        assert tags['modalities'] == (ImageModality.INSAR,)
        assert tags['category'] is ProcessorCategory.FILTERS
        assert tags['description'] == 'demo'

    def test_bad_modality(self):
        with pytest.raises(TypeError, match="ImageModality"):
            processor_tags(modalities=['SAR'])

    def test_bad_category(self):
        with pytest.raises(TypeError, match="ProcessorCategory"):
            processor_tags(category='filters')
