# -*- coding: utf-8 -*-
"""
grdl-insar Exception Hierarchy - Domain-specific errors and warnings.

Provides a small exception hierarchy that lets callers catch InSAR
processing errors distinctly from Python built-in exceptions. All
exceptions subclass both ``InsarError`` and the appropriate built-in
exception, so existing ``except ValueError`` handlers keep working.

``QualityWarning`` is a ``UserWarning`` subclass for non-fatal
quality conditions (e.g. most lines of a block falling back to a stale
spectral shift). It never alters outputs; the caller decides whether to
re-run with different parameters.

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
2026-03-09
"""


class InsarError(Exception):
    """Base exception for all grdl-insar errors."""


class ValidationError(InsarError, ValueError):
    """Invalid input data or parameters.

    Raised for even averaging lengths, non power-of-two FFT sizes or
    oversampling factors, out-of-range bandwidths, and non-complex
    input blocks. Always raised before any input array is modified.
    """


class ShapeMismatchError(ValidationError):
    """Master and slave blocks do not have the same shape."""


class ProcessorError(InsarError, RuntimeError):
    """Non-recoverable numerical failure during filtering.

    Raised when the interferogram power spectrum contains non-finite
    values, which would otherwise propagate as NaN through the shift
    estimate.
    """


class QualityWarning(UserWarning):
    """Filtering completed, but the shift estimate was unreliable.

    Issued when the fraction of lines that reused a previous shift
    exceeds the quality limit.
    """
