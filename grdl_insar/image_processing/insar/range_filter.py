# -*- coding: utf-8 -*-
"""
Adaptive Range Filter - Common-band range filtering of an InSAR image pair.

Differing look angles between two acquisitions shift their range spectra
relative to each other. The non-overlapping parts of the spectra only add
decorrelation noise to the interferogram, so both images are band-pass
filtered to their common band before interferogram formation.

For every output line of a data block the local spectral shift is
estimated from the power spectrum of the complex interferogram
``master * conj(slave)``, averaged over ``nl_mean`` neighbouring lines.
The peak of that spectrum is the fringe frequency, i.e. the shift. A
peak-to-rest power ratio (SNR) gates the estimate: lines whose SNR falls
below the threshold reuse the last accepted shift. A filter centred on
half the shift with a bandwidth reduced by the shift is built (Hamming
or rectangular) and applied to one image; its mirror is applied to the
other.

The per-line state -- the running power sum over the averaging window
and the last accepted shift -- is carried explicitly in ``FilterState``
so each step of the loop can be exercised on its own.

References
----------
Gatelli, F. et al., "The wavenumber shift in SAR interferometry",
IEEE TGRS 32(4), 1994.

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-03-03

Modified
--------
2026-03-11
"""

# Standard library
import dataclasses
import logging
import math
import warnings
from typing import Annotated, Any, Callable, Optional, Tuple

# Third-party
import numpy as np

# grdl-insar internal
from grdl_insar.exceptions import ProcessorError, QualityWarning, ValidationError
from grdl_insar.image_processing.base import ImageProcessor
from grdl_insar.image_processing.params import Desc, Range
from grdl_insar.image_processing.versioning import processor_tags, processor_version
from grdl_insar.spectral.axis import frequency_axis
from grdl_insar.spectral.fft import ifftshift_1d, inverse_range_fft, range_fft
from grdl_insar.spectral.interferogram import compute_interferogram, intensity
from grdl_insar.spectral.windows import (
    hamming_window,
    inverse_hamming_window,
    rect_window,
)
from grdl_insar.validation import (
    validate_block_pair,
    validate_odd,
    validate_power_of_two,
)
from grdl_insar.vocabulary import (
    ImageModality,
    ProcessorCategory,
    SpectralWeighting,
)

logger = logging.getLogger(__name__)

#: Hamming coefficients at or above this value mean "no weighting".
HAMMING_ALPHA_LIMIT = 0.9999

#: Percentage of fallback lines above which a ``QualityWarning`` is issued.
QUALITY_FALLBACK_PERCENT = 60.0


# ===================================================================
# Data structures
# ===================================================================

@dataclasses.dataclass(frozen=True, eq=False)
class FilterState:
    """Accumulator carried from one output line to the next.

    Attributes
    ----------
    window_sum : np.ndarray
        Sum of the power spectrum over the ``nl_mean`` lines centred on
        the current output line, shape ``(fft_length,)``.
    last_shift : int or None
        Signed shift (bins) of the most recently accepted line; negative
        for a folded shift. ``None`` until a line is accepted or the
        first fallback seeds it.
    """

    window_sum: np.ndarray
    last_shift: Optional[int] = None


@dataclasses.dataclass(frozen=True, eq=False)
class RangeFilterResult:
    """Block-level statistics and per-line diagnostics of a filter run.

    Attributes
    ----------
    output_lines : int
        Number of filtered lines, ``num_lines - nl_mean + 1`` (0 when the
        block is shorter than the averaging window).
    not_filtered : int
        Lines whose SNR was below the threshold and reused a previous shift.
    mean_shift : float
        Sum of the applied shift magnitudes over all output lines
        divided by the number of accepted lines, in bins (0.0 if none
        was accepted).
    mean_shift_hz : float
        ``mean_shift`` converted to frequency, same unit as ``rsr``.
    mean_snr : float
        Mean SNR over all output lines. ``inf`` if any line had a
        single-bin spectrum.
    percent_not_filtered : float
        ``100 * not_filtered / output_lines``.
    fft_length : int
        Length of the interferogram spectrum (pixels times oversampling).
    shifts : np.ndarray
        Signed shift applied to each output line (bins), int64.
    snr : np.ndarray
        SNR of each output line, float64.
    accepted : np.ndarray
        True where the line's own estimate passed the threshold.
    """

    output_lines: int
    not_filtered: int
    mean_shift: float
    mean_shift_hz: float
    mean_snr: float
    percent_not_filtered: float
    fft_length: int
    shifts: np.ndarray
    snr: np.ndarray
    accepted: np.ndarray

    @property
    def percent_filtered(self) -> float:
        """Percentage of output lines filtered with their own estimate."""
        if self.output_lines == 0:
            return 0.0
        return 100.0 - self.percent_not_filtered

    @property
    def quality_warning(self) -> bool:
        """True when too many lines fell back to a previous shift."""
        return self.percent_not_filtered > QUALITY_FALLBACK_PERCENT

    @classmethod
    def empty(cls, fft_length: int) -> 'RangeFilterResult':
        """Result for a block with no output lines."""
        return cls(
            output_lines=0,
            not_filtered=0,
            mean_shift=0.0,
            mean_shift_hz=0.0,
            mean_snr=0.0,
            percent_not_filtered=0.0,
            fft_length=fft_length,
            shifts=np.zeros(0, dtype=np.int64),
            snr=np.zeros(0, dtype=np.float64),
            accepted=np.zeros(0, dtype=bool),
        )


# ===================================================================
# Spectral estimation
# ===================================================================

def correct_power_bias(
    power: np.ndarray,
    rsr: float,
    rbw: float,
    num_pixels: int,
) -> np.ndarray:
    """Divide each spectral bin by the number of points that formed it.

    The power spectrum of a product of two band-limited signals is the
    autocorrelation of their spectra, so bins far from the peak are built
    from fewer overlapping samples. Bin ``j`` is divided by
    ``num_pixels**2`` while ``|num_pixels - j| < index_no_peak``, and by
    ``|num_pixels - j|**2`` otherwise, with
    ``index_no_peak = floor((1 - rbw/rsr) * num_pixels)``.

    Parameters
    ----------
    power : np.ndarray
        Power spectrum, shape ``(lines, fft_length)``.
    rsr, rbw : float
        Range sampling rate and range bandwidth.
    num_pixels : int
        Number of range pixels before oversampling.

    Returns
    -------
    np.ndarray
        Bias-corrected copy of *power*.
    """
    fft_length = power.shape[1]
    index_no_peak = math.floor((1.0 - rbw / rsr) * num_pixels)
    n_points = np.abs(num_pixels - np.arange(fft_length)).astype(np.float64)
    weight = np.where(
        n_points < index_no_peak, float(num_pixels) ** 2, n_points ** 2
    )
    # zero only at j == num_pixels with rbw >= rsr (oversampled spectra)
    weight[weight == 0.0] = 1.0
    return power / weight


def estimate_power_spectrum(
    master: np.ndarray,
    slave: np.ndarray,
    rsr: float,
    rbw: float,
    ovs_factor: int = 1,
    weight_correlation: bool = False,
) -> Tuple[np.ndarray, int]:
    """Range power spectrum of the (oversampled) complex interferogram.

    Parameters
    ----------
    master, slave : np.ndarray
        Equal-shaped complex blocks in the spatial domain.
    rsr, rbw : float
        Range sampling rate and range bandwidth.
    ovs_factor : int
        Range oversampling factor (power of two). Default 1.
    weight_correlation : bool
        Apply :func:`correct_power_bias`. Default False.

    Returns
    -------
    power : np.ndarray
        Float64 power spectrum, shape ``(lines, fft_length)``.
    fft_length : int
        ``pixels * ovs_factor``.

    Raises
    ------
    ProcessorError
        If the spectrum contains non-finite values.
    """
    ifg = compute_interferogram(master, slave, ovs_factor)
    fft_length = ifg.shape[1]
    power = intensity(range_fft(ifg, overwrite=True))

    if weight_correlation:
        power = correct_power_bias(power, rsr, rbw, master.shape[1])

    if not np.all(np.isfinite(power)):
        raise ProcessorError(
            "interferogram power spectrum contains non-finite values; "
            "check the input blocks for NaN or inf samples"
        )
    return power, fft_length


# ===================================================================
# Sliding power sum
# ===================================================================

def initial_window_sum(power: np.ndarray, nl_mean: int) -> np.ndarray:
    """Column sum of the first *nl_mean* lines of *power*."""
    return power[:nl_mean].sum(axis=0)


def advance_window_sum(
    window_sum: np.ndarray,
    power: np.ndarray,
    start: int,
    nl_mean: int,
) -> np.ndarray:
    """Slide the averaging window down by one line.

    Adds line ``start + nl_mean`` (entering) and subtracts line ``start``
    (leaving), so the result covers lines
    ``start + 1 .. start + nl_mean``.

    Returns
    -------
    np.ndarray
        New window sum; *window_sum* is not modified.
    """
    return window_sum + (power[start + nl_mean] - power[start])


# ===================================================================
# Per-line decision logic
# ===================================================================

def power_floor(power: np.ndarray, fft_length: int) -> float:
    """Level below which a sliding power sum counts as empty.

    Adding and subtracting lines leaves rounding residue of either sign
    once the window moves onto zero-power lines. The floor bounds that
    residue: machine epsilon times ``fft_length`` times the number of
    lines times the largest single-line total.
    """
    if power.size == 0:
        return 0.0
    line_total = float(power.sum(axis=1).max())
    return float(np.finfo(np.float64).eps * fft_length * power.shape[0]
                 * line_total)


def detect_peak(
    window_sum: np.ndarray,
    fft_length: int,
    floor: float = 0.0,
) -> Tuple[int, float]:
    """Locate the spectral peak and its peak-to-rest power ratio.

    ``snr = fft_length * max / (total - max)`` on the sum clipped at zero.
    A peak at or below *floor* means no power and gives an SNR of 0.0;
    when the rest is at or below *floor* all power sits in the peak bin
    and the SNR is ``inf``.

    Parameters
    ----------
    window_sum : np.ndarray
        Sliding power sum, shape ``(fft_length,)``.
    fft_length : int
        Spectrum length.
    floor : float
        Residue level from :func:`power_floor`. Default 0.0.

    Returns
    -------
    index : int
        Raw argmax bin in ``[0, fft_length)``.
    snr : float
        Peak SNR.
    """
    clipped = np.maximum(window_sum, 0.0)
    index = int(np.argmax(clipped))
    max_value = float(clipped[index])
    rest = float(clipped.sum()) - max_value
    if max_value <= floor:
        snr = 0.0
    elif rest <= floor:
        snr = math.inf
    else:
        snr = fft_length * max_value / rest
    return index, snr


def normalize_shift(index: int, fft_length: int) -> Tuple[int, bool]:
    """Fold a raw peak bin into a shift magnitude and sign.

    Bins above ``fft_length // 2`` are negative frequencies.

    Returns
    -------
    shift : int
        Shift magnitude in ``[0, fft_length // 2]``.
    neg_shift : bool
        True when *index* was folded.
    """
    if index > fft_length // 2:
        return fft_length - index, True
    return index, False


def choose_shift(
    shift: int,
    neg_shift: bool,
    snr: float,
    snr_threshold: float,
    last_shift: Optional[int],
) -> Tuple[int, bool, int]:
    """Decide which signed shift to filter a line with.

    Parameters
    ----------
    shift, neg_shift
        Folded estimate of the current line.
    snr : float
        SNR of the current estimate.
    snr_threshold : float
        Minimum SNR to trust the estimate.
    last_shift : int or None
        Signed shift carried from earlier lines.

    Returns
    -------
    applied : int
        Signed shift to filter with (negative means ``neg_shift``).
    accepted : bool
        Whether the current estimate passed the threshold.
    last_shift : int
        Signed shift to carry to the next line.
    """
    signed = -shift if neg_shift else shift
    if snr >= snr_threshold:
        return signed, True, signed
    if last_shift is None:
        # nothing accepted yet: seed the fallback with this line's peak
        return signed, False, signed
    return last_shift, False, last_shift


# ===================================================================
# Filter construction and application
# ===================================================================

def build_range_filter(
    freq_axis: np.ndarray,
    shift: int,
    delta_f: float,
    rbw: float,
    rsr: float,
    alpha_hamming: float,
    inverse_hamming: Optional[np.ndarray] = None,
) -> np.ndarray:
    """Build the common-band filter for a shift of *shift* bins.

    The window is evaluated on ``freq_axis - shift*delta_f/2`` with
    bandwidth ``rbw - shift*delta_f``. With *inverse_hamming* given, a
    Hamming window is built and multiplied by it (re-weighting of the
    de-weighted spectrum); otherwise a rectangular window is used. The
    result is ifftshifted to FFT-native order.

    Parameters
    ----------
    freq_axis : np.ndarray
        Zero-centred frequency axis, shape ``(pixels,)``.
    shift : int
        Shift magnitude in bins (non-negative).
    delta_f : float
        Frequency bin spacing, ``rsr / pixels``.
    rbw, rsr : float
        Range bandwidth and range sampling rate.
    alpha_hamming : float
        Hamming coefficient (used only with *inverse_hamming*).
    inverse_hamming : np.ndarray, optional
        De-weighting window from :func:`inverse_hamming_window`.

    Returns
    -------
    np.ndarray
        Real filter, shape ``(pixels,)``, FFT-native order.
    """
    offset = 0.5 * shift * delta_f
    bandwidth = rbw - shift * delta_f
    centred = freq_axis - offset

    if inverse_hamming is not None:
        window = hamming_window(centred, bandwidth, rsr, alpha_hamming)
        window *= inverse_hamming
    elif bandwidth > 0.0:
        window = rect_window(centred / bandwidth)
    else:
        window = np.zeros_like(centred)

    return ifftshift_1d(window)


def apply_filter(row: np.ndarray, window: np.ndarray) -> np.ndarray:
    """Multiply a spectral row by a filter window."""
    return row * window


def filter_line(
    master_row: np.ndarray,
    slave_row: np.ndarray,
    window: np.ndarray,
    neg_shift: bool,
) -> Tuple[np.ndarray, np.ndarray]:
    """Filter one line of the master/slave spectra.

    For a positive shift the master gets *window* and the slave its
    left-right mirror; for a negative shift the roles swap.

    Returns
    -------
    Tuple[np.ndarray, np.ndarray]
        Filtered ``(master_row, slave_row)``.
    """
    mirrored = window[::-1]
    if neg_shift:
        return apply_filter(master_row, mirrored), apply_filter(slave_row, window)
    return apply_filter(master_row, window), apply_filter(slave_row, mirrored)


# ===================================================================
# Block filter
# ===================================================================

def _validate_parameters(
    master: np.ndarray,
    slave: np.ndarray,
    nl_mean: int,
    rsr: float,
    rbw: float,
    alpha_hamming: float,
    ovs_factor: int,
) -> None:
    validate_odd(nl_mean, 'nl_mean')
    if nl_mean < 1:
        raise ValidationError(f"nl_mean must be >= 1, got {nl_mean}")
    validate_block_pair(master, slave)
    validate_power_of_two(master.shape[1], 'numPixels (FFT)')
    validate_power_of_two(ovs_factor, 'oversample factor (FFT)')
    if not rsr > 0.0:
        raise ValidationError(f"rsr must be positive, got {rsr!r}")
    if not rbw > 0.0:
        raise ValidationError(f"rbw must be positive, got {rbw!r}")
    if alpha_hamming < HAMMING_ALPHA_LIMIT:
        # the Hamming window cannot be wider than the sampled band
        if rbw > rsr:
            raise ValidationError(
                f"rbw must not exceed rsr={rsr!r} with Hamming weighting, "
                f"got {rbw!r}"
            )
        if not alpha_hamming >= 0.5:
            raise ValidationError(
                f"alpha_hamming must be in [0.5, 1.0], got {alpha_hamming!r}"
            )


def filter_block(
    master: np.ndarray,
    slave: np.ndarray,
    nl_mean: int,
    snr_threshold: float,
    rsr: float,
    rbw: float,
    alpha_hamming: float,
    ovs_factor: int = 1,
    weight_correlation: bool = False,
    progress_callback: Optional[Callable[[float], None]] = None,
) -> RangeFilterResult:
    """Adaptively range-filter a master/slave block pair in place.

    Lines ``first_line .. last_line`` with ``first_line = (nl_mean-1)//2``
    and ``last_line = first_line + num_lines - nl_mean`` are filtered;
    the remaining border lines pass through the FFT round trip unchanged.

    Parameters
    ----------
    master, slave : np.ndarray
        Co-registered complex blocks, shape ``(lines, pixels)`` with
        *pixels* a power of two. Overwritten with the filtered data.
    nl_mean : int
        Odd number of lines averaged for the shift estimate.
    snr_threshold : float
        Minimum peak SNR to accept a line's own estimate.
    rsr : float
        Range sampling rate (Hz).
    rbw : float
        Range bandwidth (Hz), positive; not above *rsr* with Hamming
        weighting. A rectangular filter accepts any positive value.
    alpha_hamming : float
        Hamming coefficient; values ``>= 0.9999`` select a rectangular
        filter without de-weighting.
    ovs_factor : int
        Range oversampling factor of the interferogram (power of two).
    weight_correlation : bool
        Correct the power spectrum for the triangular estimation bias.
    progress_callback : callable, optional
        Called with the completed fraction after every output line.

    Returns
    -------
    RangeFilterResult
        Block statistics and per-line diagnostics.

    Raises
    ------
    ValidationError
        If *nl_mean* is even, the pixel count or *ovs_factor* is not a
        power of two, *rsr* or *rbw* is not positive, or *rbw* exceeds
        *rsr* with Hamming weighting.
    ShapeMismatchError
        If *master* and *slave* differ in shape.
    ProcessorError
        If the interferogram spectrum is not finite.

    Warns
    -----
    QualityWarning
        If more than 60 % of the lines reused a previous shift.
    """
    _validate_parameters(
        master, slave, nl_mean, rsr, rbw, alpha_hamming, ovs_factor
    )

    num_lines, num_pixels = master.shape
    output_lines = num_lines - nl_mean + 1
    if output_lines < 1:
        logger.warning(
            "no output lines: block has %d lines, nl_mean is %d; "
            "continuing without filtering", num_lines, nl_mean,
        )
        return RangeFilterResult.empty(num_pixels * ovs_factor)

    first_line = (nl_mean - 1) // 2
    last_line = first_line + output_lines - 1
    delta_f = rsr / num_pixels
    freq_axis = frequency_axis(num_pixels, rsr)

    inverse_hamming = None
    if alpha_hamming < HAMMING_ALPHA_LIMIT:
        inverse_hamming = inverse_hamming_window(
            freq_axis, rbw, rsr, alpha_hamming
        )

    power, fft_length = estimate_power_spectrum(
        master, slave, rsr, rbw, ovs_factor, weight_correlation
    )
    floor = power_floor(power, fft_length)
    master_spectrum = range_fft(master)
    slave_spectrum = range_fft(slave)
    logger.debug("Took FFT over lines of master, slave (%d x %d, fft "
                 "length %d)", num_lines, num_pixels, fft_length)

    shifts = np.zeros(output_lines, dtype=np.int64)
    snrs = np.zeros(output_lines, dtype=np.float64)
    accepted = np.zeros(output_lines, dtype=bool)

    state = FilterState(window_sum=initial_window_sum(power, nl_mean))
    for i, out_line in enumerate(range(first_line, last_line + 1)):
        index, snr = detect_peak(state.window_sum, fft_length, floor)
        shift, neg_shift = normalize_shift(index, fft_length)
        applied, ok, last_shift = choose_shift(
            shift, neg_shift, snr, snr_threshold, state.last_shift
        )
        if not ok:
            logger.debug(
                "line %d: SNR %.4g below threshold %.4g, using last "
                "shift %d", out_line, snr, snr_threshold, applied,
            )

        window = build_range_filter(
            freq_axis, abs(applied), delta_f, rbw, rsr, alpha_hamming,
            inverse_hamming,
        )
        master_spectrum[out_line], slave_spectrum[out_line] = filter_line(
            master_spectrum[out_line], slave_spectrum[out_line],
            window, applied < 0,
        )

        window_sum = state.window_sum
        if out_line != last_line:
            window_sum = advance_window_sum(
                window_sum, power, out_line - first_line, nl_mean
            )
        state = FilterState(window_sum=window_sum, last_shift=last_shift)

        shifts[i] = applied
        snrs[i] = snr
        accepted[i] = ok
        if progress_callback is not None:
            progress_callback((i + 1) / output_lines)

    master[...] = inverse_range_fft(master_spectrum, overwrite=True)
    slave[...] = inverse_range_fft(slave_spectrum, overwrite=True)

    n_accepted = int(accepted.sum())
    not_filtered = output_lines - n_accepted
    # fallback lines count in the sum but not in the denominator
    mean_shift = (
        float(np.abs(shifts).sum()) / n_accepted if n_accepted else 0.0
    )
    mean_snr = float(snrs.mean())
    percent_not_filtered = 100.0 * not_filtered / output_lines

    result = RangeFilterResult(
        output_lines=output_lines,
        not_filtered=not_filtered,
        mean_shift=mean_shift,
        mean_shift_hz=mean_shift * delta_f,
        mean_snr=mean_snr,
        percent_not_filtered=percent_not_filtered,
        fft_length=fft_length,
        shifts=shifts,
        snr=snrs,
        accepted=accepted,
    )

    logger.debug("mean SHIFT for block: %.4g = %.6g MHz (fringe freq.)",
                 mean_shift, result.mean_shift_hz / 1e6)
    logger.debug("mean SNR for block: %.4g", mean_snr)
    logger.debug("filtered for block: %.2f%%", result.percent_filtered)

    if result.quality_warning:
        message = (
            f"{percent_not_filtered:.1f}% of lines used a previous shift "
            f"(SNR below {snr_threshold}); the shift estimate for this "
            f"block is unreliable"
        )
        logger.warning(message)
        warnings.warn(message, QualityWarning, stacklevel=2)

    return result


# ===================================================================
# RangeFilter Processor
# ===================================================================

@processor_version('1.0.0')
@processor_tags(
    modalities=[ImageModality.SAR, ImageModality.INSAR],
    category=ProcessorCategory.FILTERS,
    description='Adaptive common-band range filtering of an InSAR pair',
)
class RangeFilter(ImageProcessor):
    """
    Adaptive range filter for a co-registered complex SAR image pair.

    Wraps :func:`filter_block` with validated, per-call overridable
    parameters. All parameters are keyword-only.

    Parameters
    ----------
    nl_mean : int
        Odd number of lines averaged for the shift estimate.
    snr_threshold : float
        Minimum peak SNR to trust a line's own shift estimate.
    rsr : float
        Range sampling rate (Hz).
    rbw : float
        Range bandwidth (Hz), not above *rsr* with Hamming weighting.
    alpha_hamming : float
        Hamming coefficient; ``1.0`` selects a rectangular filter.
    ovs_factor : int
        Interferogram range oversampling factor (power of two).
    weight_correlation : bool
        Correct the power spectrum for the triangular estimation bias.

    Examples
    --------
    >>> rf = RangeFilter(nl_mean=15, snr_threshold=5.0, rsr=18.96e6,
    ...                  rbw=15.55e6, alpha_hamming=0.75)
    >>> result = rf.apply(master, slave)      # filters in place
    >>> result.mean_shift_hz, result.percent_not_filtered
    """

    nl_mean: Annotated[
        int, Range(min=1), Desc('Odd number of lines averaged per estimate')
    ] = 15
    snr_threshold: Annotated[
        float, Range(min=0.0), Desc('Minimum peak SNR to accept a shift')
    ] = 5.0
    rsr: Annotated[
        float, Range(min=0.0), Desc('Range sampling rate (Hz)')
    ] = 18.96e6
    rbw: Annotated[
        float, Range(min=0.0), Desc('Range bandwidth (Hz)')
    ] = 15.55e6
    alpha_hamming: Annotated[
        float, Range(min=0.5, max=1.0), Desc('Hamming coefficient (1 = rect)')
    ] = 0.75
    ovs_factor: Annotated[
        int, Range(min=1), Desc('Interferogram range oversampling factor')
    ] = 1
    weight_correlation: Annotated[
        bool, Desc('Correct power spectrum for estimation bias')
    ] = False

    def __post_init__(self) -> None:
        validate_odd(self.nl_mean, 'nl_mean')
        validate_power_of_two(self.ovs_factor, 'ovs_factor')
        hamming = self.weighting is SpectralWeighting.HAMMING
        if hamming and self.rbw > self.rsr:
            raise ValidationError(
                f"rbw ({self.rbw}) must not exceed rsr ({self.rsr}) with "
                f"Hamming weighting"
            )

    @property
    def weighting(self) -> SpectralWeighting:
        """Window shape selected by ``alpha_hamming``."""
        if self.alpha_hamming < HAMMING_ALPHA_LIMIT:
            return SpectralWeighting.HAMMING
        return SpectralWeighting.RECTANGULAR

    def apply(
        self,
        master: np.ndarray,
        slave: np.ndarray,
        **kwargs: Any,
    ) -> RangeFilterResult:
        """Filter *master* and *slave* in place.

        Parameters
        ----------
        master, slave : np.ndarray
            Complex blocks, shape ``(lines, pixels)``.
        **kwargs
            Per-call parameter overrides and an optional
            ``progress_callback``.

        Returns
        -------
        RangeFilterResult
        """
        params = self._resolve_params(kwargs)
        return filter_block(
            master,
            slave,
            nl_mean=params['nl_mean'],
            snr_threshold=params['snr_threshold'],
            rsr=params['rsr'],
            rbw=params['rbw'],
            alpha_hamming=params['alpha_hamming'],
            ovs_factor=params['ovs_factor'],
            weight_correlation=params['weight_correlation'],
            progress_callback=lambda f: self._report_progress(kwargs, f),
        )

    def filter_pair(
        self,
        master: np.ndarray,
        slave: np.ndarray,
        **kwargs: Any,
    ) -> Tuple[np.ndarray, np.ndarray, RangeFilterResult]:
        """Filter copies of *master* and *slave*, leaving the inputs intact.

        Returns
        -------
        master_filtered, slave_filtered : np.ndarray
            Filtered copies.
        result : RangeFilterResult
        """
        master_out = np.array(master, copy=True)
        slave_out = np.array(slave, copy=True)
        result = self.apply(master_out, slave_out, **kwargs)
        return master_out, slave_out, result
