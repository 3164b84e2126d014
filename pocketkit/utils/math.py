"""
Numeric helpers and summary statistics.

This module provides small scalar helpers (clamping, interpolation, range
remapping, rounding, angle conversion) and summary statistics over plain
numeric sequences (sum, average, median, sample standard deviation), plus
GCD/LCM.

**Sentinel convention**: statistics that are undefined for their input
(average/median of nothing, standard deviation of fewer than two values)
return ``np.nan`` instead of raising, mirroring how the risk metrics in
most numeric code report "undefined". Check with ``math.isnan``.
"""

import math
import sys
from typing import Iterable, Optional

import numpy as np

from pocketkit.errors import ValidationError


def _all_finite(*values: float) -> bool:
    return all(math.isfinite(v) for v in values)


def clamp(n: float, lower: float, upper: float) -> float:
    """
    Restrict ``n`` to the closed interval spanned by ``lower`` and ``upper``.

    Bounds may be given in either order: clamp(5, 10, 0) == 5.
    """
    low, high = min(lower, upper), max(lower, upper)
    return min(high, max(low, n))


def lerp(start: float, end: float, t: float) -> float:
    """
    Linearly interpolate between ``start`` and ``end``.

    **Mathematical**:
        lerp(a, b, t) = a + (b - a) * clamp(t, 0, 1)

    The factor is clamped, so lerp(0, 10, 1.5) == 10 and lerp(0, 10, -1) == 0.
    """
    factor = clamp(t, 0.0, 1.0)
    return start + (end - start) * factor


def remap(n: float, in_min: float, in_max: float, out_min: float, out_max: float) -> float:
    """
    Map ``n`` from the range [in_min, in_max] onto [out_min, out_max].

    **Functionally**:
    - The result is clamped to the output range (via lerp).
    - Any non-finite argument yields NaN.
    - A degenerate input range (in_min == in_max) yields the midpoint of the
      output range, since every input is equally "in the middle".

    Args:
        n: Value to remap.
        in_min: Lower edge of the source range.
        in_max: Upper edge of the source range.
        out_min: Lower edge of the target range.
        out_max: Upper edge of the target range.

    Returns:
        The remapped value, or NaN for non-finite input.
    """
    if not _all_finite(n, in_min, in_max, out_min, out_max):
        return np.nan

    if in_min == in_max:
        return (out_min + out_max) / 2

    return lerp(out_min, out_max, (n - in_min) / (in_max - in_min))


def round_to(n: float, decimals: int = 0) -> float:
    """
    Round ``n`` to ``decimals`` places, halves rounding up.

    Python's built-in round() uses banker's rounding (round(2.5) == 2); this
    helper rounds halves toward +infinity (round_to(2.5) == 3.0). A machine
    epsilon nudge absorbs representation error such as 1.005 being stored as
    1.00499999...

    Raises:
        ValidationError: If decimals is negative or not an integer.
    """
    if isinstance(decimals, bool) or not isinstance(decimals, int) or decimals < 0:
        raise ValidationError("decimals must be a non-negative integer")
    factor = 10 ** decimals
    return math.floor((n + sys.float_info.epsilon) * factor + 0.5) / factor


def precision_round(number: float, precision: int) -> float:
    """Round halves up to ``precision`` places without validation or epsilon."""
    factor = 10 ** precision
    return math.floor(number * factor + 0.5) / factor


def rand_float(lower: float, upper: float, seed: Optional[int] = None) -> float:
    """
    Draw a uniform float in [lower, upper). Bounds may be reversed.

    Args:
        lower: One edge of the range.
        upper: The other edge.
        seed: Random seed for reproducibility (None for random).

    Returns:
        The sample, or NaN if either bound is not finite.
    """
    low, high = min(lower, upper), max(lower, upper)
    if not _all_finite(low, high):
        return np.nan
    rng = np.random.default_rng(seed)
    return float(rng.random() * (high - low) + low)


def deg_to_rad(degrees: float) -> float:
    """Convert degrees to radians; NaN for non-finite input."""
    if not math.isfinite(degrees):
        return np.nan
    return degrees * (math.pi / 180)


def rad_to_deg(radians: float) -> float:
    """Convert radians to degrees; NaN for non-finite input."""
    if not math.isfinite(radians):
        return np.nan
    return radians * (180 / math.pi)


def normalize_angle(angle: float) -> float:
    """Wrap an angle in radians into [0, 2*pi); NaN for non-finite input."""
    if not math.isfinite(angle):
        return np.nan
    # Python's % already returns a result with the sign of the divisor
    return angle % (2 * math.pi)


def approx_equals(a: float, b: float, epsilon: float = 1e-6) -> bool:
    """
    True when ``a`` and ``b`` differ by strictly less than ``epsilon``.

    Non-finite arguments and a negative epsilon always compare unequal.
    """
    if not _all_finite(a, b, epsilon) or epsilon < 0:
        return False
    return abs(a - b) < epsilon


def fract(n: float) -> float:
    """
    Fractional part of ``n``, keeping its sign.

    fract(3.75) == 0.75, fract(-3.75) == -0.75. NaN for non-finite input.
    """
    if not math.isfinite(n):
        return np.nan
    return n - math.trunc(n)


def sum_of(numbers: Iterable[float]) -> float:
    """Sum of a numeric sequence; 0 for an empty one."""
    return sum(numbers, 0)


def average(numbers: Iterable[float]) -> float:
    """
    Arithmetic mean of ``numbers``.

    **Mathematical**:
        mean = (1 / N) * Σ x_i

    **Edge cases**:
    - Empty input returns np.nan (undefined mean).

    Args:
        numbers: Any iterable of numbers.

    Returns:
        The mean as a float, or np.nan.
    """
    values = list(numbers)
    if not values:
        return np.nan
    return float(np.mean(values))


def median(numbers: Iterable[float]) -> float:
    """
    Middle value of ``numbers``; the mean of the two middle values when the
    count is even. Empty input returns np.nan.
    """
    values = list(numbers)
    if not values:
        return np.nan
    return float(np.median(values))


def std_dev(numbers: Iterable[float]) -> float:
    """
    Sample standard deviation of ``numbers``.

    **Conceptual**: Measures how spread out the values are around their mean.
    The sample form divides by N - 1 (Bessel's correction), which gives an
    unbiased variance estimate when the values are a sample of a larger
    population.

    **Mathematical**:
        σ = sqrt( (1 / (N - 1)) * Σ (x_i - mean)^2 )

    **Edge cases**:
    - Fewer than two values return np.nan (the N - 1 denominator would be 0).
    - Constant values return 0.0.

    Args:
        numbers: Any iterable of numbers.

    Returns:
        Sample standard deviation as a float, or np.nan.
    """
    values = list(numbers)
    if len(values) <= 1:
        return np.nan
    # ddof=1 for the sample (unbiased) estimator
    return float(np.std(values, ddof=1))


def gcd(a: float, b: float) -> float:
    """
    Greatest common divisor by Euclid's algorithm.

    Works on absolute values, so signs are ignored. gcd(0, 0) == 0.
    Unlike math.gcd this also accepts floats with a common decimal step,
    e.g. gcd(1.5, 2.5) == 0.5.
    """
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def lcm(a: float, b: float) -> float:
    """
    Least common multiple, returned as an int when both inputs are ints.

    lcm(x, 0) == 0 for any x.
    """
    divisor = gcd(a, b)
    if divisor == 0:
        return 0
    if isinstance(a, int) and isinstance(b, int):
        return abs(a * b) // divisor
    return abs(a * b) / divisor
