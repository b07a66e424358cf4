import logging
import math
import numbers

from survey_core.errors import InvalidParameter
from survey_core.sampling.types import ConfidenceInterval
from survey_core.scripts.parameter import z_scores

logger = logging.getLogger("survey_core.scripts.calc_utils")


def is_number(value) -> bool:
    """True for real numbers, excluding booleans."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_positive_integer(value) -> bool:
    return (
        isinstance(value, numbers.Integral)
        and not isinstance(value, bool)
        and value > 0
    )


def get_z_score(confidence_level: int) -> float:
    """Look up the Z-score for a confidence level.

    Only the tabulated levels are supported, there is no interpolation.

    Args:
        confidence_level: Confidence level as percentage (90, 95 or 99)

    Returns:
        Z-score value

    Raises:
        InvalidParameter: If the level is not one of 90, 95 or 99
    """
    if not is_number(confidence_level) or confidence_level not in z_scores:
        raise InvalidParameter(
            f"Confidence level must be one of {sorted(z_scores)}, got {confidence_level}"
        )
    return z_scores[confidence_level]


def round_half_up(value: float, decimals: int = 0) -> float:
    """Round to the given number of decimals with halves rounded up.

    The builtin round() rounds halves to even, which would make quota
    allocation depend on the parity of the raw value.
    """
    factor = 10**decimals
    return math.floor(value * factor + 0.5) / factor


def to_percent(proportion: float) -> float:
    """Convert a proportion (0-1) to a percentage with one decimal."""
    return round_half_up(proportion * 100, 1)


def calculate_confidence_interval(
    observed_proportion: float, sample_size: int, confidence_level: int
) -> ConfidenceInterval:
    """Calculate the Wald confidence interval of an observed proportion.

    Formula:
        SE = sqrt(p x (1 - p) / n)
        MOE = Z x SE

    Bounds are clamped to [0, 1] before conversion to percent.

    Args:
        observed_proportion: Observed proportion (0-1)
        sample_size: Number of responses the proportion was observed on
        confidence_level: Confidence level as percentage (90, 95 or 99)

    Returns:
        ConfidenceInterval with lower, upper and margin_error in percent

    Raises:
        InvalidParameter: If sample_size <= 0 or the proportion is outside [0, 1]
    """
    if sample_size <= 0:
        raise InvalidParameter(f"Sample size must be greater than 0, got {sample_size}")
    if not 0 <= observed_proportion <= 1:
        raise InvalidParameter(
            f"Observed proportion must be between 0 and 1, got {observed_proportion}"
        )
    z = get_z_score(confidence_level)
    p = observed_proportion

    standard_error = math.sqrt(p * (1 - p) / sample_size)
    moe = z * standard_error

    lower = max(0.0, p - moe)
    upper = min(1.0, p + moe)

    return ConfidenceInterval(
        lower=to_percent(lower),
        upper=to_percent(upper),
        margin_error=to_percent(moe),
    )
