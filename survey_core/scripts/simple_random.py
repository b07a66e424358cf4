import logging
import math
from typing import Optional, Tuple

from survey_core.errors import InvalidParameter
from survey_core.sampling.types import SampleResult
from survey_core.scripts.calc_utils import get_z_score, is_number, is_positive_integer
from survey_core.scripts.parameter import (
    expected_proportion_range,
    fpc_max_population,
    fpc_min_population,
    margin_error_range,
)

logger = logging.getLogger("survey_core.scripts.simple_random")


def _validate_sample_parameters(margin_error: float, expected_proportion: float) -> None:
    low, high = margin_error_range
    if not is_number(margin_error) or not low <= margin_error <= high:
        raise InvalidParameter(
            f"Margin of error must be between {low:g}% and {high:g}%, got {margin_error}"
        )
    low, high = expected_proportion_range
    if not is_number(expected_proportion) or not low <= expected_proportion <= high:
        raise InvalidParameter(
            f"Expected proportion must be between {low} and {high}, got {expected_proportion}"
        )


def _validate_population_size(population_size) -> None:
    if not is_positive_integer(population_size):
        raise InvalidParameter(
            f"Population size must be a positive integer, got {population_size}"
        )


def calculate_base_sample(
    confidence_level: int, margin_error: float, expected_proportion: float = 0.5
) -> Tuple[int, float]:
    """Calculate sample size for an infinite population.

    Based on Cochran's formula for estimating a population proportion.

    Formula: n = (Z² x p x (1 - p)) / e²

    Where:
        - Z = z-score for the desired confidence level
        - p = expected proportion
        - e = margin of error as decimal (margin_error / 100)

    Args:
        confidence_level: Confidence level as percentage (90, 95 or 99)
        margin_error: Margin of error as percentage (1-10)
        expected_proportion: Expected proportion (0.01-0.99)

    Returns:
        Tuple of (base_sample rounded up, z_score)

    Raises:
        InvalidParameter: If any parameter is outside its allowed range
    """
    _validate_sample_parameters(margin_error, expected_proportion)
    z_score = get_z_score(confidence_level)

    e = margin_error / 100
    p = expected_proportion
    numerator = z_score**2 * p * (1 - p)
    denominator = e**2

    base_sample = math.ceil(numerator / denominator)
    logger.debug(
        f"Base sample for {confidence_level}% / ±{margin_error}% / p={p}: {base_sample}"
    )
    return base_sample, z_score


def apply_finite_population_correction(
    base_sample: int, population_size: int
) -> Tuple[int, float, bool]:
    """Shrink a sample size for a small, fully enumerable population.

    Formula: n_final = n_base / (1 + (n_base - 1) / N)

    The correction is only applied when N <= 10000; larger populations are
    treated as infinite and the base sample is returned unchanged.

    Args:
        base_sample: Sample size for an infinite population
        population_size: Size of the target population

    Returns:
        Tuple of (final_sample rounded up, correction_factor, applied)

    Raises:
        InvalidParameter: If base_sample < 1 or population_size is not positive
    """
    if base_sample < 1:
        raise InvalidParameter(f"Base sample must be at least 1, got {base_sample}")
    _validate_population_size(population_size)

    if population_size > fpc_max_population:
        return base_sample, 1.0, False

    correction_factor = 1 + (base_sample - 1) / population_size
    final_sample = math.ceil(base_sample / correction_factor)
    return final_sample, correction_factor, True


def calculate_sample_size(
    confidence_level: int,
    margin_error: float,
    expected_proportion: float = 0.5,
    population_size: Optional[int] = None,
) -> SampleResult:
    """Calculate the final sample size of a survey.

    Populations of 10 or fewer are treated as if no population size was
    given, so no correction is applied to them.

    Args:
        confidence_level: Confidence level as percentage (90, 95 or 99)
        margin_error: Margin of error as percentage (1-10)
        expected_proportion: Expected proportion (0.01-0.99)
        population_size: Optional size of the target population

    Returns:
        SampleResult

    Raises:
        InvalidParameter: If any parameter is outside its allowed range
    """
    if population_size is not None:
        _validate_population_size(population_size)

    base_sample, z_score = calculate_base_sample(
        confidence_level, margin_error, expected_proportion
    )

    final_sample = base_sample
    correction_factor = 1.0
    applied = False

    if population_size is not None and population_size > fpc_min_population:
        final_sample, correction_factor, applied = apply_finite_population_correction(
            base_sample, population_size
        )

    if applied:
        logger.debug(
            f"Finite population correction for N={population_size}: "
            f"{base_sample} -> {final_sample}"
        )

    return SampleResult(
        base_sample=base_sample,
        final_sample=final_sample,
        z_score=z_score,
        correction_applied=applied,
        correction_factor=correction_factor,
    )
