import logging
from typing import Iterable, List

import pandas as pd

from survey_core.errors import InsufficientData, InvalidParameter
from survey_core.sampling.types import Quota, Stratum
from survey_core.scripts.calc_utils import is_positive_integer, round_half_up
from survey_core.scripts.parameter import min_quota_per_stratum

logger = logging.getLogger("survey_core.scripts.stratified")


def _strata_frame(strata: Iterable[Stratum]) -> pd.DataFrame:
    strata = list(strata)
    invalid = [str(s.name) for s in strata if not is_positive_integer(s.population)]
    if invalid:
        names = ", ".join(invalid)
        raise InvalidParameter(f"Stratum population must be a positive integer: {names}")

    area_df = pd.DataFrame(
        [{"id": s.id, "name": s.name, "population": s.population} for s in strata],
        columns=["id", "name", "population"],
    )
    if area_df.empty:
        raise InsufficientData("At least one stratum is required")

    return area_df


def allocate_samples_proportional(area_df: pd.DataFrame, total_samples: int) -> pd.Series:
    """Allocate samples proportionally to stratum populations.

    Formula: n_j = N x (Pop_j / Total_Pop)

    Args:
        area_df: DataFrame with a population column
        total_samples: Total number of samples to allocate

    Returns:
        Series with the raw (unrounded) allocation per stratum
    """
    total_population = area_df["population"].sum()
    if total_population == 0:
        raise InsufficientData("Total population is zero")

    return total_samples * area_df["population"] / total_population


def calculate_stratified_quotas(total_sample: int, strata: List[Stratum]) -> List[Quota]:
    """Split a sample into integer quotas proportional to stratum populations.

    Each raw quota is rounded half-up. The difference between the total and
    the sum of rounded quotas is added to the largest quota (the first one
    on ties) so that the quotas always sum to total_sample.

    Quotas under 30 interviews are flagged invalid with a warning but are
    left as allocated.

    Args:
        total_sample: Total number of interviews to allocate
        strata: Areas with their populations

    Returns:
        List of Quota in the order of the strata

    Raises:
        InsufficientData: If there are no strata or the total population is zero
        InvalidParameter: If total_sample is negative or a population is not positive
    """
    if total_sample < 0:
        raise InvalidParameter(f"Total sample must not be negative, got {total_sample}")

    strata = list(strata)
    area_df = _strata_frame(strata)
    total_population = area_df["population"].sum()

    raw = allocate_samples_proportional(area_df, total_sample)
    rounded = [int(round_half_up(value)) for value in raw]

    difference = total_sample - sum(rounded)
    if difference != 0:
        largest = rounded.index(max(rounded))
        if rounded[largest] + difference >= 0:
            rounded[largest] += difference
            logger.debug(
                f"Rounding difference {difference:+d} assigned to stratum "
                f"'{strata[largest].name}'"
            )
        else:
            # Only reachable for tiny samples over many tied strata
            for _ in range(-difference):
                i = rounded.index(max(rounded))
                rounded[i] -= 1
                logger.debug(
                    f"Rounding difference -1 taken from stratum '{strata[i].name}'"
                )

    quotas = []
    for stratum, quota in zip(strata, rounded):
        is_valid = quota >= min_quota_per_stratum
        warning = None
        if not is_valid:
            warning = (
                f"Area '{stratum.name}' has a quota of {quota} interviews, "
                f"below the minimum of {min_quota_per_stratum} for reliable estimates"
            )
            logger.warning(warning)

        quotas.append(
            Quota(
                stratum=stratum,
                quota=quota,
                percentage_of_population=round_half_up(
                    stratum.population / total_population * 100, 2
                ),
                is_valid=is_valid,
                warning=warning,
            )
        )

    return quotas


def calculate_quota_summary(quotas: List[Quota]) -> pd.DataFrame:
    """Tabulate quotas for reporting.

    Returns:
        DataFrame with one row per stratum (id, name, population, quota,
        percentage, is_valid, warning) and the quota share of the sample
    """
    summary_df = pd.DataFrame(
        [q.to_dict() for q in quotas],
        columns=["id", "name", "population", "quota", "percentage", "is_valid", "warning"],
    )
    total = summary_df["quota"].sum()
    summary_df["sample_share"] = (
        summary_df["quota"] / total * 100 if total > 0 else 0.0
    )
    return summary_df
