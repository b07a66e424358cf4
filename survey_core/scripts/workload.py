import logging

from survey_core.errors import InvalidParameter
from survey_core.sampling.types import WorkloadAssessment, WorkloadLevel
from survey_core.scripts.calc_utils import round_half_up
from survey_core.scripts.parameter import (
    workload_intense_limit,
    workload_optimal_limit,
)

logger = logging.getLogger("survey_core.scripts.workload")


def classify_workload(interviews_per_researcher: float) -> WorkloadLevel:
    """Classify the daily interviews per researcher.

    Below 15 is optimal, 15 to 25 inclusive is intense, above 25 excessive.
    """
    if interviews_per_researcher < workload_optimal_limit:
        return WorkloadLevel.OPTIMAL
    if interviews_per_researcher <= workload_intense_limit:
        return WorkloadLevel.INTENSE
    return WorkloadLevel.EXCESSIVE


def calculate_workload(
    total_sample: int, field_days: int, researcher_count: int
) -> WorkloadAssessment:
    """Assess the field workload of a survey.

    Args:
        total_sample: Total number of interviews
        field_days: Number of days of field collection
        researcher_count: Number of researchers in the field

    Returns:
        WorkloadAssessment with rates rounded to 2 decimals

    Raises:
        InvalidParameter: If field_days or researcher_count is not positive
    """
    if field_days <= 0:
        raise InvalidParameter(f"Field days must be greater than 0, got {field_days}")
    if researcher_count <= 0:
        raise InvalidParameter(
            f"Researcher count must be greater than 0, got {researcher_count}"
        )

    per_day = total_sample / field_days
    per_researcher = per_day / researcher_count
    level = classify_workload(per_researcher)

    if level is WorkloadLevel.EXCESSIVE:
        logger.warning(
            f"{per_researcher:.1f} interviews per researcher per day: {level.message}"
        )

    return WorkloadAssessment(
        interviews_per_day=round_half_up(per_day, 2),
        interviews_per_researcher=round_half_up(per_researcher, 2),
        level=level,
    )
