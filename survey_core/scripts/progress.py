import logging
from collections import Counter
from typing import Iterable, List, Mapping

from survey_core.sampling.types import AreaProgress, GeofenceVerdict, Quota
from survey_core.scripts.calc_utils import round_half_up

logger = logging.getLogger("survey_core.scripts.progress")


def count_interviews_by_area(area_ids: Iterable[str]) -> Counter:
    """Tally interview records by the area they were collected in."""
    return Counter(area_ids)


def calculate_area_progress(
    quotas: List[Quota], completed_counts: Mapping[str, int]
) -> List[AreaProgress]:
    """Compare the interviews collected per area with its quota.

    Args:
        quotas: Quota of each area
        completed_counts: Number of completed interviews per area id

    Returns:
        List of AreaProgress in quota order
    """
    progress = []
    for q in quotas:
        completed = int(completed_counts.get(q.id, 0))
        remaining = max(q.quota - completed, 0)
        percentage = (
            round_half_up(min(completed / q.quota, 1.0) * 100, 1)
            if q.quota > 0
            else 100.0
        )
        progress.append(
            AreaProgress(
                area_id=q.id,
                name=q.name,
                quota=q.quota,
                completed=completed,
                remaining=remaining,
                percentage=percentage,
                is_complete=remaining == 0,
            )
        )
    return progress


def can_start_interview(verdict: GeofenceVerdict, progress: AreaProgress) -> bool:
    """An interview may start inside the geofence of an area with quota left."""
    allowed = verdict.is_valid and progress.remaining > 0
    if not allowed:
        logger.debug(
            f"Interview blocked in area '{progress.area_id}': "
            f"inside geofence={verdict.is_valid}, remaining={progress.remaining}"
        )
    return allowed
