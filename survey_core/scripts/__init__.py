"""Survey Core Scripts Package.

Contains the sampling and geofence calculation functions.
"""

from .calc_utils import (
    calculate_confidence_interval,
    get_z_score,
)
from .geospatial import (
    calculate_coverage_area,
    calculate_haversine_distance,
    calculate_haversine_distances,
    format_coordinates,
    validate_coordinates,
    validate_geofence,
)
from .progress import (
    calculate_area_progress,
    can_start_interview,
    count_interviews_by_area,
)
from .results import (
    analyze_question_results,
    extract_question_responses,
    results_to_frame,
    summarize_question,
)
from .simple_random import (
    apply_finite_population_correction,
    calculate_base_sample,
    calculate_sample_size,
)
from .stratified import (
    calculate_quota_summary,
    calculate_stratified_quotas,
)
from .workload import calculate_workload

__all__ = [
    # Sampling
    "get_z_score",
    "calculate_base_sample",
    "apply_finite_population_correction",
    "calculate_sample_size",
    "calculate_stratified_quotas",
    "calculate_quota_summary",
    "calculate_workload",
    # Results
    "calculate_confidence_interval",
    "analyze_question_results",
    "extract_question_responses",
    "summarize_question",
    "results_to_frame",
    # Field collection
    "calculate_area_progress",
    "can_start_interview",
    "count_interviews_by_area",
    # Geofence
    "validate_coordinates",
    "calculate_haversine_distance",
    "calculate_haversine_distances",
    "validate_geofence",
    "calculate_coverage_area",
    "format_coordinates",
]
