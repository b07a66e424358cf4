"""Type definitions for the survey computations.

Contains the data classes exchanged between the calling application and the
calculation functions. They are plain value objects: the core never persists
them, the caller stores whatever it needs in its own survey records.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class WorkloadLevel(Enum):
    """Severity of the daily interview load per researcher."""

    OPTIMAL = "optimal"
    INTENSE = "intense"
    EXCESSIVE = "excessive"

    @classmethod
    def from_string(cls, value: str) -> "WorkloadLevel":
        """Convert string to WorkloadLevel enum."""
        for level in cls:
            if level.value == value.lower():
                return level
        raise ValueError(f"Unknown workload level: {value}")

    @property
    def color(self) -> str:
        """Canonical advisory colour for this severity."""
        return _WORKLOAD_COLORS[self]

    @property
    def message(self) -> str:
        return _WORKLOAD_MESSAGES[self]


_WORKLOAD_COLORS = {
    WorkloadLevel.OPTIMAL: "#10B981",
    WorkloadLevel.INTENSE: "#F59E0B",
    WorkloadLevel.EXCESSIVE: "#EF4444",
}

_WORKLOAD_MESSAGES = {
    WorkloadLevel.OPTIMAL: "Optimal workload",
    WorkloadLevel.INTENSE: "Intense but feasible workload",
    WorkloadLevel.EXCESSIVE: "Excessive workload, quota may not be met",
}


@dataclass(frozen=True)
class SampleParameters:
    """Statistical parameters an administrator sets for a survey."""

    confidence_level: int = 95  # 90, 95 or 99
    margin_error: float = 5.0  # As percentage (e.g., 5.0 for 5%)
    expected_proportion: float = 0.5  # As fraction (0.01-0.99)
    population_size: Optional[int] = None


@dataclass(frozen=True)
class SampleResult:
    """Required sample size for a survey."""

    base_sample: int
    final_sample: int
    z_score: float
    correction_applied: bool
    correction_factor: float = 1.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "base_sample": self.base_sample,
            "final_sample": self.final_sample,
            "z_score": self.z_score,
            "population_correction_applied": self.correction_applied,
            "correction_factor": self.correction_factor,
        }


@dataclass(frozen=True)
class Stratum:
    """A geographic area of the survey with its population."""

    id: str
    name: str
    population: int


@dataclass(frozen=True)
class Quota:
    """Interview quota allocated to a single stratum."""

    stratum: Stratum
    quota: int
    percentage_of_population: float  # 0-100
    is_valid: bool
    warning: Optional[str] = None

    @property
    def id(self) -> str:
        return self.stratum.id

    @property
    def name(self) -> str:
        return self.stratum.name

    @property
    def population(self) -> int:
        return self.stratum.population

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "population": self.population,
            "quota": self.quota,
            "percentage": self.percentage_of_population,
            "is_valid": self.is_valid,
            "warning": self.warning,
        }


@dataclass(frozen=True)
class WorkloadAssessment:
    """Field workload derived from the sample size and team size."""

    interviews_per_day: float
    interviews_per_researcher: float
    level: WorkloadLevel

    @property
    def color(self) -> str:
        return self.level.color

    @property
    def message(self) -> str:
        return self.level.message

    def to_dict(self) -> Dict[str, Any]:
        return {
            "interviews_per_day": self.interviews_per_day,
            "interviews_per_researcher": self.interviews_per_researcher,
            "workload_level": self.level.value,
            "color": self.color,
            "message": self.message,
        }


@dataclass(frozen=True)
class ConfidenceInterval:
    """Confidence interval of a proportion, in percent with one decimal."""

    lower: float
    upper: float
    margin_error: float

    def to_dict(self) -> Dict[str, float]:
        return {
            "lower": self.lower,
            "upper": self.upper,
            "margin_error": self.margin_error,
        }


@dataclass(frozen=True)
class OptionResult:
    """Observed frequency of one answer option."""

    option: str
    count: int
    percentage: float
    confidence_interval: ConfidenceInterval

    def to_dict(self) -> Dict[str, Any]:
        return {
            "option": self.option,
            "count": self.count,
            "percentage": self.percentage,
            "confidence_interval": self.confidence_interval.to_dict(),
        }


@dataclass(frozen=True)
class QuestionResult:
    """Per-option statistics of a multiple choice question."""

    question_id: str
    question_text: str
    total_responses: int
    results: List[OptionResult] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "question_id": self.question_id,
            "question_text": self.question_text,
            "total_responses": self.total_responses,
            "results": [r.to_dict() for r in self.results],
        }


@dataclass(frozen=True)
class GeoPoint:
    """A WGS84 position, optionally with the fix accuracy in meters."""

    lat: float
    lng: float
    accuracy: Optional[float] = None
    timestamp: Optional[float] = None


@dataclass(frozen=True)
class CoordinateValidation:
    """Outcome of a coordinate range check."""

    is_valid: bool
    errors: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class GeofenceVerdict:
    """Whether a location lies within the collection radius of an area."""

    is_valid: bool
    distance_from_center: float  # meters, 2 decimals
    max_allowed_distance: float  # meters
    current_location: Optional[GeoPoint] = None
    area_center: Optional[GeoPoint] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "distance_from_center": self.distance_from_center,
            "max_allowed_distance": self.max_allowed_distance,
        }


@dataclass(frozen=True)
class BoundingBox:
    """Latitude/longitude extent around a point, in degrees."""

    north: float
    south: float
    east: float
    west: float


@dataclass(frozen=True)
class AreaProgress:
    """Interview collection progress of one area against its quota."""

    area_id: str
    name: str
    quota: int
    completed: int
    remaining: int
    percentage: float
    is_complete: bool


@dataclass
class SurveyDesignInputs:
    """Input parameters for a complete survey design.

    Workload is only assessed when both field_days and researcher_count
    are given; quotas only when strata are given.
    """

    confidence_level: int = 95
    margin_error: float = 5.0  # As percentage
    expected_proportion: float = 0.5
    population_size: Optional[int] = None
    strata: List[Stratum] = field(default_factory=list)
    field_days: Optional[int] = None
    researcher_count: Optional[int] = None

    @property
    def parameters(self) -> SampleParameters:
        return SampleParameters(
            confidence_level=self.confidence_level,
            margin_error=self.margin_error,
            expected_proportion=self.expected_proportion,
            population_size=self.population_size,
        )


@dataclass
class SurveyDesignResults:
    """Results of a survey design calculation.

    Some fields may be None depending on the inputs provided.
    """

    success: bool = True
    error_message: Optional[str] = None

    sample: Optional[SampleResult] = None
    quotas: List[Quota] = field(default_factory=list)
    workload: Optional[WorkloadAssessment] = None

    @property
    def total_samples(self) -> int:
        return self.sample.final_sample if self.sample else 0

    @property
    def warnings(self) -> List[str]:
        return [q.warning for q in self.quotas if q.warning]

    def to_dict(self) -> Dict[str, Any]:
        """Convert results to a plain dictionary for storage in a survey record."""
        return {
            "success": self.success,
            "error_message": self.error_message,
            "sample": self.sample.to_dict() if self.sample else None,
            "quotas": [q.to_dict() for q in self.quotas],
            "workload": self.workload.to_dict() if self.workload else None,
        }

    @classmethod
    def error(cls, message: str) -> "SurveyDesignResults":
        """Create an error result."""
        return cls(success=False, error_message=message)
