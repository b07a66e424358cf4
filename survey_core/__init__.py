"""Statistical sampling and geofence validation for field surveys.

The package logs under the ``survey_core`` logger and installs no handlers
of its own. Applications call ``setup_logging()`` once at startup to load
the TOML logging configuration named by ``SURVEY_CORE_LOG_CFG``.
"""

from survey_core.errors import InsufficientData, InvalidParameter, SurveyCoreError
from survey_core.logger import setup_logging
from survey_core.sampling import (
    SurveyDesignInputs,
    SurveyDesignResults,
    SurveyDesignService,
)
from survey_core.sampling.types import (
    ConfidenceInterval,
    GeofenceVerdict,
    GeoPoint,
    Quota,
    SampleParameters,
    SampleResult,
    Stratum,
    WorkloadAssessment,
    WorkloadLevel,
)
from survey_core.scripts import *  # noqa: F401,F403
from survey_core.scripts import __all__ as _scripts_all

__version__ = "0.1.0"

__all__ = [
    "setup_logging",
    "SurveyCoreError",
    "InvalidParameter",
    "InsufficientData",
    "SurveyDesignInputs",
    "SurveyDesignResults",
    "SurveyDesignService",
    "ConfidenceInterval",
    "GeofenceVerdict",
    "GeoPoint",
    "Quota",
    "SampleParameters",
    "SampleResult",
    "Stratum",
    "WorkloadAssessment",
    "WorkloadLevel",
] + list(_scripts_all)
