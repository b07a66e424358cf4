"""Survey design module.

Value types exchanged with the calling application and the service that
composes the sampling computations.

Usage:
    from survey_core.sampling import SurveyDesignInputs, SurveyDesignService

    results = SurveyDesignService.calculate(SurveyDesignInputs(margin_error=5.0))
    if results.success:
        print(results.total_samples)
"""

from survey_core.sampling.service import SurveyDesignService
from survey_core.sampling.types import (
    SurveyDesignInputs,
    SurveyDesignResults,
)

__all__ = [
    "SurveyDesignInputs",
    "SurveyDesignResults",
    "SurveyDesignService",
]
