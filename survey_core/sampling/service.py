"""Survey design service.

Entry point for the administrator's calculator flow: one call turns the
survey parameters into a sample size, the quota table and the workload
assessment the caller stores in its survey record.
"""

import logging
from typing import List

from survey_core.errors import SurveyCoreError
from survey_core.sampling.types import SurveyDesignInputs, SurveyDesignResults
from survey_core.scripts.calc_utils import get_z_score, is_number, is_positive_integer
from survey_core.scripts.parameter import expected_proportion_range, margin_error_range
from survey_core.scripts.simple_random import calculate_sample_size
from survey_core.scripts.stratified import calculate_stratified_quotas
from survey_core.scripts.workload import calculate_workload

logger = logging.getLogger("survey_core.sampling.service")


class SurveyDesignService:
    """High-level service composing the sampling computations."""

    @staticmethod
    def validate_inputs(inputs: SurveyDesignInputs) -> List[str]:
        """Validate survey design inputs.

        Returns:
            List of validation error messages, empty when the inputs are valid
        """
        errors = []

        try:
            get_z_score(inputs.confidence_level)
        except SurveyCoreError as e:
            errors.append(str(e))

        low, high = margin_error_range
        if not is_number(inputs.margin_error) or not low <= inputs.margin_error <= high:
            errors.append(f"Margin of error must be between {low:g}% and {high:g}%")

        low, high = expected_proportion_range
        if not (
            is_number(inputs.expected_proportion)
            and low <= inputs.expected_proportion <= high
        ):
            errors.append(f"Expected proportion must be between {low} and {high}")

        if inputs.population_size is not None and not is_positive_integer(
            inputs.population_size
        ):
            errors.append("Population size must be a positive integer")

        if inputs.field_days is not None and not (
            is_number(inputs.field_days) and inputs.field_days > 0
        ):
            errors.append("Field days must be greater than 0")

        if inputs.researcher_count is not None and not (
            is_number(inputs.researcher_count) and inputs.researcher_count > 0
        ):
            errors.append("Researcher count must be greater than 0")

        for stratum in inputs.strata:
            if not is_positive_integer(stratum.population):
                errors.append(
                    f"Area '{stratum.name}' must have a positive integer population"
                )

        return errors

    @staticmethod
    def is_ready(inputs: SurveyDesignInputs) -> bool:
        return not SurveyDesignService.validate_inputs(inputs)

    @staticmethod
    def calculate(inputs: SurveyDesignInputs) -> SurveyDesignResults:
        """Calculate the survey design.

        Errors are returned as an error result instead of being raised.

        Args:
            inputs: Survey design inputs

        Returns:
            SurveyDesignResults
        """
        errors = SurveyDesignService.validate_inputs(inputs)
        if errors:
            return SurveyDesignResults.error("; ".join(errors))

        try:
            sample = calculate_sample_size(
                confidence_level=inputs.confidence_level,
                margin_error=inputs.margin_error,
                expected_proportion=inputs.expected_proportion,
                population_size=inputs.population_size,
            )

            quotas = []
            if inputs.strata:
                quotas = calculate_stratified_quotas(sample.final_sample, inputs.strata)

            workload = None
            if inputs.field_days is not None and inputs.researcher_count is not None:
                workload = calculate_workload(
                    sample.final_sample, inputs.field_days, inputs.researcher_count
                )

        except SurveyCoreError as e:
            logger.error(f"Error in survey design calculation: {e}")
            return SurveyDesignResults.error(str(e))

        logger.info(
            f"Survey design: {sample.final_sample} interviews over {len(quotas)} areas"
        )
        return SurveyDesignResults(sample=sample, quotas=quotas, workload=workload)
