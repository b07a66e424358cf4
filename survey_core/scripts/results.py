"""Statistics of observed survey answers.

Confidence intervals are computed on the number of responses actually
collected, not on the planned sample size.
"""

import logging
from typing import Any, Iterable, List, Mapping, Sequence

import pandas as pd

from survey_core.sampling.types import ConfidenceInterval, OptionResult, QuestionResult
from survey_core.scripts.calc_utils import (
    calculate_confidence_interval,
    get_z_score,
    to_percent,
)

logger = logging.getLogger("survey_core.scripts.results")

_EMPTY_INTERVAL = ConfidenceInterval(lower=0.0, upper=0.0, margin_error=0.0)


def count_responses(responses: Sequence[str], options: Sequence[str]) -> pd.Series:
    """Count exact matches of each option among the responses.

    Returns:
        Series indexed by option, in option order, with 0 for unanswered options
    """
    counts = pd.Series(list(responses), dtype=object).value_counts()
    return counts.reindex(list(options), fill_value=0).astype(int)


def analyze_question_results(
    responses: Sequence[str], options: Sequence[str], confidence_level: int
) -> List[OptionResult]:
    """Calculate count, percentage and confidence interval per answer option.

    With no responses every option reports zero and a zero-width interval.
    Responses that match no option still count toward the total.

    Args:
        responses: One answer string per interview
        options: The answer options defined for the question
        confidence_level: Confidence level as percentage (90, 95 or 99)

    Returns:
        List of OptionResult in option order
    """
    get_z_score(confidence_level)

    total = len(responses)
    counts = count_responses(responses, options)

    results = []
    for i, option in enumerate(options):
        count = int(counts.iloc[i])
        if total == 0:
            results.append(OptionResult(option, 0, 0.0, _EMPTY_INTERVAL))
            continue

        proportion = count / total
        results.append(
            OptionResult(
                option=option,
                count=count,
                percentage=to_percent(proportion),
                confidence_interval=calculate_confidence_interval(
                    proportion, total, confidence_level
                ),
            )
        )

    logger.debug(f"Analyzed {total} responses over {len(options)} options")
    return results


def extract_question_responses(
    interview_responses: Iterable[Mapping[str, Any]], question_id: str
) -> List[str]:
    """Collect the answers given to one question, skipping interviews without one."""
    answers = []
    for responses in interview_responses:
        answer = responses.get(question_id)
        if answer is None or answer == "":
            continue
        answers.append(str(answer))
    return answers


def summarize_question(
    question_id: str,
    question_text: str,
    responses: Sequence[str],
    options: Sequence[str],
    confidence_level: int,
) -> QuestionResult:
    return QuestionResult(
        question_id=question_id,
        question_text=question_text,
        total_responses=len(responses),
        results=analyze_question_results(responses, options, confidence_level),
    )


def results_to_frame(question: QuestionResult) -> pd.DataFrame:
    """Flatten a question summary into one row per option for export."""
    return pd.DataFrame(
        [
            {
                "question_id": question.question_id,
                "option": r.option,
                "count": r.count,
                "percentage": r.percentage,
                "ci_lower": r.confidence_interval.lower,
                "ci_upper": r.confidence_interval.upper,
                "margin_error": r.confidence_interval.margin_error,
            }
            for r in question.results
        ],
        columns=[
            "question_id",
            "option",
            "count",
            "percentage",
            "ci_lower",
            "ci_upper",
            "margin_error",
        ],
    )
