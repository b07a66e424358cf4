"""Exceptions raised by the survey computations.

All of them derive from ValueError so callers that already guard numeric
input with ``except ValueError`` keep working.
"""


class SurveyCoreError(ValueError):
    """Base class for survey computation errors."""


class InvalidParameter(SurveyCoreError):
    """An input is outside its allowed range."""


class InsufficientData(SurveyCoreError):
    """There is not enough data to compute a result (e.g. no strata)."""
