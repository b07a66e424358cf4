import pytest

from survey_core.sampling.types import GeoPoint, Stratum


@pytest.fixture
def strata():
    """Three areas of a city with 10000 inhabitants."""
    return [
        Stratum(id="north", name="North", population=4000),
        Stratum(id="center", name="Center", population=3000),
        Stratum(id="south", name="South", population=3000),
    ]


@pytest.fixture
def area_center():
    return GeoPoint(lat=-23.55052, lng=-46.633308)
