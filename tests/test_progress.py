"""Tests for per-area collection progress and interview gating."""

import pytest

from survey_core.sampling.types import AreaProgress, GeofenceVerdict
from survey_core.scripts.progress import (
    calculate_area_progress,
    can_start_interview,
    count_interviews_by_area,
)
from survey_core.scripts.stratified import calculate_stratified_quotas


@pytest.fixture
def quotas(strata):
    return calculate_stratified_quotas(359, strata)


def _verdict(is_valid):
    return GeofenceVerdict(
        is_valid=is_valid, distance_from_center=10.0, max_allowed_distance=100
    )


class TestAreaProgress:
    def test_progress(self, quotas):
        counts = count_interviews_by_area(["north"] * 43 + ["south"] * 108 + ["center"])
        progress = calculate_area_progress(quotas, counts)

        north, center, south = progress
        assert (north.completed, north.remaining, north.percentage) == (43, 100, 30.1)
        assert north.is_complete is False
        assert (center.completed, center.remaining) == (1, 107)
        assert south.remaining == 0
        assert south.percentage == 100.0
        assert south.is_complete is True

    def test_area_without_interviews(self, quotas):
        progress = calculate_area_progress(quotas, {})
        assert [p.completed for p in progress] == [0, 0, 0]
        assert [p.remaining for p in progress] == [143, 108, 108]

    def test_over_collected_area_clamped(self, quotas):
        progress = calculate_area_progress(quotas, {"north": 150})
        assert progress[0].remaining == 0
        assert progress[0].percentage == 100.0


class TestCanStartInterview:
    @pytest.fixture
    def open_area(self):
        return AreaProgress("north", "North", 10, 3, 7, 30.0, False)

    @pytest.fixture
    def full_area(self):
        return AreaProgress("north", "North", 10, 10, 0, 100.0, True)

    def test_inside_with_quota_left(self, open_area):
        assert can_start_interview(_verdict(True), open_area) is True

    def test_outside_geofence(self, open_area):
        assert can_start_interview(_verdict(False), open_area) is False

    def test_quota_reached(self, full_area):
        assert can_start_interview(_verdict(True), full_area) is False
