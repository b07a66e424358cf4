"""Tests for field workload classification."""

import pytest

from survey_core.errors import InvalidParameter
from survey_core.sampling.types import WorkloadLevel
from survey_core.scripts.workload import calculate_workload, classify_workload


class TestWorkload:
    def test_rates(self):
        workload = calculate_workload(385, 10, 2)
        assert workload.interviews_per_day == 38.5
        assert workload.interviews_per_researcher == 19.25
        assert workload.level is WorkloadLevel.INTENSE

    @pytest.mark.parametrize(
        "total,level",
        [
            (280, WorkloadLevel.OPTIMAL),  # 14 per researcher per day
            (299, WorkloadLevel.OPTIMAL),  # 14.95
            (300, WorkloadLevel.INTENSE),  # 15
            (500, WorkloadLevel.INTENSE),  # 25
            (502, WorkloadLevel.EXCESSIVE),  # 25.1
            (1000, WorkloadLevel.EXCESSIVE),
        ],
    )
    def test_thresholds(self, total, level):
        assert calculate_workload(total, 10, 2).level is level

    def test_rates_rounded(self):
        workload = calculate_workload(100, 3, 1)
        assert workload.interviews_per_day == 33.33

    def test_advisory_severity(self):
        assert calculate_workload(280, 10, 2).color == "#10B981"
        assert calculate_workload(400, 10, 2).color == "#F59E0B"
        excessive = calculate_workload(1000, 10, 2)
        assert excessive.color == "#EF4444"
        assert excessive.to_dict()["workload_level"] == "excessive"

    @pytest.mark.parametrize("days,researchers", [(0, 2), (-1, 2), (10, 0), (10, -3)])
    def test_invalid_team(self, days, researchers):
        with pytest.raises(InvalidParameter):
            calculate_workload(385, days, researchers)


class TestWorkloadLevel:
    def test_from_string(self):
        assert WorkloadLevel.from_string("Intense") is WorkloadLevel.INTENSE

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            WorkloadLevel.from_string("relaxed")

    def test_classify_boundaries(self):
        assert classify_workload(14.999) is WorkloadLevel.OPTIMAL
        assert classify_workload(25.0) is WorkloadLevel.INTENSE
        assert classify_workload(25.001) is WorkloadLevel.EXCESSIVE
