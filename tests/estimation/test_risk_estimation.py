"""Tests for the project risk rule.

Covers every threshold, the banding boundaries and the exact sums that
floating-point addition would otherwise drift on.
"""

import pytest

from planrisk.estimation.constants import RISK_RECOMMENDATIONS
from planrisk.estimation.risk import (
    DEFAULT_RISK_MODEL,
    RiskModel,
    classify_risk,
    estimate_project_risk,
    estimate_risk,
)
from planrisk.estimation.types import ProjectParameters


def test_no_threshold_triggered_is_low():
    """Test the base probability for a small, staffed project."""
    assessment = estimate_risk(duration=30, requirement_count=10, developer_count=5)

    assert assessment.probability == 0.1
    assert assessment.level == "Low"
    assert assessment.recommendation == RISK_RECOMMENDATIONS["Low"]
    assert assessment.recommendation.startswith("Low risk")


def test_all_thresholds_triggered_is_exactly_point_nine():
    """Test that all three terms sum to 0.9, not 1.0, and land in High."""
    assessment = estimate_risk(duration=120, requirement_count=45, developer_count=1)

    assert assessment.probability == 0.9
    assert assessment.level == "High"
    assert assessment.recommendation.startswith("High risk")


def test_probability_equal_to_medium_cutoff_is_low():
    """Test that 0.4 exactly falls in Low because the Medium band is strict."""
    assessment = estimate_risk(duration=100, requirement_count=10, developer_count=5)

    assert assessment.probability == 0.4
    assert assessment.level == "Low"


def test_probability_equal_to_high_cutoff_is_medium():
    """Test that 0.7 exactly falls in Medium, despite 0.1 + 0.3 + 0.3 float drift."""
    assessment = estimate_risk(duration=100, requirement_count=40, developer_count=5)

    assert assessment.probability == 0.7
    assert assessment.level == "Medium"
    assert assessment.recommendation.startswith("Medium risk")


@pytest.mark.parametrize(
    ("duration", "requirements", "developers", "expected"),
    [
        (91, 10, 5, 0.4),
        (90, 10, 5, 0.1),
        (30, 31, 5, 0.4),
        (30, 30, 5, 0.1),
        (30, 10, 1, 0.3),
        (30, 10, 2, 0.1),
        (30, 31, 1, 0.6),
        (91, 10, 1, 0.6),
    ],
)
def test_thresholds_are_strict(duration, requirements, developers, expected):
    """Test each threshold triggers only strictly past its boundary."""
    assessment = estimate_risk(duration, requirements, developers)
    assert assessment.probability == expected


def test_understaffed_long_project_is_medium():
    """Test 0.6 is banded Medium."""
    assessment = estimate_risk(duration=100, requirement_count=5, developer_count=1)

    assert assessment.probability == 0.6
    assert assessment.level == "Medium"


def test_probability_is_clamped_to_one():
    """Test that a tuned model cannot exceed 1.0."""
    model = RiskModel(base_probability=0.5, duration_weight=0.4, requirements_weight=0.4)
    assessment = estimate_risk(duration=200, requirement_count=50, developer_count=5, model=model)

    assert assessment.probability == 1.0
    assert assessment.level == "High"


def test_custom_thresholds_are_honoured():
    """Test that thresholds come from the model, not literals."""
    model = RiskModel(duration_threshold_days=30)
    assessment = estimate_risk(duration=45, requirement_count=10, developer_count=5, model=model)

    assert assessment.probability == 0.4


@pytest.mark.parametrize(
    ("probability", "level"),
    [
        (0.0, "Low"),
        (0.4, "Low"),
        (0.41, "Medium"),
        (0.7, "Medium"),
        (0.71, "High"),
        (1.0, "High"),
    ],
)
def test_classify_risk_bands(probability, level):
    """Test banding with strict lower bounds."""
    assert classify_risk(probability) == level


def test_estimate_project_risk_matches_scalar_form():
    """Test the ProjectParameters entry point."""
    parameters = ProjectParameters(duration=100, requirement_count=40, developer_count=1)

    assert estimate_project_risk(parameters) == estimate_risk(100, 40, 1)


def test_estimate_risk_is_idempotent():
    """Test that identical inputs give identical results."""
    first = estimate_risk(95, 35, 1, DEFAULT_RISK_MODEL)
    second = estimate_risk(95, 35, 1, DEFAULT_RISK_MODEL)

    assert first == second
    assert first.probability.hex() == second.probability.hex()
