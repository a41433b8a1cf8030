"""Project risk estimation.

A fixed, auditable scoring rule (not a trained model):

    probability = base
                + duration_weight      if duration > duration_threshold_days
                + requirements_weight  if requirement_count > requirements_threshold
                + developers_weight    if developer_count < min_developers

clamped to [0, 1] and banded into Low / Medium / High.

Inputs are not validated here. Use validate_project_parameters first.
"""

from dataclasses import dataclass

from loguru import logger

from planrisk.estimation.constants import (
    BASE_PROBABILITY,
    DEVELOPERS_WEIGHT,
    DURATION_THRESHOLD_DAYS,
    DURATION_WEIGHT,
    HIGH_RISK_THRESHOLD,
    MEDIUM_RISK_THRESHOLD,
    MIN_DEVELOPERS,
    PROBABILITY_PRECISION,
    REQUIREMENTS_THRESHOLD,
    REQUIREMENTS_WEIGHT,
    RISK_RECOMMENDATIONS,
)
from planrisk.estimation.types import ProjectParameters, RiskAssessment, RiskLevel


@dataclass(frozen=True)
class RiskModel:
    """Constants of the risk rule.

    Attributes:
        base_probability: Starting probability before any threshold triggers
        duration_threshold_days: Durations strictly above this add duration_weight
        duration_weight: Added for long projects
        requirements_threshold: Requirement counts strictly above this add requirements_weight
        requirements_weight: Added for large scopes
        min_developers: Developer counts strictly below this add developers_weight
        developers_weight: Added for understaffed projects
        high_threshold: Probabilities strictly above this are High
        medium_threshold: Probabilities strictly above this (and not High) are Medium
    """

    base_probability: float = BASE_PROBABILITY
    duration_threshold_days: int = DURATION_THRESHOLD_DAYS
    duration_weight: float = DURATION_WEIGHT
    requirements_threshold: int = REQUIREMENTS_THRESHOLD
    requirements_weight: float = REQUIREMENTS_WEIGHT
    min_developers: int = MIN_DEVELOPERS
    developers_weight: float = DEVELOPERS_WEIGHT
    high_threshold: float = HIGH_RISK_THRESHOLD
    medium_threshold: float = MEDIUM_RISK_THRESHOLD


DEFAULT_RISK_MODEL = RiskModel()


def classify_risk(probability: float, model: RiskModel = DEFAULT_RISK_MODEL) -> RiskLevel:
    """Band a probability.

    Both cut-offs are strict: a probability equal to medium_threshold is Low,
    one equal to high_threshold is Medium.
    """
    if probability > model.high_threshold:
        return "High"
    if probability > model.medium_threshold:
        return "Medium"
    return "Low"


def estimate_risk(
    duration: int,
    requirement_count: int,
    developer_count: int,
    model: RiskModel = DEFAULT_RISK_MODEL,
) -> RiskAssessment:
    """Estimate project risk from its sizing inputs.

    Args:
        duration: Estimated duration in days
        requirement_count: Number of initial requirements
        developer_count: Number of developers assigned
        model: Rule constants (defaults to the documented values)

    Returns:
        RiskAssessment with probability, level and recommendation
    """
    probability = model.base_probability

    if duration > model.duration_threshold_days:
        probability += model.duration_weight
    if requirement_count > model.requirements_threshold:
        probability += model.requirements_weight
    if developer_count < model.min_developers:
        probability += model.developers_weight

    # Rounded so float drift (0.1 + 0.3 + 0.3) cannot cross a band boundary
    probability = round(min(max(probability, 0.0), 1.0), PROBABILITY_PRECISION)

    level = classify_risk(probability, model)
    logger.debug(
        f"Risk estimated: duration={duration} requirements={requirement_count} "
        f"developers={developer_count} -> probability={probability} level={level}"
    )
    return RiskAssessment(
        probability=probability,
        level=level,
        recommendation=RISK_RECOMMENDATIONS[level],
    )


def estimate_project_risk(
    parameters: ProjectParameters,
    model: RiskModel = DEFAULT_RISK_MODEL,
) -> RiskAssessment:
    """Estimate risk for a ProjectParameters bundle."""
    return estimate_risk(
        duration=parameters.duration,
        requirement_count=parameters.requirement_count,
        developer_count=parameters.developer_count,
        model=model,
    )
