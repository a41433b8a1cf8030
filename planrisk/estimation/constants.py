"""Estimation constants - single source of truth.

Risk-rule defaults and the phase allocation table live here.
The risk constants are the defaults of RiskModel; Settings may override them.
"""

from planrisk.estimation.types import PhaseName

# Risk rule defaults
BASE_PROBABILITY = 0.10
DURATION_THRESHOLD_DAYS = 90
DURATION_WEIGHT = 0.30
REQUIREMENTS_THRESHOLD = 30
REQUIREMENTS_WEIGHT = 0.30
MIN_DEVELOPERS = 2
DEVELOPERS_WEIGHT = 0.20

# Banding cut-offs (both strict lower bounds)
HIGH_RISK_THRESHOLD = 0.7
MEDIUM_RISK_THRESHOLD = 0.4

# Decimal places kept on the probability after clamping
PROBABILITY_PRECISION = 4

RISK_RECOMMENDATIONS: dict[str, str] = {
    "High": (
        "High risk: the project is very complex. "
        "Split it into phases and assign more resources."
    ),
    "Medium": (
        "Medium risk: monitor the scope closely "
        "and keep communication constant."
    ),
    "Low": (
        "Low risk: parameters are within normal ranges. "
        "The project is viable with the current resources."
    ),
}

# Ordered phase table; percentages sum to 100
PHASE_ALLOCATIONS: tuple[tuple[PhaseName, int], ...] = (
    (PhaseName.PLANNING, 10),
    (PhaseName.DESIGN, 20),
    (PhaseName.DEVELOPMENT, 40),
    (PhaseName.TESTING, 20),
    (PhaseName.DEPLOYMENT, 10),
)

# Longest schedulable project (100 years); keeps every phase date representable
MAX_TOTAL_DURATION = 36_500
