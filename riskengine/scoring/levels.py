"""Risk level classification from a 0-100 score."""
from riskengine.models.risk import RiskLevel

CRITICAL_RISK_THRESHOLD = 75
HIGH_RISK_THRESHOLD = 50
MEDIUM_RISK_THRESHOLD = 25


def get_risk_level(score: float) -> RiskLevel:
    if score >= CRITICAL_RISK_THRESHOLD:
        return RiskLevel.critical
    elif score >= HIGH_RISK_THRESHOLD:
        return RiskLevel.high
    elif score >= MEDIUM_RISK_THRESHOLD:
        return RiskLevel.medium
    return RiskLevel.low
