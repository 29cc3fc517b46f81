"""Base risk: weighted blend of the five risk factors."""
import math

from riskengine.models.profile import RiskFactors
from riskengine.models.scoring_config import BaseRiskWeights


def calculate_base_risk(factors: RiskFactors, weights: BaseRiskWeights) -> float:
    """Weighted sum of the risk factors. Not clamped."""
    return (
        factors.operational * weights.operational +
        factors.financial * weights.financial +
        factors.compliance * weights.compliance +
        factors.reputational * weights.reputational +
        factors.contractual * weights.contractual
    )


def finalize_score(raw_score: float) -> int:
    """Clamp to 0-100 and round half up (30.5 -> 31)."""
    return max(0, min(100, math.floor(raw_score + 0.5)))
