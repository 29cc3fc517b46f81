"""Lookup and threshold functions that scale or shift a risk score."""
from riskengine.models.profile import DirectorRiskProfile, GeographicRisk
from riskengine.models.scoring_config import (
    ConcentrationPenalties,
    DirectorRiskFactors,
    NetworkEffects,
    TierValues,
)


def calculate_concentration_penalty(board_count: int, penalties: ConcentrationPenalties) -> float:
    """Additive penalty for a director sitting on several boards."""
    if board_count >= 4:
        return penalties.four_plus_boards
    if board_count == 3:
        return penalties.three_boards
    if board_count == 2:
        return penalties.two_boards
    return 0


def calculate_contract_value_multiplier(contract_value: float, network_effects: NetworkEffects) -> float:
    """
    Exposure multiplier for a contract value in ZAR.
    A value equal to a cutoff stays in the lower tier.
    """
    cutoffs = network_effects.contract_value_thresholds
    multipliers = network_effects.contract_value_multipliers

    if contract_value > cutoffs.high:
        return multipliers.high
    if contract_value > cutoffs.medium:
        return multipliers.medium
    return multipliers.low


def calculate_geographic_multiplier(geographic_risk: GeographicRisk, multipliers: TierValues) -> float:
    return getattr(multipliers, GeographicRisk(geographic_risk).value)


def personal_history_terms(
    director: DirectorRiskProfile,
    factors: DirectorRiskFactors,
    experience_cap_years: float,
) -> list[float]:
    """
    Additive terms for a director's own record, in application order:
    adverse media (only when flagged), compliance history, experience bonus.
    """
    terms = []
    if director.has_adverse_media:
        terms.append(factors.adverse_media_penalty)
    terms.append(getattr(factors.compliance_history_penalties, director.compliance_history.value))
    experience_years = min(director.years_experience, experience_cap_years)
    terms.append(experience_years * factors.experience_bonus)
    return terms
