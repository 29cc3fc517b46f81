"""Director risk scoring: aggregates the suppliers a director sits on."""
from typing import Optional

from riskengine.config import Settings, settings as default_settings
from riskengine.exceptions import InvalidStateError
from riskengine.logger import setup_logger
from riskengine.models.profile import DirectorRiskProfile, GeographicRisk
from riskengine.models.scoring_config import RiskScoringConfig
from riskengine.pipeline.index import RelationshipIndex
from riskengine.scoring.base import calculate_base_risk, finalize_score
from riskengine.scoring.multipliers import (
    calculate_concentration_penalty,
    calculate_contract_value_multiplier,
    personal_history_terms,
)

logger = setup_logger(__name__)


def calculate_director_risk(
    director: DirectorRiskProfile,
    index: RelationshipIndex,
    config: RiskScoringConfig,
    settings: Optional[Settings] = None,
) -> int:
    """
    Final 0-100 risk score for a director.

    Starts from the average base risk of the director's suppliers, then adds
    the director's own concentration penalty, amplifies for several high-risk
    suppliers, scales by total contract exposure, adds personal-history terms
    and finally applies the all-high-geography multiplier.
    """
    settings = settings or default_settings
    suppliers = index.suppliers_of(director)
    base_risks = [calculate_base_risk(s.base_risk_factors, config.base_risk_weights) for s in suppliers]

    if base_risks:
        risk_score = sum(base_risks) / len(base_risks)
    elif settings.empty_director_policy == "error":
        raise InvalidStateError(f"Director {director.id} has no associated suppliers")
    else:
        logger.debug(f"Director {director.id} has no associated suppliers, base risk taken as 0")
        risk_score = 0.0

    risk_score += calculate_concentration_penalty(director.board_count, config.concentration_penalties)

    # 15% per additional high-risk supplier by default
    high_risk_count = sum(1 for b in base_risks if b > settings.high_risk_supplier_base_threshold)
    if high_risk_count > 1:
        risk_score *= 1 + (high_risk_count - 1) * settings.high_risk_supplier_amplification

    total_contract_value = sum(s.contract_value_zar for s in suppliers)
    risk_score *= calculate_contract_value_multiplier(total_contract_value, config.network_effects)

    for term in personal_history_terms(director, config.director_risk_factors, settings.experience_cap_years):
        risk_score += term

    regions = {s.geographic_risk for s in suppliers}
    if regions == {GeographicRisk.high}:
        risk_score *= settings.high_geography_director_multiplier

    final_score = finalize_score(risk_score)
    logger.debug(f"Director {director.id}: raw={risk_score:.2f} final={final_score}")
    return final_score
