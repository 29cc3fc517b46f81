"""
Supplier risk scoring.

Order of operations (multiplications and additions do not commute here):
1. base risk from the five factors
2. x geographic multiplier
3. x contract value multiplier
4. + concentration penalty of each associated director
5. x network effect multiplier
6. + personal-history terms of each associated director
7. clamp to 0-100, round half up
"""
from typing import Optional

from riskengine.config import Settings, settings as default_settings
from riskengine.logger import setup_logger
from riskengine.models.profile import SupplierRiskProfile
from riskengine.models.risk import SupplierRiskBreakdown
from riskengine.models.scoring_config import RiskScoringConfig
from riskengine.pipeline.index import RelationshipIndex
from riskengine.pipeline.network import calculate_network_effect
from riskengine.scoring.base import calculate_base_risk, finalize_score
from riskengine.scoring.multipliers import (
    calculate_concentration_penalty,
    calculate_contract_value_multiplier,
    calculate_geographic_multiplier,
    personal_history_terms,
)

logger = setup_logger(__name__)


def explain_supplier_risk(
    supplier: SupplierRiskProfile,
    index: RelationshipIndex,
    config: RiskScoringConfig,
    settings: Optional[Settings] = None,
) -> SupplierRiskBreakdown:
    """Score a supplier and keep every intermediate value."""
    settings = settings or default_settings
    directors = index.directors_of(supplier)

    base_risk = calculate_base_risk(supplier.base_risk_factors, config.base_risk_weights)
    risk_score = base_risk

    geographic_multiplier = calculate_geographic_multiplier(supplier.geographic_risk, config.geographic_multipliers)
    risk_score *= geographic_multiplier

    contract_multiplier = calculate_contract_value_multiplier(supplier.contract_value_zar, config.network_effects)
    risk_score *= contract_multiplier

    concentration_penalty = 0
    for director in directors:
        penalty = calculate_concentration_penalty(director.board_count, config.concentration_penalties)
        risk_score += penalty
        concentration_penalty += penalty

    network_multiplier, triggered = calculate_network_effect(
        supplier, (), config.network_effects, index=index
    )
    risk_score *= network_multiplier

    director_penalties = 0
    for director in directors:
        for term in personal_history_terms(director, config.director_risk_factors, settings.experience_cap_years):
            risk_score += term
            director_penalties += term

    final_score = finalize_score(risk_score)
    logger.debug(f"Supplier {supplier.id}: raw={risk_score:.2f} final={final_score}")

    return SupplierRiskBreakdown(
        supplier_id=supplier.id,
        base_risk=base_risk,
        geographic_multiplier=geographic_multiplier,
        contract_multiplier=contract_multiplier,
        concentration_penalty=concentration_penalty,
        network_multiplier=network_multiplier,
        director_penalties=director_penalties,
        raw_score=risk_score,
        final_score=final_score,
        triggered_rules=triggered,
    )


def calculate_supplier_risk(
    supplier: SupplierRiskProfile,
    index: RelationshipIndex,
    config: RiskScoringConfig,
    settings: Optional[Settings] = None,
) -> int:
    """Final 0-100 risk score for a supplier."""
    return explain_supplier_risk(supplier, index, config, settings).final_score
