"""Concentration report: overloaded directors and suppliers sharing directors."""
from typing import Optional

from riskengine.config import Settings, settings as default_settings
from riskengine.models.risk import ConcentrationReport, DirectorConcentration, SupplierConcentration
from riskengine.models.scoring_config import RiskScoringConfig
from riskengine.pipeline.index import RelationshipIndex
from riskengine.pipeline.network import count_shared_director_suppliers
from riskengine.scoring.director import calculate_director_risk
from riskengine.scoring.supplier import calculate_supplier_risk


def build_concentration_report(
    index: RelationshipIndex,
    config: RiskScoringConfig,
    settings: Optional[Settings] = None,
) -> ConcentrationReport:
    """
    Directors holding at least concentration_min_boards seats, and suppliers
    sharing a director with another supplier. Both lists sorted by risk
    score, highest first.
    """
    settings = settings or default_settings

    directors = [
        DirectorConcentration(
            id=d.id,
            board_count=d.board_count,
            risk_score=calculate_director_risk(d, index, config, settings),
        )
        for d in index.directors.values()
        if d.board_count >= settings.concentration_min_boards
    ]
    directors.sort(key=lambda x: x.risk_score, reverse=True)

    suppliers = []
    for s in index.suppliers.values():
        shared = count_shared_director_suppliers(s, index)
        if shared > 0:
            suppliers.append(SupplierConcentration(
                id=s.id,
                shared_director_count=shared,
                risk_score=calculate_supplier_risk(s, index, config, settings),
            ))
    suppliers.sort(key=lambda x: x.risk_score, reverse=True)

    return ConcentrationReport(directors=directors, suppliers=suppliers)
