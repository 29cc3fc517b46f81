"""Batch scoring: scores every supplier and director in a data set."""
import math
import pandas as pd
from typing import Optional

from riskengine.config import Settings, settings as default_settings
from riskengine.models.profile import EntityKind
from riskengine.models.risk import EntityRiskScore, RiskScores, RiskSummary
from riskengine.models.scoring_config import RiskScoringConfig
from riskengine.pipeline.index import RelationshipIndex
from riskengine.scoring.director import calculate_director_risk
from riskengine.scoring.levels import HIGH_RISK_THRESHOLD, get_risk_level
from riskengine.scoring.supplier import calculate_supplier_risk


def process_all(
    index: RelationshipIndex,
    config: RiskScoringConfig,
    settings: Optional[Settings] = None,
) -> RiskScores:
    """Score every supplier and director. Only ids present in the index are visited."""
    settings = settings or default_settings

    suppliers = []
    for s in index.suppliers.values():
        score = calculate_supplier_risk(s, index, config, settings)
        suppliers.append(EntityRiskScore(
            id=s.id, kind=EntityKind.supplier, name=s.name,
            risk_score=score, risk_level=get_risk_level(score),
        ))

    directors = []
    for d in index.directors.values():
        score = calculate_director_risk(d, index, config, settings)
        directors.append(EntityRiskScore(
            id=d.id, kind=EntityKind.director, name=d.name,
            risk_score=score, risk_level=get_risk_level(score),
        ))

    return RiskScores(suppliers=suppliers, directors=directors)


def scores_to_dataframe(scores: RiskScores, index: RelationshipIndex) -> pd.DataFrame:
    """One row per entity. board_count is filled for directors only."""
    rows = []
    for entry in scores.suppliers + scores.directors:
        row = entry.model_dump()
        row["kind"] = entry.kind.value
        row["risk_level"] = entry.risk_level.value
        if entry.kind == EntityKind.director:
            row["board_count"] = index.directors[entry.id].board_count
        else:
            row["board_count"] = None
        rows.append(row)

    columns = ["id", "kind", "name", "risk_score", "risk_level", "board_count"]
    df = pd.DataFrame(rows, columns=columns)
    df["board_count"] = df["board_count"].astype("Int64")
    return df


def _mean_half_up(values: pd.Series) -> int:
    if values.empty:
        return 0
    return int(math.floor(values.mean() + 0.5))


def summarize_scores(
    scores: RiskScores,
    index: RelationshipIndex,
    settings: Optional[Settings] = None,
) -> RiskSummary:
    """Portfolio-level counts and averages."""
    settings = settings or default_settings
    df = scores_to_dataframe(scores, index)
    supplier_scores = df.loc[df["kind"] == EntityKind.supplier.value, "risk_score"]
    director_rows = df[df["kind"] == EntityKind.director.value]

    return RiskSummary(
        total_suppliers=len(supplier_scores),
        total_directors=len(director_rows),
        high_risk_suppliers=int((supplier_scores >= HIGH_RISK_THRESHOLD).sum()),
        concentration_risk_directors=int((director_rows["board_count"] >= settings.concentration_min_boards).sum()),
        avg_supplier_risk=_mean_half_up(supplier_scores),
        avg_director_risk=_mean_half_up(director_rows["risk_score"]),
    )
