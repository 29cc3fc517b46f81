"""
Risk scoring engine for suppliers and the directors on their boards.

Holds one immutable data set (profiles plus relationship index) and the
current scoring configuration. Every call reads the configuration once and
computes from scratch against that snapshot, so update_config can run
alongside scoring calls without tearing a result.
"""
import threading
from typing import Optional, Union

import pandas as pd

from riskengine.config import Settings, get_scoring_config, settings as default_settings
from riskengine.logger import LogContext, setup_logger
from riskengine.models.profile import DirectorRiskProfile, SupplierRiskProfile
from riskengine.models.risk import (
    ConcentrationReport,
    RiskLevel,
    RiskScores,
    RiskSummary,
    SupplierRiskBreakdown,
)
from riskengine.models.scoring_config import RiskScoringConfig, validate_scoring_config
from riskengine.pipeline.concentration import build_concentration_report
from riskengine.pipeline.index import build_relationship_index
from riskengine.pipeline.network import calculate_network_effect
from riskengine.pipeline.processor import process_all, scores_to_dataframe, summarize_scores
from riskengine.scoring.director import calculate_director_risk
from riskengine.scoring.levels import get_risk_level
from riskengine.scoring.supplier import calculate_supplier_risk, explain_supplier_risk

logger = setup_logger(__name__)


class RiskScoringEngine:
    def __init__(
        self,
        suppliers: list[SupplierRiskProfile],
        directors: list[DirectorRiskProfile],
        config: Optional[RiskScoringConfig] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or default_settings
        config = config if config is not None else get_scoring_config()
        if self.settings.validate_config_updates:
            validate_scoring_config(config)

        self._config = config
        self._config_lock = threading.Lock()
        self._index = build_relationship_index(
            list(suppliers), list(directors), dangling_policy=self.settings.dangling_reference_policy
        )
        logger.info(f"Risk engine ready: {len(self._index.suppliers)} suppliers, {len(self._index.directors)} directors")

    @property
    def config(self) -> RiskScoringConfig:
        return self._config

    def calculate_supplier_risk(self, supplier_id: str) -> int:
        supplier = self._index.get_supplier(supplier_id)
        return calculate_supplier_risk(supplier, self._index, self._config, self.settings)

    def calculate_director_risk(self, director_id: str) -> int:
        director = self._index.get_director(director_id)
        return calculate_director_risk(director, self._index, self._config, self.settings)

    def calculate_network_effect(self, supplier_id: str) -> tuple[float, list[str]]:
        supplier = self._index.get_supplier(supplier_id)
        return calculate_network_effect(
            supplier, (), self._config.network_effects, index=self._index
        )

    def calculate_all_risk_scores(self) -> RiskScores:
        config = self._config
        with LogContext(logger, "scoring all suppliers and directors"):
            return process_all(self._index, config, self.settings)

    @staticmethod
    def get_risk_level(score: float) -> RiskLevel:
        return get_risk_level(score)

    def get_concentration_risks(self) -> ConcentrationReport:
        config = self._config
        with LogContext(logger, "building concentration report"):
            return build_concentration_report(self._index, config, self.settings)

    def get_supplier_risk_breakdown(self, supplier_id: str) -> SupplierRiskBreakdown:
        supplier = self._index.get_supplier(supplier_id)
        return explain_supplier_risk(supplier, self._index, self._config, self.settings)

    def summarize(self) -> RiskSummary:
        return summarize_scores(self.calculate_all_risk_scores(), self._index, self.settings)

    def to_dataframe(self) -> pd.DataFrame:
        return scores_to_dataframe(self.calculate_all_risk_scores(), self._index)

    def update_config(self, partial: Union[dict, RiskScoringConfig]) -> RiskScoringConfig:
        """
        Replace top-level config sections with the ones given. Takes effect for
        all later calls. On validation failure the current config is kept.
        """
        if isinstance(partial, RiskScoringConfig):
            partial = {name: getattr(partial, name) for name in partial.model_fields_set}

        with self._config_lock:
            new_config = self._config.merged(partial)
            if self.settings.validate_config_updates:
                validate_scoring_config(new_config)
            self._config = new_config

        logger.info(f"Scoring config updated: {', '.join(sorted(partial)) or 'no sections'}")
        return new_config
