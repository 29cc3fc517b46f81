from pydantic import BaseModel
from typing import Optional
from enum import Enum

from riskengine.models.profile import EntityKind


class RiskLevel(str, Enum):
    low = "Low"
    medium = "Medium"
    high = "High"
    critical = "Critical"


class EntityRiskScore(BaseModel):
    id: str
    kind: EntityKind
    name: Optional[str] = None
    risk_score: int
    risk_level: RiskLevel


class RiskScores(BaseModel):
    suppliers: list[EntityRiskScore] = []
    directors: list[EntityRiskScore] = []


class DirectorConcentration(BaseModel):
    id: str
    board_count: int
    risk_score: int


class SupplierConcentration(BaseModel):
    id: str
    shared_director_count: int
    risk_score: int


class ConcentrationReport(BaseModel):
    directors: list[DirectorConcentration] = []
    suppliers: list[SupplierConcentration] = []


class SupplierRiskBreakdown(BaseModel):
    supplier_id: str
    base_risk: float
    geographic_multiplier: float
    contract_multiplier: float
    concentration_penalty: float
    network_multiplier: float
    director_penalties: float
    raw_score: float
    final_score: int
    triggered_rules: list[str] = []


class RiskSummary(BaseModel):
    total_suppliers: int = 0
    total_directors: int = 0
    high_risk_suppliers: int = 0
    concentration_risk_directors: int = 0
    avg_supplier_risk: int = 0
    avg_director_risk: int = 0
