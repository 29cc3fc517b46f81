"""Supplier and director risk profiles supplied by the caller."""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from enum import Enum


class GeographicRisk(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


class ComplianceHistory(str, Enum):
    clean = "clean"
    minor = "minor"
    major = "major"


class EntityKind(str, Enum):
    supplier = "supplier"
    director = "director"


class RiskFactors(BaseModel):
    """Five factor scores, nominally 0-100 (not enforced)."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    operational: float = 0.0
    financial: float = 0.0
    compliance: float = 0.0
    reputational: float = 0.0
    contractual: float = 0.0


class SupplierRiskProfile(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    id: str
    name: Optional[str] = None
    base_risk_factors: RiskFactors
    contract_value_zar: float = Field(default=0.0, ge=0)
    director_ids: frozenset[str] = frozenset()
    category: str = ""
    geographic_risk: GeographicRisk = GeographicRisk.low
    linked_site_ids: frozenset[str] = frozenset()


class DirectorRiskProfile(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    id: str
    name: Optional[str] = None
    board_positions: tuple[str, ...] = ()  # supplier ids
    years_experience: float = Field(default=0.0, ge=0)
    has_adverse_media: bool = False
    compliance_history: ComplianceHistory = ComplianceHistory.clean

    @property
    def board_count(self) -> int:
        return len(self.board_positions)
