"""
Scoring configuration: every weight, penalty and multiplier used by the
supplier and director formulas.

The defaults reproduce the production calibration. A configuration is an
immutable snapshot; the engine swaps whole snapshots rather than editing
fields in place.
"""
import math

from pydantic import BaseModel, ConfigDict, ValidationError

from riskengine.exceptions import InvalidConfigError


class BaseRiskWeights(BaseModel):
    """Weights of the five risk factors, expected to sum to 1.0."""
    model_config = ConfigDict(frozen=True)

    operational: float = 0.25
    financial: float = 0.20
    compliance: float = 0.25
    reputational: float = 0.15
    contractual: float = 0.15


class ConcentrationPenalties(BaseModel):
    model_config = ConfigDict(frozen=True)

    two_boards: float = 5
    three_boards: float = 12
    four_plus_boards: float = 20


class TierValues(BaseModel):
    """A value per low/medium/high tier."""
    model_config = ConfigDict(frozen=True)

    low: float
    medium: float
    high: float


class NetworkEffects(BaseModel):
    model_config = ConfigDict(frozen=True)

    shared_director_multiplier: float = 1.1
    geographic_concentration_multiplier: float = 1.15
    # Cutoffs in ZAR; a value must exceed a cutoff to reach its tier
    contract_value_thresholds: TierValues = TierValues(low=0, medium=50_000_000, high=100_000_000)
    contract_value_multipliers: TierValues = TierValues(low=1.0, medium=1.05, high=1.1)


class ComplianceHistoryPenalties(BaseModel):
    model_config = ConfigDict(frozen=True)

    clean: float = 0
    minor: float = 3
    major: float = 10


class DirectorRiskFactors(BaseModel):
    model_config = ConfigDict(frozen=True)

    adverse_media_penalty: float = 8
    compliance_history_penalties: ComplianceHistoryPenalties = ComplianceHistoryPenalties()
    experience_bonus: float = -0.5  # per year of experience, negative reduces risk


class RiskScoringConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_risk_weights: BaseRiskWeights = BaseRiskWeights()
    concentration_penalties: ConcentrationPenalties = ConcentrationPenalties()
    network_effects: NetworkEffects = NetworkEffects()
    geographic_multipliers: TierValues = TierValues(low=1.0, medium=1.05, high=1.15)
    director_risk_factors: DirectorRiskFactors = DirectorRiskFactors()

    def merged(self, partial: dict) -> "RiskScoringConfig":
        """Return a new config with the top-level sections of ``partial`` replacing ours."""
        unknown = set(partial) - set(type(self).model_fields)
        if unknown:
            raise InvalidConfigError([f"unknown section '{key}'" for key in sorted(unknown)])
        data = {name: getattr(self, name) for name in type(self).model_fields}
        data.update(partial)
        try:
            return RiskScoringConfig.model_validate(data)
        except ValidationError as e:
            raise InvalidConfigError(
                [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
            ) from e


DEFAULT_RISK_CONFIG = RiskScoringConfig()


def validate_scoring_config(config: RiskScoringConfig) -> RiskScoringConfig:
    """
    Check a configuration for values that would silently skew scores.
    Raises InvalidConfigError listing every problem found.
    """
    problems = []

    weights = config.base_risk_weights
    total = (weights.operational + weights.financial + weights.compliance +
             weights.reputational + weights.contractual)
    if not math.isclose(total, 1.0, abs_tol=1e-6):
        problems.append(f"base risk weights sum to {total:.4f}, expected 1.0")

    cutoffs = config.network_effects.contract_value_thresholds
    if not (cutoffs.low <= cutoffs.medium <= cutoffs.high):
        problems.append(
            f"contract value thresholds out of order: low={cutoffs.low}, "
            f"medium={cutoffs.medium}, high={cutoffs.high}"
        )

    penalties = config.concentration_penalties
    if penalties.two_boards < 0:
        problems.append(f"two-board penalty must be non-negative, got {penalties.two_boards}")
    if not (penalties.two_boards <= penalties.three_boards <= penalties.four_plus_boards):
        problems.append(
            f"concentration penalties must not decrease with board count: "
            f"{penalties.two_boards}, {penalties.three_boards}, {penalties.four_plus_boards}"
        )

    if problems:
        raise InvalidConfigError(problems)
    return config
