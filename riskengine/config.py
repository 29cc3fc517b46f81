import os
from typing import Literal

import yaml
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

from riskengine.exceptions import InvalidConfigError
from riskengine.models.scoring_config import DEFAULT_RISK_CONFIG, RiskScoringConfig

load_dotenv()


class Settings(BaseSettings):
    risk_config_path: str = os.getenv("RISK_CONFIG_PATH", "")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Director aggregation
    high_risk_supplier_base_threshold: float = 60.0
    high_risk_supplier_amplification: float = 0.15
    high_geography_director_multiplier: float = 1.1
    experience_cap_years: int = 10

    # Concentration report
    concentration_min_boards: int = 3

    # Data quality policies
    dangling_reference_policy: Literal["skip", "warn", "error"] = "warn"
    empty_director_policy: Literal["zero", "error"] = "zero"
    validate_config_updates: bool = True

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()


def load_scoring_config(path: str, base: RiskScoringConfig = DEFAULT_RISK_CONFIG) -> RiskScoringConfig:
    """
    Load a scoring configuration from a YAML file.

    Top-level sections present in the file replace the ones in ``base``;
    absent sections keep their values.
    """
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise InvalidConfigError([f"cannot read {path}: {e}"]) from e

    if not isinstance(data, dict):
        raise InvalidConfigError([f"{path} must contain a mapping of config sections"])

    return base.merged(data)


def get_scoring_config() -> RiskScoringConfig:
    """Scoring config named by RISK_CONFIG_PATH, or the defaults."""
    if settings.risk_config_path:
        return load_scoring_config(settings.risk_config_path)
    return DEFAULT_RISK_CONFIG
