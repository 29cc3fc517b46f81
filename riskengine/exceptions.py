"""Exceptions raised by the risk scoring engine."""


class RiskEngineError(Exception):
    """Base class for all engine errors."""
    pass


class EntityNotFoundError(RiskEngineError, LookupError):
    """Raised when a supplier or director id is not in the scored data set."""

    def __init__(self, kind: str, entity_id: str):
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"{kind.capitalize()} {entity_id} not found")


class DataIntegrityError(RiskEngineError):
    """Raised when supplier/director relationships are inconsistent."""
    pass


class InvalidStateError(RiskEngineError):
    """Raised when a score cannot be computed from the data given."""
    pass


class InvalidConfigError(RiskEngineError, ValueError):
    """Raised when a scoring configuration is malformed."""

    def __init__(self, problems: list[str]):
        self.problems = problems
        super().__init__("Invalid scoring configuration: " + "; ".join(problems))
