"""Digital footprint scan core."""

from .errors import (
    ShadowError,
    ValidationError,
    ConfigError,
    ProviderError,
    ScoringInvariantViolation,
)
from .orchestrator import ScanOrchestrator, ScanState, build_scan_result
from .personas import PERSONAS, select_persona
from .risk import (
    RiskWeights,
    calculate_risk_score,
    get_risk_level,
    get_recommendations,
    get_risk_bar,
)
from .data_points import derive_data_points

__all__ = [
    "ShadowError",
    "ValidationError",
    "ConfigError",
    "ProviderError",
    "ScoringInvariantViolation",
    "ScanOrchestrator",
    "ScanState",
    "build_scan_result",
    "PERSONAS",
    "select_persona",
    "RiskWeights",
    "calculate_risk_score",
    "get_risk_level",
    "get_recommendations",
    "get_risk_bar",
    "derive_data_points",
]
