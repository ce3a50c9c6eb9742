from .records import BreachRecord, ProfileRecord, PersonalInfo, Platform, QueryType
from .scan import RiskBreakdown, ScanResult, ScanOutcome, ScanSource, DataPoint
from .requests import ScanRequest, NarratorRequest
from .responses import ScanResponse, NarrativeResult, ErrorResponse, HealthResponse

__all__ = [
    "BreachRecord", "ProfileRecord", "PersonalInfo", "Platform", "QueryType",
    "RiskBreakdown", "ScanResult", "ScanOutcome", "ScanSource", "DataPoint",
    "ScanRequest", "NarratorRequest",
    "ScanResponse", "NarrativeResult", "ErrorResponse", "HealthResponse",
]
