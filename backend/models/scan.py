"""Scan aggregate and its projections."""

from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from enum import Enum

from .records import BreachRecord, ProfileRecord, PersonalInfo, QueryType


class ScanSource(str, Enum):
    REAL = "real"
    MOCK = "mock"


class RiskBreakdown(BaseModel):
    breach_exposure: int = 0
    social_media_visibility: int = 0
    contact_info_leakage: int = 0
    location_data: int = 0
    passwords_exposed: bool = False

    class Config:
        frozen = True

    @property
    def total(self) -> int:
        return (
            self.breach_exposure
            + self.social_media_visibility
            + self.contact_info_leakage
            + self.location_data
        )


class ScanResult(BaseModel):
    """
    Everything one scan found.

    Built once per scan. Enrichment produces a new instance via
    `model_copy(update=...)` instead of mutating this one.
    """
    query: str
    query_type: QueryType
    breaches: list[BreachRecord] = []
    profiles: list[ProfileRecord] = []
    exposed_data_types: list[str] = []
    risk_score: int = 0
    risk_breakdown: RiskBreakdown = RiskBreakdown()
    timestamp: datetime
    personal_info: Optional[PersonalInfo] = None

    class Config:
        frozen = True
        use_enum_values = True


class ScanOutcome(BaseModel):
    """What the orchestrator hands back to the caller."""
    result: ScanResult
    narrative: Optional[str] = None
    source: ScanSource

    class Config:
        use_enum_values = True


class DataPoint(BaseModel):
    id: int
    label: str
    type: str
    exposed: bool
    details: Optional[str] = None
