from pydantic import BaseModel
from typing import Optional
from datetime import datetime

from .scan import ScanResult


class ScanResponse(BaseModel):
    success: bool
    source: str
    result: ScanResult
    narrative: Optional[str] = None
    risk_level: str
    recommendations: list[str] = []


class NarrativeResult(BaseModel):
    narrative: str
    generated_at: datetime
    is_ai_generated: bool


class ErrorResponse(BaseModel):
    success: bool = False
    error: str


class HealthResponse(BaseModel):
    status: str
    version: str
    timestamp: datetime
    real_api_enabled: bool
    demo_mode: bool
