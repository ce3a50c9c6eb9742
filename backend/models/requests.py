from pydantic import BaseModel, field_validator

from .scan import ScanResult


class ScanRequest(BaseModel):
    query: str = ""

    @field_validator('query', mode='before')
    @classmethod
    def none_to_empty(cls, v):
        # Length is checked by the orchestrator
        return v if v is not None else ""


class NarratorRequest(BaseModel):
    scan_result: ScanResult
