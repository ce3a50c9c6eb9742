"""Scan endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from models import ScanRequest, ScanResponse, ScanResult, DataPoint
from shadow import (
    ScanOrchestrator,
    ValidationError,
    derive_data_points,
    get_risk_level,
    get_recommendations,
)
from config import settings

router = APIRouter(tags=["Scan"])


def get_orchestrator() -> ScanOrchestrator:
    """One orchestrator per request."""
    return ScanOrchestrator.from_settings(settings)


@router.post("/scan", response_model=ScanResponse)
async def scan(body: ScanRequest, orchestrator: ScanOrchestrator = Depends(get_orchestrator)):
    """
    Run a footprint scan.

    Real sourcing failures never surface here; they degrade to persona data.
    Only a too-short query is rejected.
    """
    try:
        outcome = await orchestrator.scan(body.query)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail={"success": False, "error": str(e)})

    result = outcome.result
    return ScanResponse(
        success=True,
        source=outcome.source,
        result=result,
        narrative=outcome.narrative,
        risk_level=get_risk_level(result.risk_score).value,
        recommendations=get_recommendations(result.risk_breakdown),
    )


@router.post("/data-points", response_model=list[DataPoint])
async def data_points(result: ScanResult):
    return derive_data_points(result)
