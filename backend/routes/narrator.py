from fastapi import APIRouter, Depends

from models import NarratorRequest, NarrativeResult
from services import NarratorService, narrator_service

router = APIRouter(tags=["Narrator"])


def get_narrator() -> NarratorService:
    return narrator_service


@router.post("/narrator", response_model=NarrativeResult)
async def narrate(body: NarratorRequest, narrator: NarratorService = Depends(get_narrator)):
    """Attacker playbook for a scan. Always answers, falling back to a template."""
    return await narrator.generate(body.scan_result)
