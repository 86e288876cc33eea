from typing import Dict

from fastapi import APIRouter, Depends

from promotion_ai.api.dependencies import get_router
from promotion_ai.api.schemas import ProviderHealth
from promotion_ai.router import ProviderRouter

router = APIRouter(prefix="/api", tags=["status"])


@router.get("/status", response_model=Dict[str, ProviderHealth])
async def provider_status(
    provider_router: ProviderRouter = Depends(get_router),
) -> Dict[str, ProviderHealth]:
    statuses = await provider_router.status()
    return {
        name: ProviderHealth(reachable=s.reachable, detail=s.detail)
        for name, s in statuses.items()
    }
