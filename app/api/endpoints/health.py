from fastapi import APIRouter

from app.core.config import settings
from app.core.constants import HEALTHY_MESSAGE
from app.models.book import MessageResponse

router = APIRouter(tags=["health"])


@router.get("/", summary="Simple readiness probe", response_model=MessageResponse)
async def health_check() -> dict[str, str]:
    return {"message": HEALTHY_MESSAGE}


@router.get("/privacy-policy", response_model=MessageResponse)
async def privacy_policy() -> dict[str, str]:
    return {"message": settings.PRIVACY_POLICY_MESSAGE}
