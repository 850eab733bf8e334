from fastapi import APIRouter

from app.config import get_settings
from app.interfaces.api.schemas import HealthRead

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthRead)
async def health() -> HealthRead:
    return HealthRead(status="ok", service=get_settings().app_name)
