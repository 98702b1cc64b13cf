from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Query
from app.services.schedule_service import ScheduleService
from app.models.schemas import ScheduleResponse, CategoryListResponse

router = APIRouter(tags=["schedule"])
service = ScheduleService()

def _now(now: Optional[datetime]) -> datetime:
    # captured once per request, naive local wall-clock
    if now is None:
        return datetime.now()
    return now.replace(tzinfo=None)

@router.get("/schedule", response_model=ScheduleResponse)
async def schedule(
    c: Optional[str] = Query(default=None, description="Competition to show, empty or 'All' for every one"),
    now: Optional[datetime] = Query(default=None, description="Reference instant, defaults to the server clock"),
):
    return await service.get_schedule(now=_now(now), category=c)

@router.get("/categories", response_model=CategoryListResponse)
async def list_categories(now: Optional[datetime] = Query(default=None)):
    return await service.get_categories(now=_now(now))
