from fastapi import APIRouter

from campus_events.api.events import router as events_router
from campus_events.api.session import router as session_router
from campus_events.api.views import router as views_router

router = APIRouter()
router.include_router(events_router)
router.include_router(session_router)
router.include_router(views_router)
