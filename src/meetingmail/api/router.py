"""API router aggregator."""

from fastapi import APIRouter

from meetingmail.api.emails import router as email_router
from meetingmail.api.summaries import router as summaries_router

router = APIRouter(prefix="/api")
router.include_router(summaries_router)
router.include_router(email_router)
