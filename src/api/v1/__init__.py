"""API v1 router configuration."""

from fastapi import APIRouter

from api.v1.routes.discovery import router as discovery_router
from api.v1.routes.matches import router as matches_router
from api.v1.routes.messages import router as messages_router
from api.v1.routes.profiles import profiles_router
from api.v1.routes.profiles import router as profile_router
from api.v1.routes.safety import block_router, report_router
from api.v1.routes.swipes import likes_router
from api.v1.routes.swipes import router as swipe_router

router = APIRouter()
router.include_router(profile_router)
router.include_router(profiles_router)
router.include_router(discovery_router)
router.include_router(swipe_router)
router.include_router(likes_router)
router.include_router(matches_router)
router.include_router(messages_router)
router.include_router(block_router)
router.include_router(report_router)
