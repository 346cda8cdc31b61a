from fastapi import APIRouter
from messagely.api.v0.auth.main import router as auth_router
from messagely.api.v0.user.main import router as user_router
from messagely.api.v0.message.main import router as message_router

router = APIRouter(prefix="/api")
router.include_router(auth_router)
router.include_router(user_router)
router.include_router(message_router)
