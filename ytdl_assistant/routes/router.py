from fastapi import APIRouter
from ytdl_assistant.routes.video import video_router
from ytdl_assistant.routes.chat import chat_router
from ytdl_assistant.routes.state import state_router

router = APIRouter()

router.include_router(video_router, prefix="/video")
router.include_router(chat_router, prefix="/chat")
router.include_router(state_router)
