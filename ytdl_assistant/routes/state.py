from fastapi import APIRouter, Depends

from ytdl_assistant.models.state_model import AppStateResponse, HelpResponse
from ytdl_assistant.routes.dependencies import get_assistant
from ytdl_assistant.services.assistant import DownloaderAssistant
from ytdl_assistant.services.help_service import quick_help

state_router = APIRouter()


@state_router.get("/state", response_model=AppStateResponse)
async def get_state(assistant: DownloaderAssistant = Depends(get_assistant)):
    """
    Snapshot of everything the frontend renders.

    render_events lists the pending UI signals (focus_input, scroll_to_bottom,
    flash_attention) and is emptied by this call.
    """
    notice = assistant.notices.current()
    drain = getattr(assistant.chat.renderer, "drain", None)
    return {
        "youtube_url": assistant.youtube_url,
        "downloader_api_url": assistant.form.downloader_api_url,
        "downloader_api_key": assistant.form.downloader_api_key,
        "generative_api_key": assistant.form.generative_api_key,
        "loading": assistant.loading,
        "panel_open": assistant.chat.panel_open,
        "typing": assistant.chat.is_typing,
        "attention": assistant.chat.attention_active,
        "notice": notice,
        "video_info": assistant.video_info,
        "render_events": drain() if drain is not None else [],
    }


@state_router.get("/help/{topic}", response_model=HelpResponse)
async def get_help(topic: str):
    return {"topic": topic, "text": quick_help(topic)}
