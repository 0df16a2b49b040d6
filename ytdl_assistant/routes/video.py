from fastapi import APIRouter, Depends

from ytdl_assistant.models.video_models import VideoInfoRequest, VideoInfoResponse
from ytdl_assistant.routes.dependencies import get_assistant
from ytdl_assistant.services.assistant import DownloaderAssistant

video_router = APIRouter()


@video_router.post("/info", response_model=VideoInfoResponse)
async def get_video_info(request: VideoInfoRequest, assistant: DownloaderAssistant = Depends(get_assistant)):
    """
    Fetch downloadable formats for a YouTube video from the configured downloader API.

    Accepts:
    - url: YouTube watch, youtu.be or embed URL
    - api_url: downloader API endpoint
    - api_key: optional bearer token

    Returns status "success" with the normalized video info, or status "error"
    with the user-facing message. Input and transport errors are not HTTP errors.
    """
    info = await assistant.fetch_video_info(request.url, request.api_url, request.api_key)
    notice = assistant.notices.current()
    message = notice.text if notice is not None else ""
    if info is None:
        return {"status": "error", "message": message, "video_info": None}
    return {"status": "success", "message": message, "video_info": info}
