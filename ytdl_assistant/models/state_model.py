from pydantic import BaseModel, Field
from typing import List, Optional

from ytdl_assistant.models.video_models import VideoInfo


class Notice(BaseModel):
    kind: str  # "error", "success"
    text: str
    expires_at: float


class AppStateResponse(BaseModel):
    youtube_url: str = ""
    downloader_api_url: str = ""
    downloader_api_key: str = ""
    generative_api_key: str = ""
    loading: bool = False
    panel_open: bool = False
    typing: bool = False
    attention: bool = False
    notice: Optional[Notice] = None
    video_info: Optional[VideoInfo] = None
    render_events: List[str] = Field(default_factory=list)


class HelpResponse(BaseModel):
    topic: str
    text: str
