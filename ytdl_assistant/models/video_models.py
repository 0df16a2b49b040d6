from pydantic import BaseModel, Field, field_validator
from typing import List, Optional


class VideoInfoRequest(BaseModel):
    url: str = Field("", description="YouTube video URL")
    api_url: str = Field("", description="Downloader API endpoint")
    api_key: str = Field("", description="Optional bearer token for the downloader API")

    @field_validator('url', 'api_url', 'api_key', mode='before')
    @classmethod
    def strip_value(cls, v):
        """Strip surrounding whitespace; None counts as empty"""
        if v is None:
            return ""
        if isinstance(v, str):
            return v.strip()
        return v


class Format(BaseModel):
    label: str
    extension: str = ""
    download_url: str = ""

    @property
    def display_label(self) -> str:
        return f"{self.label} {self.extension}".strip()


class VideoInfo(BaseModel):
    title: str
    duration_label: str
    thumbnail_url: str = ""
    formats: List[Format] = Field(default_factory=list)


class VideoInfoResponse(BaseModel):
    status: str  # "success", "error"
    message: str
    video_info: Optional[VideoInfo] = None
