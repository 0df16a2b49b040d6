import logging
import re
from typing import Any, Iterable, Mapping

import httpx

from ytdl_assistant.models.video_models import Format, VideoInfo
from ytdl_assistant.services.errors import NetworkError, ValidationError

logger = logging.getLogger(__name__)

MSG_MISSING_URL = "Mohon masukkan URL YouTube yang valid"
MSG_MISSING_API_URL = "Mohon masukkan URL API Anda"
MSG_INVALID_URL = "URL YouTube tidak valid"

DEFAULT_TITLE = "Unknown"
DEFAULT_DURATION = "N/A"
DEFAULT_FORMAT_LABEL = "Unknown"
FALLBACK_FORMAT_LABEL = "Download"

# Alias order is precedence: the first truthy value wins
TITLE_KEYS = ("title",)
DURATION_KEYS = ("duration",)
THUMBNAIL_KEYS = ("thumbnail", "thumb")
FORMATS_KEYS = ("formats", "links")
FORMAT_URL_KEYS = ("url", "download_url")
FORMAT_LABEL_KEYS = ("quality", "resolution")
FORMAT_EXT_KEYS = ("ext", "format")
FALLBACK_URL_KEYS = ("download_url", "url")

_PREFIX = r'^(?:https?://)?(?:www\.)?'
YOUTUBE_URL_PATTERNS = [
    re.compile(_PREFIX + r'youtube\.com/watch\?(?:[^#]*&)?v=([\w-]+)'),
    re.compile(_PREFIX + r'youtu\.be/([\w-]+)'),
    re.compile(_PREFIX + r'youtube\.com/embed/([\w-]+)'),
]


def extract_video_id(url: str) -> str:
    """Return the video ID of an accepted YouTube URL, or "" if the shape is not accepted"""
    url = (url or "").strip()
    for pattern in YOUTUBE_URL_PATTERNS:
        match = pattern.match(url)
        if match:
            return match.group(1)
    return ""


def is_valid_youtube_url(url: str) -> bool:
    return bool(extract_video_id(url))


def validate_request(url: str, api_url: str) -> None:
    """Check inputs in order; raise ValidationError with the first failure."""
    if not url:
        raise ValidationError(MSG_MISSING_URL)
    if not api_url:
        raise ValidationError(MSG_MISSING_API_URL)
    if not is_valid_youtube_url(url):
        raise ValidationError(MSG_INVALID_URL)


def _first(data: Mapping[str, Any], keys: Iterable[str], default: Any) -> Any:
    for key in keys:
        value = data.get(key)
        if value:
            return value
    return default


def _text(data: Mapping[str, Any], keys: Iterable[str], default: str) -> str:
    return str(_first(data, keys, default))


def normalize_format(entry: Mapping[str, Any]) -> Format:
    return Format(
        label=_text(entry, FORMAT_LABEL_KEYS, DEFAULT_FORMAT_LABEL),
        extension=_text(entry, FORMAT_EXT_KEYS, ""),
        download_url=_text(entry, FORMAT_URL_KEYS, ""),
    )


def normalize_video_info(data: Any) -> VideoInfo:
    """
    Map a loosely structured downloader response into a VideoInfo.

    Missing fields fall back to placeholder constants. An empty format list
    yields a single "Download" format pointing at the top-level link.
    """
    if not isinstance(data, Mapping):
        data = {}

    raw_formats = _first(data, FORMATS_KEYS, [])
    if not isinstance(raw_formats, list):
        raw_formats = []
    formats = [normalize_format(entry) for entry in raw_formats if isinstance(entry, Mapping)]

    if not formats:
        formats = [Format(
            label=FALLBACK_FORMAT_LABEL,
            extension="",
            download_url=_text(data, FALLBACK_URL_KEYS, ""),
        )]

    return VideoInfo(
        title=_text(data, TITLE_KEYS, DEFAULT_TITLE),
        duration_label=_text(data, DURATION_KEYS, DEFAULT_DURATION),
        thumbnail_url=_text(data, THUMBNAIL_KEYS, ""),
        formats=formats,
    )


def build_headers(api_key: str) -> dict:
    headers = {"Content-Type": "application/json"}
    if api_key:
        headers["Authorization"] = f"Bearer {api_key}"
    return headers


async def request_video_info(client: httpx.AsyncClient, url: str, api_url: str, api_key: str = "") -> VideoInfo:
    """
    POST {url, action: "info"} to the downloader API and normalize the reply.

    Raises NetworkError on transport failure, non-2xx status or invalid JSON.
    """
    logger.info("Requesting video info for %s", extract_video_id(url) or url)
    try:
        response = await client.post(
            api_url,
            json={"url": url, "action": "info"},
            headers=build_headers(api_key),
        )
    except httpx.HTTPError as e:
        raise NetworkError(f"Network Error: {e}") from e

    if not response.is_success:
        raise NetworkError(
            f"HTTP Error: {response.status_code} - {response.reason_phrase}",
            status_code=response.status_code,
            status_text=response.reason_phrase,
        )

    try:
        data = response.json()
    except ValueError as e:
        raise NetworkError(f"Invalid JSON response: {e}", status_code=response.status_code) from e

    return normalize_video_info(data)
