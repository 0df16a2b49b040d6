import pytest

from ytdl_assistant.services.errors import ValidationError
from ytdl_assistant.services.video_service import (
    MSG_INVALID_URL,
    MSG_MISSING_API_URL,
    MSG_MISSING_URL,
    extract_video_id,
    is_valid_youtube_url,
    validate_request,
)


@pytest.mark.parametrize("url", [
    "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
    "http://www.youtube.com/watch?v=dQw4w9WgXcQ",
    "https://youtube.com/watch?v=dQw4w9WgXcQ",
    "youtube.com/watch?v=dQw4w9WgXcQ",
    "https://www.youtube.com/watch?feature=share&v=dQw4w9WgXcQ",
    "https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=42s",
    "https://youtu.be/dQw4w9WgXcQ",
    "http://www.youtu.be/dQw4w9WgXcQ?si=abc",
    "https://www.youtube.com/embed/dQw4w9WgXcQ",
    "http://youtube.com/embed/dQw4w9WgXcQ",
])
def test_accepted_shapes(url):
    assert is_valid_youtube_url(url)
    assert extract_video_id(url) == "dQw4w9WgXcQ"


@pytest.mark.parametrize("url", [
    "",
    "not a url",
    "https://vimeo.com/12345",
    "https://www.youtube.com/",
    "https://www.youtube.com/watch",
    "https://www.youtube.com/watch?list=PL123",
    "https://www.youtube.com/watch?xv=abc",
    "https://youtu.be/",
    "https://www.youtube.com/embed/",
    "ftp://youtube.com/watch?v=dQw4w9WgXcQ",
    "https://evil.example/?u=https://youtu.be/dQw4w9WgXcQ",
])
def test_rejected_shapes(url):
    assert not is_valid_youtube_url(url)
    assert extract_video_id(url) == ""


def test_validation_order():
    with pytest.raises(ValidationError, match=MSG_MISSING_URL):
        validate_request("", "")
    with pytest.raises(ValidationError, match=MSG_MISSING_API_URL):
        validate_request("garbage", "")
    with pytest.raises(ValidationError, match=MSG_INVALID_URL):
        validate_request("garbage", "https://api.test/info")


def test_validation_passes():
    validate_request("https://youtu.be/dQw4w9WgXcQ", "https://api.test/info")
