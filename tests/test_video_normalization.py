from ytdl_assistant.models.video_models import Format
from ytdl_assistant.services.video_service import normalize_video_info


def test_canonical_keys():
    info = normalize_video_info({
        "title": "Never Gonna Give You Up",
        "duration": "3:33",
        "thumbnail": "https://img.test/t.jpg",
        "formats": [
            {"quality": "720p", "ext": "mp4", "url": "https://cdn.test/720.mp4"},
            {"quality": "360p", "ext": "webm", "url": "https://cdn.test/360.webm"},
        ],
    })
    assert info.title == "Never Gonna Give You Up"
    assert info.duration_label == "3:33"
    assert info.thumbnail_url == "https://img.test/t.jpg"
    assert [f.display_label for f in info.formats] == ["720p mp4", "360p webm"]
    assert info.formats[0].download_url == "https://cdn.test/720.mp4"


def test_alternate_keys_match_canonical():
    canonical = normalize_video_info({
        "title": "T",
        "duration": "1:00",
        "thumbnail": "https://img.test/a.jpg",
        "formats": [{"quality": "1080p", "ext": "mp4", "url": "https://cdn.test/a"}],
    })
    alternate = normalize_video_info({
        "title": "T",
        "duration": "1:00",
        "thumb": "https://img.test/a.jpg",
        "links": [{"resolution": "1080p", "format": "mp4", "download_url": "https://cdn.test/a"}],
    })
    assert alternate == canonical


def test_alias_precedence():
    info = normalize_video_info({
        "thumbnail": "first.jpg",
        "thumb": "second.jpg",
        "formats": [{"quality": "hd", "resolution": "720p", "url": "u1", "download_url": "u2"}],
        "links": [{"quality": "ignored"}],
    })
    assert info.thumbnail_url == "first.jpg"
    assert info.formats == [Format(label="hd", extension="", download_url="u1")]


def test_empty_formats_synthesizes_download_link():
    info = normalize_video_info({"title": "T", "formats": [], "download_url": "https://cdn.test/file"})
    assert len(info.formats) == 1
    assert info.formats[0].label == "Download"
    assert info.formats[0].download_url == "https://cdn.test/file"


def test_fallback_link_prefers_download_url_over_url():
    info = normalize_video_info({"url": "https://cdn.test/b", "download_url": "https://cdn.test/a"})
    assert info.formats[0].download_url == "https://cdn.test/a"
    info = normalize_video_info({"url": "https://cdn.test/b"})
    assert info.formats[0].download_url == "https://cdn.test/b"


def test_missing_fields_degrade_to_placeholders():
    info = normalize_video_info({"formats": [{}]})
    assert info.title == "Unknown"
    assert info.duration_label == "N/A"
    assert info.thumbnail_url == ""
    assert info.formats == [Format(label="Unknown", extension="", download_url="")]
    assert info.formats[0].display_label == "Unknown"


def test_malformed_shapes_do_not_fail():
    info = normalize_video_info(["not", "an", "object"])
    assert info.title == "Unknown"
    assert info.formats == [Format(label="Download", extension="", download_url="")]

    info = normalize_video_info({"formats": {"quality": "720p"}, "duration": 213})
    assert info.duration_label == "213"
    assert [f.label for f in info.formats] == ["Download"]

    info = normalize_video_info({"formats": ["junk", {"quality": "480p"}]})
    assert [f.label for f in info.formats] == ["480p"]
