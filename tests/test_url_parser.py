import pytest

from shorts_core.ingestion.models import ChannelIdKind
from shorts_core.utils.url_parser import extract_channel_payload, extract_video_id


@pytest.mark.parametrize(
    "url,expected",
    [
        ("https://youtu.be/dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://youtu.be/dQw4w9WgXcQ?t=42", "dQw4w9WgXcQ"),
        ("https://www.youtube.com/watch?v=dQw4w9WgXcQ&list=abc", "dQw4w9WgXcQ"),
        ("https://m.youtube.com/watch?v=dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://www.youtube.com/shorts/abcDEF_123-", "abcDEF_123-"),
        ("https://www.youtube.com/embed/dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("  https://youtu.be/dQw4w9WgXcQ  ", "dQw4w9WgXcQ"),
        ("youtube.com/watch?v=dQw4w9WgXcQ", "dQw4w9WgXcQ"),
    ],
)
def test_extract_video_id(url, expected):
    assert extract_video_id(url) == expected


@pytest.mark.parametrize(
    "url",
    [
        "https://www.youtube.com/@mkbhd",
        "https://www.youtube.com/channel/UCBJycsmduvYEL83R_U4JriQ",
        "https://www.youtube.com/c/LinusTechTips",
        "https://www.youtube.com/user/someoldname",
        "https://www.youtube.com/",
        "not a link",
    ],
)
def test_non_video_links(url):
    assert extract_video_id(url) is None


@pytest.mark.parametrize(
    "url,expected",
    [
        ("https://www.youtube.com/@mkbhd", ("mkbhd", ChannelIdKind.HANDLE)),
        ("https://www.youtube.com/@mkbhd/videos", ("mkbhd", ChannelIdKind.HANDLE)),
        (
            "https://www.youtube.com/channel/UCBJycsmduvYEL83R_U4JriQ",
            ("UCBJycsmduvYEL83R_U4JriQ", ChannelIdKind.CHANNEL_ID),
        ),
        ("https://youtube.com/c/LinusTechTips?sub=1", ("LinusTechTips", ChannelIdKind.CUSTOM_NAME)),
        ("https://www.YouTube.com/user/someoldname", ("someoldname", ChannelIdKind.LEGACY_USER)),
    ],
)
def test_extract_channel_payload(url, expected):
    assert extract_channel_payload(url) == expected


def test_unknown_channel_link():
    assert extract_channel_payload("https://vimeo.com/12345") is None
