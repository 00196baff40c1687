import re
from typing import Optional, Tuple
from urllib.parse import parse_qs, urlparse

from shorts_core.ingestion.models import ChannelIdKind

_SHORTS_PATH_RE = re.compile(r"/shorts/([a-zA-Z0-9_-]+)")
_LOOSE_VIDEO_ID_RE = re.compile(r"(?:v=|/)([0-9A-Za-z_-]{11})(?:[?&].*)?$")

_HANDLE_RE = re.compile(r"youtube\.com/@([^/?]+)", re.IGNORECASE)
_CHANNEL_RE = re.compile(r"youtube\.com/channel/([^/?]+)", re.IGNORECASE)
_CUSTOM_RE = re.compile(r"youtube\.com/c/([^/?]+)", re.IGNORECASE)
_USER_RE = re.compile(r"youtube\.com/user/([^/?]+)", re.IGNORECASE)


def extract_video_id(url: str) -> Optional[str]:
    """
    Returns the video ID of a YouTube watch, youtu.be or shorts link,
    or None when the link does not point at a single video.
    """
    clean = url.strip()
    parsed = urlparse(clean)

    if not parsed.scheme or not parsed.netloc:
        # Not an absolute URL, try to spot an 11-char ID anyway
        match = _LOOSE_VIDEO_ID_RE.search(clean)
        return match.group(1) if match else None

    if "youtu.be" in parsed.netloc:
        return parsed.path.lstrip("/").split("/")[0] or None

    video_ids = parse_qs(parsed.query).get("v")
    if video_ids:
        return video_ids[0]

    match = _SHORTS_PATH_RE.search(parsed.path)
    if match:
        return match.group(1)

    segments = [part for part in parsed.path.split("/") if part]
    # Channel links are never video links
    if segments and (segments[0].startswith("@") or segments[0] in ("channel", "c", "user")):
        return None
    if segments and len(segments[-1]) >= 10:
        return segments[-1]

    return None


def extract_channel_payload(url: str) -> Optional[Tuple[str, ChannelIdKind]]:
    clean = url.strip()

    match = _HANDLE_RE.search(clean)
    if match:
        return match.group(1), ChannelIdKind.HANDLE

    match = _CHANNEL_RE.search(clean)
    if match:
        return match.group(1), ChannelIdKind.CHANNEL_ID

    match = _CUSTOM_RE.search(clean)
    if match:
        return match.group(1), ChannelIdKind.CUSTOM_NAME

    match = _USER_RE.search(clean)
    if match:
        return match.group(1), ChannelIdKind.LEGACY_USER

    return None
