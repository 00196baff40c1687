from typing import Any, Dict

import yt_dlp
from loguru import logger

from shorts_core.config_manager import ConfigManager, IngestionConfig
from shorts_core.exceptions import VideoLookupError
from shorts_core.ingestion.models import ChannelIdKind, ChannelListing, ChannelVideo, VideoMetadata

WATCH_URL = "https://www.youtube.com/watch?v={video_id}"

CHANNEL_URL_TEMPLATES = {
    ChannelIdKind.CHANNEL_ID: "https://www.youtube.com/channel/{channel_id}/videos",
    ChannelIdKind.CUSTOM_NAME: "https://www.youtube.com/c/{channel_id}/videos",
    ChannelIdKind.HANDLE: "https://www.youtube.com/@{channel_id}/videos",
    ChannelIdKind.LEGACY_USER: "https://www.youtube.com/user/{channel_id}/videos",
}


class VideoMetadataFetcher:
    """
    Info-only wrapper around yt-dlp. Reads video details and channel listings
    without downloading any media.
    """

    def __init__(self, config_manager: ConfigManager):
        self.cfg: IngestionConfig = config_manager.ingestion

    def _ydl_options(self, **extra: Any) -> Dict[str, Any]:
        opts: Dict[str, Any] = {"quiet": True, "no_warnings": True, "skip_download": True}
        if self.cfg.cookies_file:
            opts["cookiefile"] = self.cfg.cookies_file
        opts.update(extra)
        return opts

    def fetch(self, video_id: str) -> VideoMetadata:
        url = WATCH_URL.format(video_id=video_id)
        logger.info(f"Fetching metadata for {video_id}")

        try:
            with yt_dlp.YoutubeDL(self._ydl_options()) as ydl:
                info = ydl.extract_info(url, download=False)
        except Exception as e:
            logger.error(f"Failed to extract info for {video_id}: {e}")
            raise VideoLookupError(f"Unable to read video {video_id}: {e}") from e

        return VideoMetadata(
            video_id=video_id,
            title=info.get("title") or "YouTube Video",
            channel_name=info.get("channel") or info.get("uploader") or "Creator",
            description=info.get("description") or "",
            length_seconds=int(info.get("duration") or 0),
        )

    def list_channel_videos(self, channel_id: str, kind: ChannelIdKind) -> ChannelListing:
        """
        Lists a channel's uploads in catalog order.

        Errors are reported through `alert_message` so the caller decides
        how to surface them.
        """
        url = CHANNEL_URL_TEMPLATES[ChannelIdKind(kind)].format(channel_id=channel_id)
        logger.info(f"Listing channel videos: {url}")

        opts = self._ydl_options(extract_flat="in_playlist", playlistend=self.cfg.channel_video_limit)
        try:
            with yt_dlp.YoutubeDL(opts) as ydl:
                info = ydl.extract_info(url, download=False)
        except Exception as e:
            logger.error(f"Failed to list channel {channel_id}: {e}")
            return ChannelListing(alert_message=str(e))

        videos = [
            ChannelVideo(video_id=entry["id"], title=entry.get("title") or "")
            for entry in info.get("entries") or []
            if entry and entry.get("id")
        ]
        channel_name = info.get("channel") or info.get("uploader") or None
        logger.debug(f"Channel {channel_id} listed {len(videos)} videos")
        return ChannelListing(channel_name=channel_name, videos=videos)
