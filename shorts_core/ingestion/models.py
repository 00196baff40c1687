from enum import IntEnum
from typing import List, Optional

from pydantic import BaseModel, Field


class ChannelIdKind(IntEnum):
    """How a channel identifier should be resolved."""

    CHANNEL_ID = 1
    CUSTOM_NAME = 2
    HANDLE = 3
    LEGACY_USER = 4


class VideoMetadata(BaseModel):
    video_id: str
    title: str = Field(default="YouTube Video")
    channel_name: str = Field(default="Creator")
    description: str = Field(default="")
    length_seconds: int = Field(default=0)


class ChannelVideo(BaseModel):
    video_id: str
    title: str = Field(default="")


class ChannelListing(BaseModel):
    """Videos of a channel, or the alert the catalog returned instead."""

    channel_name: Optional[str] = None
    videos: List[ChannelVideo] = Field(default_factory=list)
    alert_message: Optional[str] = None
