from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ShortsIdea(_CamelModel):
    """A presentable short-form clip suggestion."""

    clip_time: str = Field(..., description="MM:SS-MM:SS range inside the source video")
    title: str
    description: str
    hashtags: List[str]
    captions: str = Field(..., description="Newline-joined, emoji-prefixed caption lines")


class VideoIdeasResult(_CamelModel):
    video_id: str
    video_title: str
    channel_name: Optional[str] = None
    ideas: List[ShortsIdea] = Field(default_factory=list)


class ChannelIdeasResult(_CamelModel):
    channel_name: str
    ideas: List[ShortsIdea]
    videos: List[VideoIdeasResult]
