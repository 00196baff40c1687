from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CandidateSegment(BaseModel):
    """A contiguous run of transcript fragments considered as one clip."""

    start: float = Field(..., description="Start time in seconds")
    end: float = Field(..., description="End time in seconds")
    text: str
    keywords: List[str] = Field(default_factory=list)
    score: float = Field(default=0.0, description="Heuristic short-form appeal")

    @property
    def duration(self) -> float:
        return self.end - self.start


class GenerationContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    video_id: str
    video_title: str
    channel_name: Optional[str] = None
