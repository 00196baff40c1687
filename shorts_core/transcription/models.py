from pydantic import BaseModel, ConfigDict, Field


class TimedFragment(BaseModel):
    """One caption line of a transcript with its start offset and duration."""

    model_config = ConfigDict(frozen=True)

    text: str
    offset: float = Field(..., description="Start offset in seconds")
    duration: float = Field(..., description="Duration in seconds")

    @property
    def end(self) -> float:
        return self.offset + self.duration
