from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from .videos import Video, as_utc


class Reaction(BaseModel):
    """Directed record: `reaction` is a video reacting to `reaction_to`"""
    reaction_id: str = Field(..., alias="reactionId")
    video_id: str = Field(..., alias="videoId")
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")
    report_count: int = Field(default=0, ge=0, alias="reportCount")
    reaction: Video
    reaction_to: Video = Field(..., alias="reactionTo")

    model_config = {"populate_by_name": True}

    @field_validator("created_at", "updated_at")
    @classmethod
    def timestamps_as_utc(cls, v):
        return as_utc(v)
