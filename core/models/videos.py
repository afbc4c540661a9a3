from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, field_validator


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Read timestamps without an offset as UTC"""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Video(BaseModel):
    """YouTube video as reported by the reactions API"""
    id: str = Field(..., description="YouTube video ID")
    title: str = Field(default="", description="Video title")
    thumbnail: Optional[str] = Field(default=None, description="Thumbnail URL")
    published_at: Optional[datetime] = Field(default=None, alias="publishedAt")
    channel_id: Optional[str] = Field(default=None, alias="channelId")
    channel_title: Optional[str] = Field(default=None, alias="channelTitle")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    model_config = {"populate_by_name": True}

    @field_validator("published_at", "created_at", "updated_at")
    @classmethod
    def timestamps_as_utc(cls, v):
        return as_utc(v)
