"""Summary metrics over a list of reaction records"""
from typing import Dict, List, Optional, Sequence

from pydantic import BaseModel, Field

from core.models import Reaction, Video

TOP_N = 10


class Channel(BaseModel):
    """Reacting channel with its number of reactions"""
    id: Optional[str] = None
    title: str
    count: int = Field(default=0, ge=0)

    model_config = {"frozen": True}


class TopVideo(Video):
    """Reacted-to video with the number of reactions targeting it"""
    count: int = Field(default=0, ge=0)

    model_config = {"populate_by_name": True, "frozen": True}


class Metrics(BaseModel):
    """Immutable snapshot of aggregated reaction metrics"""
    reactions: int = 0
    videos: int = 0
    channels: int = 0
    recent: List[Video] = Field(default_factory=list)
    top_videos: List[TopVideo] = Field(default_factory=list, alias="topVideos")
    top_channels: List[Channel] = Field(default_factory=list, alias="topChannels")

    model_config = {"populate_by_name": True, "frozen": True}


def compute_metrics(reactions: Sequence[Reaction], top_n: int = TOP_N) -> Metrics:
    """
    Derive summary metrics from a raw reaction list.

    Counts distinct videos across both roles, reactions per target video and
    reactions per reacting channel. Rankings use a stable descending sort, so
    equal keys keep their first-seen input order.

    Args:
        reactions: Complete, already-fetched reaction list
        top_n: Maximum length of each ranked list

    Returns:
        Metrics: Snapshot with all lists present (possibly empty)

    Raises:
        ValueError: top_n is not positive
    """
    if top_n < 1:
        raise ValueError(f"top_n must be positive, got {top_n}")

    video_by_id: Dict[str, Video] = {}
    count_by_target: Dict[str, int] = {}
    channel_counts: Dict[Optional[str], int] = {}
    channel_titles: Dict[Optional[str], str] = {}

    for item in reactions:
        reacting, target = item.reaction, item.reaction_to

        # last write wins; ids are assumed to describe the same video everywhere
        video_by_id[reacting.id] = reacting
        video_by_id[target.id] = target

        count_by_target[target.id] = count_by_target.get(target.id, 0) + 1

        # reactions without a channel title are not attributed to any channel
        if reacting.channel_title:
            if reacting.channel_id not in channel_counts:
                channel_counts[reacting.channel_id] = 0
                channel_titles[reacting.channel_id] = reacting.channel_title
            channel_counts[reacting.channel_id] += 1

    recent = sorted(reactions, key=lambda r: r.created_at, reverse=True)[:top_n]

    top_videos = [
        TopVideo(**video_by_id[video_id].model_dump(), count=count)
        for video_id, count in count_by_target.items()
    ]
    top_videos = sorted(top_videos, key=lambda v: v.count, reverse=True)[:top_n]

    top_channels = [
        Channel(id=channel_id, title=channel_titles[channel_id], count=count)
        for channel_id, count in channel_counts.items()
    ]
    top_channels = sorted(top_channels, key=lambda c: c.count, reverse=True)[:top_n]

    return Metrics(
        reactions=len(reactions),
        videos=len(video_by_id),
        channels=len(channel_counts),
        recent=[r.reaction for r in recent],
        top_videos=top_videos,
        top_channels=top_channels,
    )
