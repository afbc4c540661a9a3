"""Common test fixtures for all test modules"""
import pytest
from datetime import datetime, timedelta, timezone

from core.models import Reaction, Video


BASE_TIME = datetime(2025, 1, 1, 10, 0, tzinfo=timezone.utc)


def make_video(video_id, title=None, channel_id=None, channel_title=None, **fields):
    return Video(
        id=video_id,
        title=title if title is not None else f"Video {video_id}",
        thumbnail=f"https://i.ytimg.com/vi/{video_id}/default.jpg",
        channel_id=channel_id,
        channel_title=channel_title,
        **fields
    )


def make_reaction(reaction_id, reaction, reaction_to, minutes=0, report_count=0):
    created_at = BASE_TIME + timedelta(minutes=minutes)
    return Reaction(
        reaction_id=reaction_id,
        video_id=reaction.id,
        created_at=created_at,
        updated_at=created_at,
        report_count=report_count,
        reaction=reaction,
        reaction_to=reaction_to,
    )


@pytest.fixture
def sample_reactions():
    """Small reaction set: two targets, three reacting channels, one untitled channel"""
    target_a = make_video("tA", title="Music video", channel_id="cT", channel_title="Label")
    target_b = make_video("tB", title="Trailer", channel_id="cT", channel_title="Label")

    r1 = make_video("r1", title="Reacting to music", channel_id="c1", channel_title="Alice")
    r2 = make_video("r2", title="First time hearing", channel_id="c2", channel_title="Bob")
    r3 = make_video("r3", title="Trailer breakdown", channel_id="c1", channel_title="Alice")
    r4 = make_video("r4", title="Untitled channel reacts", channel_id="c9", channel_title="")

    return [
        make_reaction("x1", r1, target_a, minutes=0, report_count=2),
        make_reaction("x2", r2, target_a, minutes=30, report_count=0),
        make_reaction("x3", r3, target_b, minutes=10, report_count=5),
        make_reaction("x4", r4, target_a, minutes=20, report_count=1),
    ]


@pytest.fixture
def reactions_payload():
    """Reactions API JSON payload (camelCase, ISO timestamps)"""
    return [
        {
            "reactionId": "x1",
            "videoId": "r1",
            "createdAt": "2025-01-01T10:00:00.000Z",
            "updatedAt": "2025-01-01T10:00:00.000Z",
            "reportCount": 0,
            "reaction": {
                "id": "r1",
                "title": "Reacting to music",
                "thumbnail": "https://i.ytimg.com/vi/r1/default.jpg",
                "publishedAt": "2024-12-31T09:00:00.000Z",
                "channelId": "c1",
                "channelTitle": "Alice",
                "createdAt": "2025-01-01T10:00:00.000Z",
                "updatedAt": "2025-01-01T10:00:00.000Z"
            },
            "reactionTo": {
                "id": "tA",
                "title": "Music video",
                "thumbnail": "https://i.ytimg.com/vi/tA/default.jpg",
                "publishedAt": "2024-12-01T09:00:00.000Z",
                "channelId": "cT",
                "channelTitle": "Label",
                "createdAt": "2025-01-01T10:00:00.000Z",
                "updatedAt": "2025-01-01T10:00:00.000Z"
            }
        }
    ]


@pytest.fixture
def video_factory():
    return make_video


@pytest.fixture
def reaction_factory():
    return make_reaction
