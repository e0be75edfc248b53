from __future__ import annotations

from pydantic import AwareDatetime

from .common import ActivityType, RecordModel


class Activity(RecordModel):
    type: ActivityType = ActivityType.OTHER
    title: str
    description: str | None = None
    value: float | None = None
    # Naive timestamps are rejected so the feed always sorts on comparable values
    timestamp: AwareDatetime
    user_id: str | None = None
    related_id: str | None = None
