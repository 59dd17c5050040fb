"""Contribution score, streak and badge schemas."""
from enum import Enum

from pydantic import BaseModel

from fairwork.schemas.records import JsonDecimal


class BadgeType(str, Enum):
    RELIABLE = "reliable"
    CLARITY_CHAMPION = "clarity-champion"
    ON_TIME_HERO = "on-time-hero"
    TEAM_PLAYER = "team-player"
    # Declared for display; no earning rule exists yet
    INNOVATOR = "innovator"


BADGE_LABELS: dict[BadgeType, str] = {
    BadgeType.RELIABLE: "Reliable",
    BadgeType.CLARITY_CHAMPION: "Clarity Champion",
    BadgeType.ON_TIME_HERO: "On-Time Hero",
    BadgeType.TEAM_PLAYER: "Team Player",
    BadgeType.INNOVATOR: "Innovator",
}


class BadgeRecord(BaseModel):
    type: BadgeType
    label: str
    description: str


class ContributionBreakdown(BaseModel):
    """Per-channel values of the contribution score. `score` is rounded."""

    member_id: int
    name: str
    task_hours_points: JsonDecimal
    task_count_points: JsonDecimal
    work_log_points: JsonDecimal
    check_in_points: JsonDecimal
    peer_review_points: JsonDecimal
    score: JsonDecimal


class MemberStanding(BaseModel):
    member_id: int
    name: str
    role: str
    rank: int
    contribution_score: JsonDecimal
    streak_weeks: int
    badges: list[BadgeRecord]


class StreakResponse(BaseModel):
    member_id: int
    week_of: str
    streak_weeks: int


class CheckInReminder(BaseModel):
    member_id: int
    name: str
    week_of: str
