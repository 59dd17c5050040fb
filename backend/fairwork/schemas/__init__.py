"""Pydantic schemas."""
from fairwork.schemas.assignment import AutoAssignResponse, TaskAssigneeUpdate
from fairwork.schemas.contribution import (
    BADGE_LABELS,
    BadgeRecord,
    BadgeType,
    CheckInReminder,
    ContributionBreakdown,
    MemberStanding,
    StreakResponse,
)
from fairwork.schemas.fairness import FairnessReport, FairnessStatus, MemberEffortShare
from fairwork.schemas.records import (
    CheckInRecord,
    JsonDecimal,
    MemberRecord,
    PeerReviewRecord,
    ProjectSnapshot,
    TaskRecord,
    WorkLogRecord,
)

__all__ = [
    "AutoAssignResponse",
    "TaskAssigneeUpdate",
    "BADGE_LABELS",
    "BadgeRecord",
    "BadgeType",
    "CheckInReminder",
    "ContributionBreakdown",
    "MemberStanding",
    "StreakResponse",
    "FairnessReport",
    "FairnessStatus",
    "MemberEffortShare",
    "CheckInRecord",
    "JsonDecimal",
    "MemberRecord",
    "PeerReviewRecord",
    "ProjectSnapshot",
    "TaskRecord",
    "WorkLogRecord",
]
