"""SQLAlchemy models."""
from fairwork.models.activity import CheckIn, PeerReview
from fairwork.models.member import ASSIGNABLE_ROLES, Member, MemberRole
from fairwork.models.project import Project
from fairwork.models.task import Task, TaskStatus, WorkLog

__all__ = [
    "ASSIGNABLE_ROLES",
    "CheckIn",
    "Member",
    "MemberRole",
    "PeerReview",
    "Project",
    "Task",
    "TaskStatus",
    "WorkLog",
]
