"""Snapshot records consumed by the scoring engine.

Rows from the persistence layer are validated into these immutable records
before any arithmetic runs. Optional numeric fields are coerced to zero here so
that missing values never reach the engine.
"""
from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, Field, PlainSerializer, field_validator

from fairwork.models.member import MemberRole
from fairwork.models.task import TaskStatus

# Decimal in Python, a plain number on the wire
JsonDecimal = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class MemberRecord(BaseModel):
    id: int
    name: str
    role: MemberRole = MemberRole.MEMBER
    manual_hours: Decimal = Decimal(0)
    manual_tasks: int = 0
    assigned_roles: list[str] = Field(default_factory=list)

    @field_validator("manual_hours", "manual_tasks", mode="before")
    @classmethod
    def zero_if_missing(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("assigned_roles", mode="before")
    @classmethod
    def empty_if_missing(cls, value: Any) -> Any:
        return [] if value is None else value

    class Config:
        from_attributes = True
        frozen = True


class WorkLogRecord(BaseModel):
    author: str
    content: str = ""
    hours_spent: Decimal = Decimal(0)

    @field_validator("hours_spent", mode="before")
    @classmethod
    def zero_if_missing(cls, value: Any) -> Any:
        return 0 if value is None else value

    class Config:
        from_attributes = True
        frozen = True


class TaskRecord(BaseModel):
    id: int
    title: str = ""
    assigned_to: int | None = None
    hours: Decimal = Decimal(0)
    status: TaskStatus = TaskStatus.TODO
    work_logs: list[WorkLogRecord] = Field(default_factory=list)

    @field_validator("hours", mode="before")
    @classmethod
    def zero_if_missing(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("work_logs", mode="before")
    @classmethod
    def empty_if_missing(cls, value: Any) -> Any:
        return [] if value is None else value

    class Config:
        from_attributes = True
        frozen = True


class CheckInRecord(BaseModel):
    member_id: int
    week_of: str  # YYYY-Www
    what_did_i_do: str = ""
    what_blocked_me: str = ""
    what_will_i_do_next: str = ""
    created_at: datetime | None = None

    class Config:
        from_attributes = True
        frozen = True


class PeerReviewRecord(BaseModel):
    """Reviewer identity is kept for de-duplication upstream; never rendered."""

    reviewer_id: int
    reviewed_member_id: int
    score: int
    week_of: str

    class Config:
        from_attributes = True
        frozen = True


class ProjectSnapshot(BaseModel):
    """Consistent read of one project, as handed to the engine."""

    project_id: int
    members: list[MemberRecord] = Field(default_factory=list)
    tasks: list[TaskRecord] = Field(default_factory=list)
    check_ins: list[CheckInRecord] = Field(default_factory=list)
    peer_reviews: list[PeerReviewRecord] = Field(default_factory=list)
