"""Task assignment schemas."""
from pydantic import BaseModel


class TaskAssigneeUpdate(BaseModel):
    """Manual assignment; None unassigns the task."""

    member_id: int | None = None


class AutoAssignResponse(BaseModel):
    assigned_count: int
    message: str
