"""Fairness classification result schemas."""
from enum import Enum

from pydantic import BaseModel, computed_field

from fairwork.engine.numeric import round_one
from fairwork.schemas.records import JsonDecimal


class FairnessStatus(str, Enum):
    BALANCED = "balanced"
    SLIGHTLY_UNBALANCED = "slightly-unbalanced"
    UNBALANCED = "unbalanced"


class MemberEffortShare(BaseModel):
    member_id: int
    name: str
    task_hours: JsonDecimal
    manual_hours: JsonDecimal
    manual_tasks: int
    total_effort: JsonDecimal
    # Unrounded; classification runs on this value
    percentage: JsonDecimal

    @computed_field
    @property
    def percentage_display(self) -> str:
        return f"{round_one(self.percentage)}%"


class FairnessReport(BaseModel):
    members: list[MemberEffortShare]
    total_effort: JsonDecimal
    status: FairnessStatus
