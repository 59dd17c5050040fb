"""Effort model: hours from assigned tasks plus self-reported contribution."""
from collections.abc import Iterable
from decimal import Decimal

from fairwork.engine.numeric import ZERO, to_decimal
from fairwork.schemas.records import MemberRecord, TaskRecord

# A self-reported task without a duration earns half an hour of credit.
MANUAL_TASK_HOURS = Decimal("0.5")


def assigned_tasks(member_id: int, tasks: Iterable[TaskRecord]) -> list[TaskRecord]:
    """Tasks currently assigned to the member, in input order."""
    return [t for t in tasks if t.assigned_to == member_id]


def task_hours(member: MemberRecord, tasks: Iterable[TaskRecord]) -> Decimal:
    """Sum of estimated hours over the member's assigned tasks."""
    return sum((to_decimal(t.hours) for t in assigned_tasks(member.id, tasks)), ZERO)


def manual_contribution(member: MemberRecord) -> Decimal:
    """Manual hours + manual tasks × 0.5."""
    return to_decimal(member.manual_hours) + Decimal(member.manual_tasks or 0) * MANUAL_TASK_HOURS


def effort(member: MemberRecord, tasks: Iterable[TaskRecord]) -> Decimal:
    """Total effort units = task hours + manual contribution."""
    return task_hours(member, tasks) + manual_contribution(member)
