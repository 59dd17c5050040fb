"""Effort shares and the three-tier fairness verdict."""
from collections.abc import Iterable, Sequence
from decimal import Decimal

from fairwork.engine.effort import effort, task_hours
from fairwork.engine.numeric import ZERO, safe_ratio, to_decimal
from fairwork.schemas.fairness import FairnessReport, FairnessStatus, MemberEffortShare
from fairwork.schemas.records import MemberRecord, TaskRecord

# Fixed thresholds on unrounded percentage shares.
UNBALANCED_TOP_SHARE = Decimal(50)
SLIGHTLY_UNBALANCED_TOP_TWO_SHARE = Decimal(80)

HUNDRED = Decimal(100)


def status_from_percentages(percentages: Iterable[Decimal]) -> FairnessStatus:
    """Classify from the largest and two largest shares.

    A lone member holds 100% and is therefore "unbalanced"; no special case.
    """
    ranked = sorted(percentages, reverse=True)
    if not ranked:
        return FairnessStatus.BALANCED
    top = ranked[0]
    top_two = top + (ranked[1] if len(ranked) > 1 else ZERO)
    if top > UNBALANCED_TOP_SHARE:
        return FairnessStatus.UNBALANCED
    if top_two > SLIGHTLY_UNBALANCED_TOP_TWO_SHARE:
        return FairnessStatus.SLIGHTLY_UNBALANCED
    return FairnessStatus.BALANCED


def classify(members: Sequence[MemberRecord], tasks: Sequence[TaskRecord]) -> FairnessReport:
    """Per-member effort shares plus the team fairness status."""
    tasks = list(tasks)
    efforts = [(m, effort(m, tasks)) for m in members]
    total = sum((e for _, e in efforts), ZERO)

    shares = [
        MemberEffortShare(
            member_id=m.id,
            name=m.name,
            task_hours=task_hours(m, tasks),
            manual_hours=to_decimal(m.manual_hours),
            manual_tasks=m.manual_tasks or 0,
            total_effort=e,
            percentage=safe_ratio(e, total) * HUNDRED,
        )
        for m, e in efforts
    ]
    return FairnessReport(
        members=shares,
        total_effort=total,
        status=status_from_percentages(s.percentage for s in shares),
    )
