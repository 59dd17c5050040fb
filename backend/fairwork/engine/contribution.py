"""Composite contribution score from five activity channels.

Each channel multiplies a raw quantity by a weight and a scale. The constants
are fixed so scores stay comparable across projects; the result is a ranking
signal and does not sum to any total across members.
"""
from collections.abc import Sequence
from decimal import Decimal

from fairwork.engine.effort import assigned_tasks
from fairwork.engine.numeric import ZERO, round_one, to_decimal
from fairwork.schemas.contribution import ContributionBreakdown
from fairwork.schemas.records import CheckInRecord, MemberRecord, PeerReviewRecord, TaskRecord

TASK_HOURS_WEIGHT = Decimal("0.4")
TASK_COUNT_WEIGHT, TASK_COUNT_SCALE = Decimal("0.2"), Decimal(5)
WORK_LOG_WEIGHT, WORK_LOG_SCALE = Decimal("0.15"), Decimal(3)
CHECK_IN_WEIGHT, CHECK_IN_SCALE = Decimal("0.1"), Decimal(10)
PEER_REVIEW_WEIGHT, PEER_REVIEW_SCALE = Decimal("0.15"), Decimal(4)


def reviews_for(member_id: int, peer_reviews: Sequence[PeerReviewRecord]) -> list[PeerReviewRecord]:
    return [r for r in peer_reviews if r.reviewed_member_id == member_id]


def peer_review_average(member_id: int, peer_reviews: Sequence[PeerReviewRecord]) -> Decimal | None:
    """Mean score received, or None without reviews."""
    received = reviews_for(member_id, peer_reviews)
    if not received:
        return None
    return Decimal(sum(r.score for r in received)) / Decimal(len(received))


def authored_work_logs(member: MemberRecord, tasks: Sequence[TaskRecord]) -> int:
    """Work log entries written by the member on their own assigned tasks."""
    return sum(
        1
        for t in assigned_tasks(member.id, tasks)
        for log in t.work_logs
        if log.author == member.name
    )


def score_breakdown(
    member: MemberRecord,
    tasks: Sequence[TaskRecord],
    check_ins: Sequence[CheckInRecord],
    peer_reviews: Sequence[PeerReviewRecord],
) -> ContributionBreakdown:
    own_tasks = assigned_tasks(member.id, tasks)
    hours = sum((to_decimal(t.hours) for t in own_tasks), ZERO)
    check_in_count = sum(1 for c in check_ins if c.member_id == member.id)
    average = peer_review_average(member.id, peer_reviews)

    hours_points = hours * TASK_HOURS_WEIGHT
    count_points = len(own_tasks) * TASK_COUNT_WEIGHT * TASK_COUNT_SCALE
    log_points = authored_work_logs(member, tasks) * WORK_LOG_WEIGHT * WORK_LOG_SCALE
    check_in_points = check_in_count * CHECK_IN_WEIGHT * CHECK_IN_SCALE
    peer_points = (average or ZERO) * PEER_REVIEW_WEIGHT * PEER_REVIEW_SCALE

    total = hours_points + count_points + log_points + check_in_points + peer_points
    return ContributionBreakdown(
        member_id=member.id,
        name=member.name,
        task_hours_points=hours_points,
        task_count_points=count_points,
        work_log_points=log_points,
        check_in_points=check_in_points,
        peer_review_points=peer_points,
        score=round_one(total),
    )


def score(
    member: MemberRecord,
    tasks: Sequence[TaskRecord],
    check_ins: Sequence[CheckInRecord] = (),
    peer_reviews: Sequence[PeerReviewRecord] = (),
) -> Decimal:
    """Contribution score rounded to one decimal."""
    return score_breakdown(member, tasks, check_ins, peer_reviews).score


def rank_members(
    members: Sequence[MemberRecord],
    tasks: Sequence[TaskRecord],
    check_ins: Sequence[CheckInRecord] = (),
    peer_reviews: Sequence[PeerReviewRecord] = (),
) -> list[ContributionBreakdown]:
    """Breakdowns ordered by score, highest first; ties keep input order."""
    breakdowns = [score_breakdown(m, tasks, check_ins, peer_reviews) for m in members]
    return sorted(breakdowns, key=lambda b: b.score, reverse=True)
