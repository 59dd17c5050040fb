"""Achievement badges derived from activity records."""
from collections.abc import Sequence
from datetime import date
from decimal import Decimal

from fairwork.engine.contribution import peer_review_average, reviews_for
from fairwork.engine.effort import assigned_tasks
from fairwork.engine.numeric import round_one
from fairwork.engine.streak import streak
from fairwork.models.task import TaskStatus
from fairwork.schemas.contribution import BADGE_LABELS, BadgeRecord, BadgeType
from fairwork.schemas.records import CheckInRecord, MemberRecord, PeerReviewRecord, TaskRecord

RELIABLE_MIN_STREAK = 4
ON_TIME_MIN_TASKS = 3
ON_TIME_MIN_COMPLETION = Decimal("0.9")
TEAM_PLAYER_MIN_REVIEWS = 2
TEAM_PLAYER_MIN_AVERAGE = Decimal(4)


def _badge(badge_type: BadgeType, description: str) -> BadgeRecord:
    return BadgeRecord(type=badge_type, label=BADGE_LABELS[badge_type], description=description)


def badges(
    member: MemberRecord,
    tasks: Sequence[TaskRecord],
    check_ins: Sequence[CheckInRecord],
    peer_reviews: Sequence[PeerReviewRecord],
    reference_date: date,
) -> list[BadgeRecord]:
    """Evaluate every rule independently. INNOVATOR is never awarded."""
    earned: list[BadgeRecord] = []
    own_tasks = assigned_tasks(member.id, tasks)

    weeks = streak(member.id, check_ins, reference_date)
    if weeks >= RELIABLE_MIN_STREAK:
        earned.append(_badge(BadgeType.RELIABLE, f"{weeks} week check-in streak"))

    if own_tasks and all(
        any(log.author == member.name for log in t.work_logs) for t in own_tasks
    ):
        earned.append(_badge(BadgeType.CLARITY_CHAMPION, "Documents all tasks thoroughly"))

    completed = sum(1 for t in own_tasks if t.status == TaskStatus.DONE)
    if (
        len(own_tasks) >= ON_TIME_MIN_TASKS
        and Decimal(completed) / Decimal(len(own_tasks)) >= ON_TIME_MIN_COMPLETION
    ):
        earned.append(_badge(BadgeType.ON_TIME_HERO, f"{completed}/{len(own_tasks)} tasks completed"))

    if len(reviews_for(member.id, peer_reviews)) >= TEAM_PLAYER_MIN_REVIEWS:
        average = peer_review_average(member.id, peer_reviews)
        if average is not None and average >= TEAM_PLAYER_MIN_AVERAGE:
            earned.append(_badge(BadgeType.TEAM_PLAYER, f"{round_one(average)}/5 peer rating"))

    return earned
