"""Consecutive-week check-in streaks over ISO week labels."""
from collections.abc import Sequence
from datetime import date, timedelta

from fairwork.schemas.records import CheckInRecord, MemberRecord

MAX_STREAK_WEEKS = 52


def iso_week_label(day: date) -> str:
    """ISO week of `day` as YYYY-Www, e.g. 2026-W03."""
    year, week, _ = day.isocalendar()
    return f"{year}-W{week:02d}"


def checked_in_weeks(member_id: int, check_ins: Sequence[CheckInRecord]) -> set[str]:
    return {c.week_of for c in check_ins if c.member_id == member_id}


def streak(member_id: int, check_ins: Sequence[CheckInRecord], reference_date: date) -> int:
    """Count weeks with a check-in, walking back from the reference week.

    Stops at the first week without one and never looks further back than
    MAX_STREAK_WEEKS.
    """
    weeks = checked_in_weeks(member_id, check_ins)
    if not weeks:
        return 0

    count = 0
    day = reference_date
    for _ in range(MAX_STREAK_WEEKS):
        if iso_week_label(day) not in weeks:
            break
        count += 1
        day -= timedelta(weeks=1)
    return count


def members_missing_check_in(
    members: Sequence[MemberRecord],
    check_ins: Sequence[CheckInRecord],
    reference_date: date,
) -> list[MemberRecord]:
    """Members with no check-in during the reference week."""
    week = iso_week_label(reference_date)
    checked_in = {c.member_id for c in check_ins if c.week_of == week}
    return [m for m in members if m.id not in checked_in]
