"""Fairness, contribution and auto-assignment API routes."""
from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from fairwork.deps import get_reference_date, get_store
from fairwork.engine.badges import badges
from fairwork.engine.balancer import PartialAssignmentError
from fairwork.engine.fairness import classify
from fairwork.engine.streak import iso_week_label, members_missing_check_in, streak
from fairwork.schemas.assignment import AutoAssignResponse
from fairwork.schemas.contribution import BadgeRecord, CheckInReminder, MemberStanding, StreakResponse
from fairwork.schemas.fairness import FairnessReport
from fairwork.schemas.records import MemberRecord, ProjectSnapshot
from fairwork.services.standings import auto_assign_project, build_standings, load_snapshot
from fairwork.services.store import ProjectStore

router = APIRouter(prefix="/projects", tags=["insights"])


async def _load_project(store: ProjectStore, project_id: int) -> ProjectSnapshot:
    if not await store.project_exists(project_id):
        raise HTTPException(status_code=404, detail="Project not found")
    return await load_snapshot(store, project_id)


def _get_member(snapshot: ProjectSnapshot, member_id: int) -> MemberRecord:
    member = next((m for m in snapshot.members if m.id == member_id), None)
    if not member:
        raise HTTPException(status_code=404, detail="Member not found")
    return member


@router.get("/{project_id}/fairness", response_model=FairnessReport)
async def get_fairness(
    project_id: int,
    store: Annotated[ProjectStore, Depends(get_store)],
):
    snapshot = await _load_project(store, project_id)
    return classify(snapshot.members, snapshot.tasks)


@router.get("/{project_id}/standings", response_model=list[MemberStanding])
async def get_standings(
    project_id: int,
    store: Annotated[ProjectStore, Depends(get_store)],
    today: Annotated[date, Depends(get_reference_date)],
):
    """Leaderboard ordered by contribution score, with streaks and badges."""
    snapshot = await _load_project(store, project_id)
    return build_standings(snapshot, today)


@router.get("/{project_id}/members/{member_id}/streak", response_model=StreakResponse)
async def get_streak(
    project_id: int,
    member_id: int,
    store: Annotated[ProjectStore, Depends(get_store)],
    today: Annotated[date, Depends(get_reference_date)],
):
    snapshot = await _load_project(store, project_id)
    member = _get_member(snapshot, member_id)
    return StreakResponse(
        member_id=member.id,
        week_of=iso_week_label(today),
        streak_weeks=streak(member.id, snapshot.check_ins, today),
    )


@router.get("/{project_id}/members/{member_id}/badges", response_model=list[BadgeRecord])
async def get_badges(
    project_id: int,
    member_id: int,
    store: Annotated[ProjectStore, Depends(get_store)],
    today: Annotated[date, Depends(get_reference_date)],
):
    snapshot = await _load_project(store, project_id)
    member = _get_member(snapshot, member_id)
    return badges(member, snapshot.tasks, snapshot.check_ins, snapshot.peer_reviews, today)


@router.get("/{project_id}/check-in-reminders", response_model=list[CheckInReminder])
async def get_check_in_reminders(
    project_id: int,
    store: Annotated[ProjectStore, Depends(get_store)],
    today: Annotated[date, Depends(get_reference_date)],
):
    """Members who have not checked in this week."""
    snapshot = await _load_project(store, project_id)
    week = iso_week_label(today)
    return [
        CheckInReminder(member_id=m.id, name=m.name, week_of=week)
        for m in members_missing_check_in(snapshot.members, snapshot.check_ins, today)
    ]


@router.post("/{project_id}/auto-assign", response_model=AutoAssignResponse)
async def auto_assign(
    project_id: int,
    store: Annotated[ProjectStore, Depends(get_store)],
):
    """Distribute unassigned tasks to the least-loaded non-sherpa members."""
    if not await store.project_exists(project_id):
        raise HTTPException(status_code=404, detail="Project not found")
    try:
        return await auto_assign_project(store, project_id)
    except PartialAssignmentError as exc:
        raise HTTPException(
            status_code=502,
            detail={
                "message": f"Auto-assigned {exc.assigned_count} task(s); some assignments failed",
                "assigned_count": exc.assigned_count,
                "failed_task_ids": exc.failed_task_ids,
            },
        )
