"""Snapshot loading and per-member standings for a project."""
import logging
from datetime import date

from fairwork.engine.badges import badges
from fairwork.engine.balancer import WorkloadBalancer, summary_message
from fairwork.engine.contribution import rank_members
from fairwork.engine.streak import streak
from fairwork.schemas.assignment import AutoAssignResponse
from fairwork.schemas.contribution import MemberStanding
from fairwork.schemas.records import ProjectSnapshot
from fairwork.services.store import ProjectStore

logger = logging.getLogger("fairwork.services.standings")


async def load_snapshot(store: ProjectStore, project_id: int) -> ProjectSnapshot:
    """Read members, tasks, check-ins and peer reviews for one project."""
    return ProjectSnapshot(
        project_id=project_id,
        members=await store.list_members(project_id),
        tasks=await store.list_tasks(project_id),
        check_ins=await store.list_check_ins(project_id),
        peer_reviews=await store.list_peer_reviews(project_id),
    )


def build_standings(snapshot: ProjectSnapshot, reference_date: date) -> list[MemberStanding]:
    """Leaderboard: score, streak and badges per member, highest score first."""
    members = {m.id: m for m in snapshot.members}
    ranked = rank_members(snapshot.members, snapshot.tasks, snapshot.check_ins, snapshot.peer_reviews)
    standings = []
    for position, breakdown in enumerate(ranked, start=1):
        member = members[breakdown.member_id]
        standings.append(
            MemberStanding(
                member_id=member.id,
                name=member.name,
                role=member.role.value,
                rank=position,
                contribution_score=breakdown.score,
                streak_weeks=streak(member.id, snapshot.check_ins, reference_date),
                badges=badges(
                    member,
                    snapshot.tasks,
                    snapshot.check_ins,
                    snapshot.peer_reviews,
                    reference_date,
                ),
            )
        )
    return standings


async def auto_assign_project(store: ProjectStore, project_id: int) -> AutoAssignResponse:
    """Distribute a project's unassigned tasks through the store's write path.

    PartialAssignmentError from the balancer propagates to the caller.
    """
    members = await store.list_members(project_id)
    tasks = await store.list_tasks(project_id)
    balancer = WorkloadBalancer(store.assign_task)
    assigned = await balancer.auto_assign(tasks, members)
    logger.info("Project %s: auto-assigned %d task(s)", project_id, assigned)
    return AutoAssignResponse(assigned_count=assigned, message=summary_message(assigned))
