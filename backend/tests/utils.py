"""Record factories and an in-memory store for engine and API tests."""
from __future__ import annotations

from collections.abc import Iterable
from datetime import date, timedelta

from fairwork.engine.balancer import AssignmentWriteError
from fairwork.engine.streak import iso_week_label
from fairwork.models.member import MemberRole
from fairwork.models.task import TaskStatus
from fairwork.schemas.records import (
    CheckInRecord,
    MemberRecord,
    PeerReviewRecord,
    TaskRecord,
    WorkLogRecord,
)

# Monday of ISO week 2026-W43
REFERENCE_DATE = date(2026, 10, 19)


def week_ago(weeks: int, reference: date = REFERENCE_DATE) -> str:
    return iso_week_label(reference - timedelta(weeks=weeks))


def member(
    member_id: int,
    name: str | None = None,
    role: MemberRole = MemberRole.MEMBER,
    manual_hours: float = 0,
    manual_tasks: int = 0,
) -> MemberRecord:
    return MemberRecord(
        id=member_id,
        name=name or f"Member {member_id}",
        role=role,
        manual_hours=manual_hours,
        manual_tasks=manual_tasks,
    )


def task(
    task_id: int,
    assigned_to: int | None = None,
    hours: float = 0,
    status: TaskStatus = TaskStatus.TODO,
    log_authors: Iterable[str] = (),
) -> TaskRecord:
    return TaskRecord(
        id=task_id,
        title=f"Task {task_id}",
        assigned_to=assigned_to,
        hours=hours,
        status=status,
        work_logs=[WorkLogRecord(author=a, content="progress") for a in log_authors],
    )


def check_in(member_id: int, week_of: str) -> CheckInRecord:
    return CheckInRecord(member_id=member_id, week_of=week_of, what_did_i_do="work")


def review(reviewer_id: int, reviewed_member_id: int, score: int, week_of: str = "2026-W43") -> PeerReviewRecord:
    return PeerReviewRecord(
        reviewer_id=reviewer_id,
        reviewed_member_id=reviewed_member_id,
        score=score,
        week_of=week_of,
    )


class InMemoryStore:
    """ProjectStore for a single project, recording every assignment write."""

    def __init__(
        self,
        project_id: int = 1,
        members: Iterable[MemberRecord] = (),
        tasks: Iterable[TaskRecord] = (),
        check_ins: Iterable[CheckInRecord] = (),
        peer_reviews: Iterable[PeerReviewRecord] = (),
        failing_task_ids: Iterable[int] = (),
        rejected_task_ids: Iterable[int] = (),
    ) -> None:
        self.project_id = project_id
        self.members = list(members)
        self.tasks = {t.id: t for t in tasks}
        self.check_ins = list(check_ins)
        self.peer_reviews = list(peer_reviews)
        self.failing_task_ids = set(failing_task_ids)
        self.rejected_task_ids = set(rejected_task_ids)
        self.writes: list[tuple[int, int | None]] = []

    def _scoped(self, project_id: int, items: list) -> list:
        return list(items) if project_id == self.project_id else []

    async def project_exists(self, project_id: int) -> bool:
        return project_id == self.project_id

    async def list_members(self, project_id: int) -> list[MemberRecord]:
        return self._scoped(project_id, self.members)

    async def list_tasks(self, project_id: int) -> list[TaskRecord]:
        return self._scoped(project_id, list(self.tasks.values()))

    async def list_check_ins(self, project_id: int) -> list[CheckInRecord]:
        return self._scoped(project_id, self.check_ins)

    async def list_peer_reviews(self, project_id: int) -> list[PeerReviewRecord]:
        return self._scoped(project_id, self.peer_reviews)

    async def assign_task(self, task_id: int, member_id: int | None) -> bool:
        self.writes.append((task_id, member_id))
        if task_id in self.failing_task_ids:
            raise AssignmentWriteError(f"Could not assign task {task_id}")
        if task_id in self.rejected_task_ids or task_id not in self.tasks:
            return False
        self.tasks[task_id] = self.tasks[task_id].model_copy(update={"assigned_to": member_id})
        return True
