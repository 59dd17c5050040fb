"""Persistence collaborator: project snapshots and single-task assignment writes."""
import logging
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from fairwork.engine.balancer import AssignmentWriteError
from fairwork.models.activity import CheckIn, PeerReview
from fairwork.models.member import Member
from fairwork.models.project import Project
from fairwork.models.task import Task
from fairwork.schemas.records import CheckInRecord, MemberRecord, PeerReviewRecord, TaskRecord

logger = logging.getLogger("fairwork.services.store")


class ProjectStore(Protocol):
    async def project_exists(self, project_id: int) -> bool: ...

    async def list_members(self, project_id: int) -> list[MemberRecord]: ...

    async def list_tasks(self, project_id: int) -> list[TaskRecord]: ...

    async def list_check_ins(self, project_id: int) -> list[CheckInRecord]: ...

    async def list_peer_reviews(self, project_id: int) -> list[PeerReviewRecord]: ...

    async def assign_task(self, task_id: int, member_id: int | None) -> bool: ...


class SqlProjectStore:
    """ProjectStore over an async SQLAlchemy session.

    Each assignment is committed on its own so one failed write leaves earlier
    ones in place.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def project_exists(self, project_id: int) -> bool:
        return await self.db.get(Project, project_id) is not None

    async def list_members(self, project_id: int) -> list[MemberRecord]:
        result = await self.db.execute(
            select(Member).where(Member.project_id == project_id).order_by(Member.id)
        )
        return [MemberRecord.model_validate(m) for m in result.scalars().all()]

    async def list_tasks(self, project_id: int) -> list[TaskRecord]:
        result = await self.db.execute(
            select(Task)
            .where(Task.project_id == project_id)
            .order_by(Task.id)
            .options(selectinload(Task.work_logs))
        )
        return [TaskRecord.model_validate(t) for t in result.scalars().all()]

    async def list_check_ins(self, project_id: int) -> list[CheckInRecord]:
        result = await self.db.execute(
            select(CheckIn).where(CheckIn.project_id == project_id).order_by(CheckIn.id)
        )
        return [CheckInRecord.model_validate(c) for c in result.scalars().all()]

    async def list_peer_reviews(self, project_id: int) -> list[PeerReviewRecord]:
        result = await self.db.execute(
            select(PeerReview).where(PeerReview.project_id == project_id).order_by(PeerReview.id)
        )
        return [PeerReviewRecord.model_validate(r) for r in result.scalars().all()]

    async def assign_task(self, task_id: int, member_id: int | None) -> bool:
        """Set or clear a task's assignee.

        Returns False when the task does not exist or the member belongs to a
        different project. Raises AssignmentWriteError on any database error,
        whether in the lookups or the commit.
        """
        try:
            task = await self.db.get(Task, task_id)
            if not task:
                return False
            if member_id is not None:
                member = await self.db.get(Member, member_id)
                if not member or member.project_id != task.project_id:
                    return False
            task.assigned_to = member_id
            await self.db.commit()
        except SQLAlchemyError as exc:
            logger.exception("Failed to assign task %s to member %s", task_id, member_id)
            await self.db.rollback()
            raise AssignmentWriteError(f"Could not assign task {task_id}") from exc
        return True
