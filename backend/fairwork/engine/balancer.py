"""Greedy auto-assignment of unclaimed tasks to the least-loaded member.

Classic list scheduling: tasks are taken in their existing order and each goes
to whichever eligible member currently carries the fewest hours. Loads live in
a min-heap keyed by (hours, position) so ties go to the member listed first.
"""
import heapq
import logging
from collections.abc import Awaitable, Callable, Sequence
from decimal import Decimal

from fairwork.engine.numeric import ZERO, to_decimal
from fairwork.schemas.records import MemberRecord, TaskRecord

logger = logging.getLogger("fairwork.engine.balancer")

# Write capability: (task_id, member_id | None) -> whether the write took effect.
AssignTask = Callable[[int, int | None], Awaitable[bool]]


class AssignmentWriteError(Exception):
    """A single assignment write could not be persisted."""


class PartialAssignmentError(Exception):
    """Some writes in an auto-assign batch failed.

    `assigned_count` is the number of tasks actually written, which is what the
    caller should report.
    """

    def __init__(self, assigned_count: int, failed_task_ids: list[int]) -> None:
        self.assigned_count = assigned_count
        self.failed_task_ids = failed_task_ids
        super().__init__(
            f"Assigned {assigned_count} task(s); {len(failed_task_ids)} failed: {failed_task_ids}"
        )


def eligible_members(members: Sequence[MemberRecord]) -> list[MemberRecord]:
    """Members whose role may receive automatic assignments, in input order."""
    return [m for m in members if m.role.is_assignable]


def current_loads(members: Sequence[MemberRecord], tasks: Sequence[TaskRecord]) -> dict[int, Decimal]:
    """Hours already assigned to each of the given members."""
    loads = {m.id: ZERO for m in members}
    for t in tasks:
        if t.assigned_to in loads:
            loads[t.assigned_to] += to_decimal(t.hours)
    return loads


class WorkloadBalancer:
    """Issues one assignment write per unassigned task, sequentially."""

    def __init__(self, assign_task: AssignTask) -> None:
        self.assign_task = assign_task

    async def auto_assign(self, tasks: Sequence[TaskRecord], members: Sequence[MemberRecord]) -> int:
        """Assign every unassigned task and return how many writes succeeded.

        Raises PartialAssignmentError after the batch if any write failed.
        """
        candidates = eligible_members(members)
        if not candidates:
            logger.info("No eligible members for auto-assignment")
            return 0
        targets = [t for t in tasks if t.assigned_to is None]
        if not targets:
            return 0

        loads = current_loads(candidates, tasks)
        heap = [(loads[m.id], position, m.id) for position, m in enumerate(candidates)]
        heapq.heapify(heap)

        assigned = 0
        failed: list[int] = []
        for task in targets:
            load, position, member_id = heapq.heappop(heap)
            try:
                ok = await self.assign_task(task.id, member_id)
            except AssignmentWriteError:
                logger.warning("Assignment write failed for task %s", task.id, exc_info=True)
                ok = False
            if ok:
                assigned += 1
                load += to_decimal(task.hours)
                logger.debug("Assigned task %s to member %s (load %s)", task.id, member_id, load)
            else:
                failed.append(task.id)
                logger.warning("Task %s was not assigned to member %s", task.id, member_id)
            heapq.heappush(heap, (load, position, member_id))

        logger.info("Auto-assigned %d of %d unassigned task(s)", assigned, len(targets))
        if failed:
            raise PartialAssignmentError(assigned, failed)
        return assigned


def summary_message(assigned_count: int) -> str:
    """User-facing outcome of an auto-assign run."""
    if assigned_count > 0:
        return f"Auto-assigned {assigned_count} unassigned task(s) to team members!"
    return "No unassigned tasks to distribute."
