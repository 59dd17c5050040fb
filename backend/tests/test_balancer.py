"""
Greedy auto-assignment: least-loaded member first, sherpas excluded, failures reported.
"""
import pytest

from fairwork.engine.balancer import (
    PartialAssignmentError,
    WorkloadBalancer,
    current_loads,
    eligible_members,
    summary_message,
)
from fairwork.models.member import MemberRole

from tests.utils import InMemoryStore, member, task

TEAM = [member(1, "Alice"), member(2, "Bob"), member(3, "Charlie")]


def _unassigned(hours):
    return [task(i, hours=h) for i, h in enumerate(hours, start=1)]


def _final_loads(store, members):
    return current_loads(members, list(store.tasks.values()))


class TestEligibility:
    def test_sherpa_is_not_assignable(self):
        assert MemberRole.MEMBER.is_assignable
        assert not MemberRole.SHERPA.is_assignable

    def test_filters_sherpas_keeping_order(self):
        members = [member(1), member(2, role=MemberRole.SHERPA), member(3)]
        assert [m.id for m in eligible_members(members)] == [1, 3]


class TestAutoAssign:
    async def test_greedy_spread(self):
        tasks = _unassigned([5, 3, 7, 4])
        store = InMemoryStore(members=TEAM, tasks=tasks)
        assigned = await WorkloadBalancer(store.assign_task).auto_assign(tasks, TEAM)
        assert assigned == 4
        assert store.writes == [(1, 1), (2, 2), (3, 3), (4, 2)]
        loads = _final_loads(store, TEAM)
        assert max(loads.values()) - min(loads.values()) <= 7

    async def test_existing_load_is_respected(self):
        tasks = [task(1, assigned_to=1, hours=10), task(2, hours=2), task(3, hours=2)]
        members = TEAM[:2]
        store = InMemoryStore(members=members, tasks=tasks)
        assert await WorkloadBalancer(store.assign_task).auto_assign(tasks, members) == 2
        assert store.writes == [(2, 2), (3, 2)]

    async def test_already_assigned_tasks_untouched(self):
        tasks = [task(1, assigned_to=3, hours=1), task(2, hours=1)]
        store = InMemoryStore(members=TEAM, tasks=tasks)
        await WorkloadBalancer(store.assign_task).auto_assign(tasks, TEAM)
        assert [w[0] for w in store.writes] == [2]

    async def test_sherpa_never_receives_work(self):
        members = [member(1, role=MemberRole.SHERPA), member(2, manual_hours=50)]
        tasks = _unassigned([1, 1, 1])
        store = InMemoryStore(members=members, tasks=tasks)
        assert await WorkloadBalancer(store.assign_task).auto_assign(tasks, members) == 3
        assert {w[1] for w in store.writes} == {2}

    async def test_all_sherpas(self):
        members = [member(1, role=MemberRole.SHERPA), member(2, role=MemberRole.SHERPA)]
        tasks = _unassigned([5, 3])
        store = InMemoryStore(members=members, tasks=tasks)
        assert await WorkloadBalancer(store.assign_task).auto_assign(tasks, members) == 0
        assert store.writes == []

    async def test_nothing_to_assign(self):
        tasks = [task(1, assigned_to=1, hours=3)]
        store = InMemoryStore(members=TEAM, tasks=tasks)
        assert await WorkloadBalancer(store.assign_task).auto_assign(tasks, TEAM) == 0
        assert store.writes == []

    async def test_no_members(self):
        tasks = _unassigned([1])
        store = InMemoryStore(tasks=tasks)
        assert await WorkloadBalancer(store.assign_task).auto_assign(tasks, []) == 0
        assert store.writes == []


class TestWriteFailures:
    async def test_failed_write_reported_with_true_count(self):
        tasks = _unassigned([5, 3, 7, 4])
        store = InMemoryStore(members=TEAM, tasks=tasks, failing_task_ids=[2])
        with pytest.raises(PartialAssignmentError) as excinfo:
            await WorkloadBalancer(store.assign_task).auto_assign(tasks, TEAM)
        assert excinfo.value.assigned_count == 3
        assert excinfo.value.failed_task_ids == [2]
        # Bob's load stays at zero after the failed write, so he takes the next task
        assert store.writes == [(1, 1), (2, 2), (3, 2), (4, 3)]
        assert store.tasks[2].assigned_to is None

    async def test_rejected_write_counts_as_failure(self):
        tasks = _unassigned([1, 1])
        store = InMemoryStore(members=TEAM, tasks=tasks, rejected_task_ids=[1])
        with pytest.raises(PartialAssignmentError) as excinfo:
            await WorkloadBalancer(store.assign_task).auto_assign(tasks, TEAM)
        assert excinfo.value.assigned_count == 1
        assert excinfo.value.failed_task_ids == [1]

    async def test_unexpected_errors_propagate(self):
        async def broken(task_id, member_id):
            raise RuntimeError("store unavailable")

        with pytest.raises(RuntimeError):
            await WorkloadBalancer(broken).auto_assign(_unassigned([1]), TEAM)


class TestSummaryMessage:
    def test_some_assigned(self):
        assert summary_message(3) == "Auto-assigned 3 unassigned task(s) to team members!"

    def test_none_assigned(self):
        assert summary_message(0) == "No unassigned tasks to distribute."
