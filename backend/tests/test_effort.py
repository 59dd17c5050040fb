"""
Effort model: task hours plus manual hours and half-hour manual tasks.
"""
from decimal import Decimal

from fairwork.engine.effort import assigned_tasks, effort, manual_contribution, task_hours
from fairwork.schemas.records import MemberRecord, TaskRecord, WorkLogRecord

from tests.utils import member, task


class TestTaskHours:
    def test_sums_only_assigned_tasks(self):
        tasks = [task(1, assigned_to=1, hours=4), task(2, assigned_to=1, hours=1.5), task(3, assigned_to=2, hours=10)]
        assert task_hours(member(1), tasks) == Decimal("5.5")

    def test_no_tasks(self):
        assert task_hours(member(1), []) == Decimal(0)

    def test_assigned_tasks_keep_order(self):
        tasks = [task(3, assigned_to=1), task(1, assigned_to=2), task(2, assigned_to=1)]
        assert [t.id for t in assigned_tasks(1, tasks)] == [3, 2]


class TestManualContribution:
    def test_manual_task_worth_half_hour(self):
        assert manual_contribution(member(1, manual_hours=2, manual_tasks=3)) == Decimal("3.5")

    def test_zero(self):
        assert manual_contribution(member(1)) == Decimal(0)


class TestEffort:
    def test_combines_task_and_manual(self):
        tasks = [task(1, assigned_to=1, hours=4), task(2, assigned_to=1, hours=1.5), task(3, assigned_to=2, hours=10)]
        assert effort(member(1, manual_hours=2, manual_tasks=3), tasks) == Decimal("9.0")

    def test_manual_only(self):
        assert effort(member(1, manual_hours=10, manual_tasks=5), []) == Decimal("12.5")


class TestMissingNumbers:
    def test_missing_task_hours_count_as_zero(self):
        t = TaskRecord(id=1, assigned_to=1, hours=None)
        assert t.hours == Decimal(0)
        assert effort(member(1), [t]) == Decimal(0)

    def test_missing_manual_fields_count_as_zero(self):
        m = MemberRecord(id=1, name="Alice", manual_hours=None, manual_tasks=None)
        assert effort(m, []) == Decimal(0)

    def test_missing_work_log_hours(self):
        log = WorkLogRecord(author="Alice", content="notes", hours_spent=None)
        assert log.hours_spent == Decimal(0)

    def test_missing_work_logs(self):
        assert TaskRecord(id=1, work_logs=None).work_logs == []
