"""Manual task assignment API route."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from fairwork.deps import get_store
from fairwork.engine.balancer import AssignmentWriteError
from fairwork.schemas.assignment import TaskAssigneeUpdate
from fairwork.schemas.records import TaskRecord
from fairwork.services.store import ProjectStore

router = APIRouter(prefix="/projects", tags=["tasks"])


@router.patch("/{project_id}/tasks/{task_id}/assignee", response_model=TaskRecord)
async def set_task_assignee(
    project_id: int,
    task_id: int,
    data: TaskAssigneeUpdate,
    store: Annotated[ProjectStore, Depends(get_store)],
):
    tasks = await store.list_tasks(project_id)
    if not any(t.id == task_id for t in tasks):
        raise HTTPException(status_code=404, detail="Task not found")
    if data.member_id is not None:
        members = await store.list_members(project_id)
        if not any(m.id == data.member_id for m in members):
            raise HTTPException(status_code=400, detail="Member is not part of this project")
    try:
        ok = await store.assign_task(task_id, data.member_id)
    except AssignmentWriteError as exc:
        raise HTTPException(status_code=502, detail=str(exc))
    if not ok:
        raise HTTPException(status_code=400, detail="Task could not be assigned")
    refreshed = await store.list_tasks(project_id)
    return next(t for t in refreshed if t.id == task_id)
