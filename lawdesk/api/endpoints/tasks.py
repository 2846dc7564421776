from typing import List, Any
import logging
from fastapi import APIRouter, Depends, HTTPException, status

from lawdesk.core.auth import get_current_user
from lawdesk.core.database import get_storage
from lawdesk.schemas.base import Message
from lawdesk.schemas.task import Task, TaskCreate, TaskUpdate
from lawdesk.schemas.user import UserInDB
from lawdesk.storage import Storage

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=List[Task])
async def get_tasks(
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    """
    Retrieve tasks.
    """
    return storage.list_tasks()


@router.get("/my", response_model=List[Task])
async def get_my_tasks(
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    """
    Retrieve the tasks assigned to the logged-in user.
    """
    return storage.list_tasks_by_assignee(current_user.id)


@router.post("", response_model=Task, status_code=status.HTTP_201_CREATED)
async def create_task(
    *,
    task_in: TaskCreate,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    """
    Create new task, owned by the logged-in user.
    """
    task = storage.create_task(task_in, created_by_id=current_user.id)
    logger.info(f"Task {task.id} created by user {current_user.id}")
    return task


@router.get("/{task_id}", response_model=Task)
async def read_task(
    task_id: int,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    task = storage.get_task(task_id)
    if not task:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Task not found"
        )
    return task


@router.put("/{task_id}", response_model=Task)
@router.patch("/{task_id}", response_model=Task)
async def update_task(
    *,
    task_id: int,
    task_in: TaskUpdate,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    task = storage.update_task(task_id, task_in)
    if not task:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Task not found"
        )
    return task


@router.delete("/{task_id}", response_model=Message)
async def delete_task(
    task_id: int,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    if not storage.delete_task(task_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Task not found"
        )
    return {"message": "Task deleted successfully"}
