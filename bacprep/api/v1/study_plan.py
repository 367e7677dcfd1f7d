"""
Study plan endpoints.
"""
import logging
from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, status

from bacprep.core.dependencies import TaskId, UserId, get_storage
from bacprep.core.exceptions import NotFoundError
from bacprep.schemas.study import (
    StudyPlanTask,
    StudyPlanTaskCompletion,
    StudyPlanTaskCreate,
    StudyPlanTaskRecord,
)
from bacprep.services.storage import Storage

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/users/{user_id}/study-plan", response_model=List[StudyPlanTask])
def list_study_plan(user_id: UserId, storage: Storage = Depends(get_storage)) -> Any:
    """List a user's tasks: priority first, then recommended, then the rest."""
    try:
        return storage.get_user_study_plan(user_id)
    except Exception as e:
        logger.error(f"Error fetching study plan for user {user_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch study plan",
        )


@router.post("/users/{user_id}/study-plan", response_model=StudyPlanTask, status_code=status.HTTP_201_CREATED)
def add_study_plan_task(
    user_id: UserId,
    task_in: StudyPlanTaskCreate,
    storage: Storage = Depends(get_storage),
) -> Any:
    try:
        return storage.add_study_plan_task(StudyPlanTaskRecord(user_id=user_id, **task_in.model_dump()))
    except Exception as e:
        logger.error(f"Error adding study plan task for user {user_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to add study plan task",
        )


@router.patch("/users/{user_id}/study-plan/{task_id}", response_model=StudyPlanTask)
def update_study_plan_task(
    user_id: UserId,
    task_id: TaskId,
    completion: StudyPlanTaskCompletion,
    storage: Storage = Depends(get_storage),
) -> Any:
    """
    Mark a task as completed or not.

    Raises:
        HTTPException: If the task does not exist or belongs to another user
    """
    try:
        return storage.update_study_plan_task_completion(user_id, task_id, completion.completed)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except Exception as e:
        logger.error(f"Error updating task {task_id} for user {user_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update task",
        )
