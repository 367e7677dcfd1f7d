"""
Per-subject progress endpoints.
"""
import logging
from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, status

from bacprep.core.dependencies import UserId, get_storage
from bacprep.schemas.progress import UserProgress, UserProgressUpdate, UserProgressUpsert
from bacprep.services.storage import Storage

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/users/{user_id}/progress", response_model=List[UserProgress])
def list_progress(user_id: UserId, storage: Storage = Depends(get_storage)) -> Any:
    try:
        return storage.get_user_progress(user_id)
    except Exception as e:
        logger.error(f"Error fetching progress for user {user_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch user progress",
        )


@router.post("/users/{user_id}/progress", response_model=UserProgress)
def update_progress(
    user_id: UserId,
    progress_in: UserProgressUpdate,
    storage: Storage = Depends(get_storage),
) -> Any:
    """
    Create or update the progress row of a subject.

    Fields left out keep their stored value; ``lastStudied`` defaults to now.
    """
    try:
        data = UserProgressUpsert(user_id=user_id, **progress_in.model_dump())
        return storage.update_user_progress(data)
    except Exception as e:
        logger.error(f"Error updating progress for user {user_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update progress",
        )
