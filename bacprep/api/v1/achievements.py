"""
Badge and study streak endpoints.
"""
import logging
from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, status

from bacprep.core.dependencies import UserId, get_storage
from bacprep.schemas.badge import UserBadgeDetailed
from bacprep.schemas.study import CurrentStreak, StudyStreak, StudyStreakCreate, StudyStreakRecord
from bacprep.services.storage import Storage

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/users/{user_id}/badges", response_model=List[UserBadgeDetailed])
def list_badges(user_id: UserId, storage: Storage = Depends(get_storage)) -> Any:
    """List the badges a user has earned, each with its definition."""
    try:
        return storage.get_user_badges(user_id)
    except Exception as e:
        logger.error(f"Error fetching badges for user {user_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch badges",
        )


@router.get("/users/{user_id}/study-streaks", response_model=List[StudyStreak])
def list_study_streaks(user_id: UserId, storage: Storage = Depends(get_storage)) -> Any:
    try:
        return storage.get_user_study_streaks(user_id)
    except Exception as e:
        logger.error(f"Error fetching study streaks for user {user_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch study streaks",
        )


@router.get("/users/{user_id}/study-streaks/current", response_model=CurrentStreak)
def read_current_streak(user_id: UserId, storage: Storage = Depends(get_storage)) -> Any:
    """Consecutive study days ending today or yesterday, with total minutes."""
    try:
        return storage.get_current_streak(user_id)
    except Exception as e:
        logger.error(f"Error computing current streak for user {user_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch study streaks",
        )


@router.post("/users/{user_id}/study-streaks", response_model=StudyStreak, status_code=status.HTTP_201_CREATED)
def add_study_streak(
    user_id: UserId,
    streak_in: StudyStreakCreate,
    storage: Storage = Depends(get_storage),
) -> Any:
    """Record a study session dated now."""
    try:
        return storage.add_study_streak(StudyStreakRecord(user_id=user_id, **streak_in.model_dump()))
    except Exception as e:
        logger.error(f"Error adding study streak for user {user_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to add study streak",
        )
