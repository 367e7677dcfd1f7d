"""
Subject and topic catalogue endpoints.
"""
import logging
from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, status

from bacprep.core.dependencies import SubjectId, get_storage
from bacprep.schemas.subject import Subject, Topic
from bacprep.services.storage import Storage

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[Subject])
def list_subjects(storage: Storage = Depends(get_storage)) -> Any:
    """List every subject."""
    try:
        return storage.get_all_subjects()
    except Exception as e:
        logger.error(f"Error fetching subjects: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch subjects",
        )


@router.get("/{subject_id}", response_model=Subject)
def read_subject(subject_id: SubjectId, storage: Storage = Depends(get_storage)) -> Any:
    try:
        subject = storage.get_subject(subject_id)
        if not subject:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Subject not found")
        return subject
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching subject {subject_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch subject",
        )


@router.get("/{subject_id}/topics", response_model=List[Topic])
def list_topics(subject_id: SubjectId, storage: Storage = Depends(get_storage)) -> Any:
    """
    List the topics of a subject in lesson order.

    An unknown subject yields an empty list.
    """
    try:
        return storage.get_topics_by_subject(subject_id)
    except Exception as e:
        logger.error(f"Error fetching topics for subject {subject_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch topics",
        )
