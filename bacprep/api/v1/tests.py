"""
Practice test and test result endpoints.
"""
import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from bacprep.core.dependencies import UserId, get_storage
from bacprep.schemas.common import MAX_ID
from bacprep.schemas.test import Test, TestResult, TestResultCreate, TestResultDetailed, TestResultSubmit
from bacprep.services.storage import Storage

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/tests", response_model=List[Test])
def list_tests(
    subject_id: Optional[int] = Query(None, alias="subjectId", le=MAX_ID),
    storage: Storage = Depends(get_storage),
) -> Any:
    """List every test, or only those of ``subjectId`` when given."""
    try:
        if subject_id is not None:
            return storage.get_tests_by_subject(subject_id)
        return storage.get_all_tests()
    except Exception as e:
        logger.error(f"Error fetching tests: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch tests",
        )


@router.get("/users/{user_id}/test-results", response_model=List[TestResultDetailed])
def list_test_results(user_id: UserId, storage: Storage = Depends(get_storage)) -> Any:
    """
    List a user's results, newest first.

    Each result carries ``testName`` and ``subjectName``; tests or subjects
    that no longer exist are reported as "Unknown Test" / "Unknown Subject".
    """
    try:
        return storage.get_user_test_results(user_id)
    except Exception as e:
        logger.error(f"Error fetching test results for user {user_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch test results",
        )


@router.post("/users/{user_id}/test-results", response_model=TestResult, status_code=status.HTTP_201_CREATED)
def submit_test_result(
    user_id: UserId,
    result_in: TestResultSubmit,
    storage: Storage = Depends(get_storage),
) -> Any:
    try:
        data = TestResultCreate(user_id=user_id, **result_in.model_dump())
        return storage.save_user_test_result(data)
    except Exception as e:
        logger.error(f"Error saving test result for user {user_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to save test result",
        )
