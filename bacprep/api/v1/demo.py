"""
Demo data endpoint.
"""
import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from bacprep.core.dependencies import get_storage
from bacprep.schemas.common import Message
from bacprep.services.storage import Storage

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/init-demo-data", response_model=Message)
def init_demo_data(storage: Storage = Depends(get_storage)) -> Any:
    """
    Load the demo fixtures.

    Not idempotent: every call adds another copy.
    """
    try:
        storage.initialize_demo_data()
        return Message(message="Demo data initialized successfully")
    except Exception as e:
        logger.error(f"Error initializing demo data: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to initialize demo data",
        )
