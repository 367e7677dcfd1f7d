"""
User lookup endpoint.
"""
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from bacprep.core.dependencies import UserId, get_storage
from bacprep.schemas.user import User as UserSchema
from bacprep.services.storage import Storage

router = APIRouter()


@router.get("/users/{user_id}", response_model=UserSchema)
def read_user(user_id: UserId, storage: Storage = Depends(get_storage)) -> Any:
    """Get a user by ID, without the password."""
    user = storage.get_user(user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user.to_public()
