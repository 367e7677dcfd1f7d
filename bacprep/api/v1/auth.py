"""
Authentication endpoints for user registration and login.
"""
import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from bacprep.core.dependencies import get_storage
from bacprep.core.exceptions import ValidationError
from bacprep.schemas.user import User as UserSchema, UserCreate, UserLogin
from bacprep.services.storage import Storage

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=UserSchema, status_code=status.HTTP_201_CREATED)
def register(user_in: UserCreate, storage: Storage = Depends(get_storage)) -> Any:
    """
    Register a new user.

    Args:
        user_in: User registration data
        storage: Data store

    Returns:
        Created user, without the password

    Raises:
        HTTPException: If the username or email already exists
    """
    try:
        user = storage.create_user(user_in)
        return user.to_public()
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except Exception as e:
        logger.error(f"Error creating user: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create user",
        )


@router.post("/login", response_model=UserSchema)
def login(credentials: UserLogin, storage: Storage = Depends(get_storage)) -> Any:
    """
    Check a username/password pair.

    Raises:
        HTTPException: If credentials are invalid
    """
    user = storage.authenticate_user(credentials.username, credentials.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )
    return user.to_public()
