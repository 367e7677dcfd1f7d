"""
Dependency injection for FastAPI endpoints.
"""
from typing import Annotated

from fastapi import Path, Request

from bacprep.core.agents.tutor import TutorGateway
from bacprep.schemas.common import MAX_ID
from bacprep.services.storage import Storage

# Path ids past the database INTEGER range are rejected as malformed
UserId = Annotated[int, Path(le=MAX_ID)]
SubjectId = Annotated[int, Path(le=MAX_ID)]
TaskId = Annotated[int, Path(le=MAX_ID)]


def get_storage(request: Request) -> Storage:
    """
    Dependency for the data store.

    Returns:
        The store the application was created with
    """
    return request.app.state.storage


def get_tutor(request: Request) -> TutorGateway:
    """
    Dependency for the AI tutor gateway.

    Returns:
        The gateway the application was created with
    """
    return request.app.state.tutor
