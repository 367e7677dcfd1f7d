"""
AI tutor chat endpoints.
"""
import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from bacprep.core.agents.tutor import TutorGateway
from bacprep.core.dependencies import UserId, get_storage, get_tutor
from bacprep.schemas.chat import AiChatHistory, AiChatHistorySave, ChatMessage, ChatReply, ChatRequest
from bacprep.services.storage import Storage

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/ai/chat", response_model=ChatReply)
def chat(
    request: ChatRequest,
    storage: Storage = Depends(get_storage),
    tutor: TutorGateway = Depends(get_tutor),
) -> Any:
    """
    Answer the latest message of a conversation.

    The client sends the whole conversation; it is stored together with the
    reply, replacing the user's previous history.
    """
    try:
        response = tutor.process_ai_chat(request.messages)

        storage.save_ai_chat_history(AiChatHistorySave(
            user_id=request.user_id,
            messages=[*request.messages, ChatMessage(content=response, is_user=False)],
        ))

        return ChatReply(response=response)
    except Exception as e:
        logger.error(f"Error processing chat for user {request.user_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to process chat",
        )


@router.get("/users/{user_id}/chat-history", response_model=Optional[AiChatHistory])
def read_chat_history(user_id: UserId, storage: Storage = Depends(get_storage)) -> Any:
    """Stored conversation of a user, or ``null`` when there is none."""
    try:
        return storage.get_ai_chat_history(user_id)
    except Exception as e:
        logger.error(f"Error fetching chat history for user {user_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch chat history",
        )
