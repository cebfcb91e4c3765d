"""
API Layer for Wellness Chat Service

This module provides FastAPI endpoints for the wellness support chat.
"""

import logging
from datetime import datetime
from fastapi import APIRouter, HTTPException

from wellness_chat.history import convert_chat_history
from wellness_chat.models import ChatReplyRequest, ChatReplyResponse
from wellness_chat.response_generator import get_response_generator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/chat", tags=["chat"])


@router.post("/reply", response_model=ChatReplyResponse)
async def chat_reply(request: ChatReplyRequest):
    """
    Generate the assistant's reply to a chat message.
    
    This endpoint:
    1. Converts the front-end chat log into role-tagged history
    2. Calls Gemini with the persona prompt and wellness data
    3. Falls back to a canned reply if Gemini is unavailable
    
    Args:
        request: ChatReplyRequest with message, chat log and optional wellness context
    
    Returns:
        ChatReplyResponse with reply text and its source
    """
    start_time = datetime.now()
    logger.info(f"POST /api/chat/reply - Endpoint called ({len(request.history)} history entries)")
    
    try:
        if not request.message or not request.message.strip():
            raise ValueError("Message cannot be empty")
        
        history = convert_chat_history(request.history)
        result = await get_response_generator().generate_tagged_reply(
            request.message,
            history=history,
            context=request.context
        )
        
        total_duration = (datetime.now() - start_time).total_seconds()
        logger.info(f"POST /api/chat/reply - Completed in {total_duration:.2f}s (source: {result.source})")
        return ChatReplyResponse(reply=result.text, source=result.source)
        
    except ValueError as e:
        logger.error(f"POST /api/chat/reply - Validation error: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"POST /api/chat/reply - Exception: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")
