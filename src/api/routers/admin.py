"""
Admin API router
"""
from fastapi import APIRouter, Depends
from typing import Dict, Any
from src.api.dependencies import get_chat_service
from src.services.chat_service import ChatService

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.get("/sessions")
async def list_sessions(service: ChatService = Depends(get_chat_service)) -> Dict[str, Any]:
    """All chat sessions with per-status counts (admin mode only)"""
    return service.list_sessions()
