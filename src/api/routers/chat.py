"""
Live chat API router
"""
from fastapi import APIRouter, Depends
from pydantic import BaseModel
from typing import Optional, List, Dict, Any
from src.api.dependencies import get_chat_service, require_chat_enabled
from src.models.office import Office, Salesperson
from src.services.chat_service import ChatService


router = APIRouter(
    prefix="/api",
    tags=["chat"],
    dependencies=[Depends(require_chat_enabled)]
)


# Request/Response models
class ChatStartRequest(BaseModel):
    office_id: str
    customer_name: Optional[str] = None


class ChatStartResponse(BaseModel):
    session_id: str
    status: str
    message: str
    salesperson: Optional[Salesperson] = None


@router.get("/offices", response_model=List[Office])
async def list_offices(service: ChatService = Depends(get_chat_service)):
    """List all offices"""
    return service.list_offices()


@router.post("/chat/start", response_model=ChatStartResponse)
async def start_chat(request: ChatStartRequest, service: ChatService = Depends(get_chat_service)):
    """Start a chat with the first available salesperson at an office"""
    customer_name = request.customer_name.strip() if request.customer_name else None
    result = service.start_chat(request.office_id, customer_name or None)
    return ChatStartResponse(**result)


@router.post("/chat/end/{session_id}", response_model=str)
async def end_chat(session_id: str, service: ChatService = Depends(get_chat_service)):
    """End a chat session"""
    return service.end_chat(session_id)


@router.get("/chat/status/{session_id}")
async def get_chat_status(session_id: str, service: ChatService = Depends(get_chat_service)) -> Dict[str, Any]:
    """Current state of a chat session"""
    return service.get_session(session_id).to_public_dict()
