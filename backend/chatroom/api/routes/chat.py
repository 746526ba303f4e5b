from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from typing import List, Optional

from chatroom.api.deps import get_chat_store
from chatroom.modules.chat.models import Attachment, ProductMessage
from chatroom.modules.chat.store import ChatStore

router = APIRouter(prefix="/chat", tags=["chat"])


class SendMessageRequest(BaseModel):
    text: str = ""
    product: Optional[ProductMessage] = None
    attachments: List[Attachment] = []


@router.get("/rooms")
def list_rooms(store: ChatStore = Depends(get_chat_store)):
    """List all rooms in source order."""
    return {"rooms": [r.model_dump() for r in store.rooms()]}


@router.get("/rooms/{room_id}/messages")
def list_room_messages(room_id: int, store: ChatStore = Depends(get_chat_store)):
    """Messages for a room. Does not change the selected room."""
    return {"messages": [c.model_dump() for c in store.messages_by_room_id(room_id)]}


@router.get("/selected")
def get_selected(store: ChatStore = Depends(get_chat_store)):
    """Currently selected room and its messages."""
    room, messages, error = store.snapshot()
    return {
        "room": room.model_dump() if room else None,
        "messages": [c.model_dump() for c in messages],
        "error": error,
    }


@router.post("/messages", status_code=201)
def send_message(request: SendMessageRequest, store: ChatStore = Depends(get_chat_store)):
    """Send a message to the selected room."""
    comment, error = store.post_message(request.text, request.product, request.attachments)
    if comment is None:
        raise HTTPException(status_code=400, detail=error)
    return {"message": comment.model_dump()}
