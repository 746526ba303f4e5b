"""Route table: home and chat room."""
import logging

from fastapi import APIRouter, Depends, HTTPException, Path

from chatroom.api.deps import get_chat_store
from chatroom.modules.chat.store import ChatStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["views"])


@router.get("/", name="home")
def home(store: ChatStore = Depends(get_chat_store)):
    return {"rooms": [r.model_dump() for r in store.rooms()]}


@router.get("/chat/{room_id}", name="chatRoom")
def chat_room(
    room_id: str = Path(..., pattern=r"^\d+$"),
    store: ChatStore = Depends(get_chat_store),
):
    """Select the room from the URL and return its thread."""
    room, messages, error = store.open_room(int(room_id))
    if error:
        raise HTTPException(status_code=404, detail=error)

    return {
        "room": room.model_dump(),
        "messages": [c.model_dump() for c in messages],
    }
