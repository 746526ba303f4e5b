"""Dependency injection for API routes."""
from fastapi import Request

from chatroom.modules.chat.store import ChatStore


def get_chat_store(request: Request) -> ChatStore:
    """Get the store built at application startup."""
    return request.app.state.chat_store
