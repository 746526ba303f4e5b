from chatroom.modules.base import ModuleBase
from fastapi import APIRouter


class ChatModule(ModuleBase):
    @property
    def id(self) -> str:
        return "chat"

    @property
    def name(self) -> str:
        return "Chat"

    @property
    def router(self) -> APIRouter:
        # Deferred: the routes import the store, which imports this package
        from chatroom.api.routes.chat import router
        return router
