import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from chatroom.api.routes import views
from chatroom.core.config import Settings, settings as app_settings
from chatroom.modules import MODULES
from chatroom.modules.chat.store import ChatStore
from chatroom.services.chat_data import load_chat_data

logger = logging.getLogger(__name__)


def create_app(settings: Settings = app_settings, store: ChatStore | None = None) -> FastAPI:
    """Build the application with a single ChatStore for its lifetime."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if store is None:
        store = ChatStore(
            load_chat_data(settings.chat_data_file),
            sender=settings.current_sender,
        )

    app = FastAPI(
        title="Chat Room API",
        version="1.0.0",
        description="In-memory chat rooms and message threads"
    )
    app.state.chat_store = store

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    for module in MODULES:
        app.include_router(module.router, prefix="/api")
        logger.debug("Registered module %s", module.id)
    app.include_router(views.router)

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=app_settings.backend_port)
