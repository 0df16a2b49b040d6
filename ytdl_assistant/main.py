from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ytdl_assistant.config import cors_allow_origins
from ytdl_assistant.logging_config import setup_logging
from ytdl_assistant.routes.router import router
from ytdl_assistant.services.assistant import DownloaderAssistant
from ytdl_assistant.services.chat_state import RecordingRenderer


def create_app(assistant: Optional[DownloaderAssistant] = None) -> FastAPI:
    """
    Build the API app.

    An injected assistant is started immediately; otherwise one is created on
    startup, so importing this module opens no HTTP client.
    """
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging()
        if getattr(app.state, "assistant", None) is None:
            app.state.assistant = DownloaderAssistant(renderer=RecordingRenderer())
            app.state.assistant.start()
        yield
        await app.state.assistant.aclose()

    app = FastAPI(title="YouTube Downloader AI Assistant", lifespan=lifespan)
    if assistant is not None:
        assistant.start()
        app.state.assistant = assistant

    # CORS (allow frontend requests)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_allow_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Router inclusion
    app.include_router(router, prefix="/api")

    @app.get("/")
    def root():
        return {"message": "YouTube downloader assistant is running 🚀"}

    return app


app = create_app()
