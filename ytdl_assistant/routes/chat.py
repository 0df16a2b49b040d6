from fastapi import APIRouter, Depends

from ytdl_assistant.models.chat_model import ChatMessage, ChatRequest, ChatResponse, DisplayMessage, PanelResponse
from ytdl_assistant.routes.dependencies import get_assistant
from ytdl_assistant.services.assistant import DownloaderAssistant
from ytdl_assistant.utils.formatting import format_for_display

chat_router = APIRouter()


def to_display(message: ChatMessage) -> DisplayMessage:
    return DisplayMessage(
        role=message.role,
        text=message.text,
        html=format_for_display(message.text),
        created_at=message.created_at,
    )


@chat_router.post("/message", response_model=ChatResponse)
async def send_message(request: ChatRequest, assistant: DownloaderAssistant = Depends(get_assistant)):
    """
    Send a question to the AI assistant.

    The current app state (YouTube URL, API URL, detected video) is added as context.
    Returns the reply (null for an empty message) and the full chat log.
    """
    reply = await assistant.send_message(request.message, request.api_key)
    return {"reply": reply, "messages": [to_display(m) for m in assistant.chat.messages]}


@chat_router.get("/messages", response_model=list[DisplayMessage])
async def list_messages(assistant: DownloaderAssistant = Depends(get_assistant)):
    return [to_display(m) for m in assistant.chat.messages]


@chat_router.post("/toggle", response_model=PanelResponse)
async def toggle_panel(assistant: DownloaderAssistant = Depends(get_assistant)):
    return {"panel_open": assistant.toggle_panel()}
