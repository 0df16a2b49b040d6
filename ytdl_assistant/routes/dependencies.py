from fastapi import Request

from ytdl_assistant.services.assistant import DownloaderAssistant


def get_assistant(request: Request) -> DownloaderAssistant:
    return request.app.state.assistant
