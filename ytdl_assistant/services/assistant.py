import logging
import time
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

import httpx

from ytdl_assistant.config import GEMINI_API_URL
from ytdl_assistant.models.chat_model import ChatRole
from ytdl_assistant.models.config_model import StoredConfig
from ytdl_assistant.models.video_models import VideoInfo
from ytdl_assistant.services import chat_service, video_service
from ytdl_assistant.services.chat_state import ChatState, NoticeBoard, Renderer
from ytdl_assistant.services.errors import TransportError, ValidationError
from ytdl_assistant.services.help_service import GREETING, troubleshooting_hint
from ytdl_assistant.utils.config_store import (
    DOWNLOADER_API_KEY,
    DOWNLOADER_API_URL,
    GENERATIVE_API_KEY,
    ConfigStore,
)

logger = logging.getLogger(__name__)

MISSING_API_KEY_REPLY = "Mohon masukkan Gemini API Key terlebih dahulu untuk menggunakan AI Assistant."
APOLOGY_REPLY = "Maaf, terjadi error saat berkomunikasi dengan AI. Pastikan API Key Anda valid."
VIDEO_SUCCESS_NOTICE = "Info video berhasil didapatkan!"


class DownloaderAssistant:
    """
    Root controller owning all client state.

    Holds the form fields, the last VideoInfo, the loading flag, the chat state,
    the transient notice and the config store. Overlapping requests are not
    guarded: whichever response completes last wins.
    """

    def __init__(
        self,
        http_client: Optional[httpx.AsyncClient] = None,
        config_store: Optional[ConfigStore] = None,
        renderer: Optional[Renderer] = None,
        clock: Callable[[], float] = time.monotonic,
        gemini_api_url: str = GEMINI_API_URL,
    ):
        self.http_client = http_client if http_client is not None else httpx.AsyncClient()
        self.config_store = config_store if config_store is not None else ConfigStore()
        self.chat = ChatState(renderer=renderer, clock=clock)
        self.notices = NoticeBoard(clock=clock)
        self.gemini_api_url = gemini_api_url
        self.form = StoredConfig()
        self.youtube_url = ""
        self.video_info: Optional[VideoInfo] = None
        self.loading = False

    def start(self) -> None:
        """Load stored settings into the form and greet the user."""
        self.form = self.config_store.load()
        self.chat.push_message(ChatRole.ASSISTANT, GREETING)

    async def aclose(self) -> None:
        await self.http_client.aclose()

    @contextmanager
    def _loading(self) -> Iterator[None]:
        self.loading = True
        try:
            yield
        finally:
            self.loading = False

    # ----- Video info -----
    async def fetch_video_info(self, url: str, api_url: str, api_key: str = "") -> Optional[VideoInfo]:
        """
        Validate, persist the downloader settings, then request video info.

        Returns the new VideoInfo, or None when validation or the request failed.
        Failures are reported through the notice board and a chat suggestion.
        """
        url, api_url, api_key = (url or "").strip(), (api_url or "").strip(), (api_key or "").strip()
        self.youtube_url = url
        self.form.downloader_api_url = api_url
        self.form.downloader_api_key = api_key

        try:
            video_service.validate_request(url, api_url)
        except ValidationError as e:
            self.notices.error(str(e))
            return None

        self.config_store.set(DOWNLOADER_API_URL, api_url)
        self.config_store.set(DOWNLOADER_API_KEY, api_key)

        with self._loading():
            try:
                info = await video_service.request_video_info(self.http_client, url, api_url, api_key)
            except TransportError as e:
                logger.error("Video info request failed: %s", e)
                self.notices.error(f"Error: {e}")
                self.chat.push_suggestion(
                    f"Terjadi error saat mengambil info video: {e}. "
                    f"{troubleshooting_hint(str(e))} Apakah Anda perlu bantuan troubleshooting?"
                )
                return None

        self.video_info = info
        self.notices.success(VIDEO_SUCCESS_NOTICE)
        self.chat.push_suggestion(
            f'Video "{info.title}" berhasil diproses! Pilih kualitas yang Anda inginkan untuk download.'
        )
        return info

    # ----- Assistant -----
    def build_context(self) -> str:
        title = self.video_info.title if self.video_info is not None else None
        return chat_service.build_context(self.youtube_url, self.form.downloader_api_url, title)

    async def send_message(self, text: str, api_key: str) -> Optional[str]:
        """
        Relay one user message to Gemini and append the reply to the chat log.

        Empty text is ignored. Errors never propagate; they become an apology message.
        """
        text, api_key = (text or "").strip(), (api_key or "").strip()
        if not text:
            return None

        self.form.generative_api_key = api_key
        if not api_key:
            self.chat.push_message(ChatRole.ASSISTANT, MISSING_API_KEY_REPLY)
            return MISSING_API_KEY_REPLY

        self.config_store.set(GENERATIVE_API_KEY, api_key)
        self.chat.push_message(ChatRole.USER, text)

        with self.chat.typing():
            prompt = chat_service.build_prompt(self.build_context(), text)
            try:
                reply = await chat_service.generate_reply(
                    self.http_client, prompt, api_key, endpoint=self.gemini_api_url
                )
            except TransportError as e:
                logger.error("Assistant request failed: %s", e)
                reply = APOLOGY_REPLY

        self.chat.push_message(ChatRole.ASSISTANT, reply)
        return reply

    def toggle_panel(self) -> bool:
        return self.chat.toggle_panel()
