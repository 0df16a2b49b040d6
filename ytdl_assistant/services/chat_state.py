import time
from contextlib import contextmanager
from typing import Callable, Iterator, List, Optional, Protocol

from ytdl_assistant.models.chat_model import ChatMessage, ChatRole
from ytdl_assistant.models.state_model import Notice
from ytdl_assistant.utils.formatting import format_for_display

SUGGESTION_PREFIX = "💡 Saran: "
ATTENTION_SECONDS = 3.0
ERROR_NOTICE_SECONDS = 5.0
SUCCESS_NOTICE_SECONDS = 3.0


class Renderer(Protocol):
    """Presentation collaborator reacting to state changes."""

    def focus_input(self) -> None: ...

    def scroll_to_bottom(self) -> None: ...

    def flash_attention(self, seconds: float) -> None: ...


class NullRenderer:
    def focus_input(self) -> None:
        pass

    def scroll_to_bottom(self) -> None:
        pass

    def flash_attention(self, seconds: float) -> None:
        pass


class RecordingRenderer:
    """Queues render signals until the frontend drains them."""

    def __init__(self):
        self.events: List[str] = []

    def focus_input(self) -> None:
        self.events.append("focus_input")

    def scroll_to_bottom(self) -> None:
        self.events.append("scroll_to_bottom")

    def flash_attention(self, seconds: float) -> None:
        self.events.append("flash_attention")

    def drain(self) -> List[str]:
        events, self.events = self.events, []
        return events


class NoticeBoard:
    """Holds the single transient user-facing notice; a new one replaces the old."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self._notice: Optional[Notice] = None

    def error(self, text: str) -> Notice:
        return self._show("error", text, ERROR_NOTICE_SECONDS)

    def success(self, text: str) -> Notice:
        return self._show("success", text, SUCCESS_NOTICE_SECONDS)

    def _show(self, kind: str, text: str, seconds: float) -> Notice:
        self._notice = Notice(kind=kind, text=text, expires_at=self.clock() + seconds)
        return self._notice

    def current(self) -> Optional[Notice]:
        if self._notice is not None and self.clock() >= self._notice.expires_at:
            self._notice = None
        return self._notice


class ChatState:
    """Append-only chat log plus the panel, typing and attention flags."""

    def __init__(self, renderer: Optional[Renderer] = None, clock: Callable[[], float] = time.monotonic):
        self.renderer = renderer if renderer is not None else NullRenderer()
        self.clock = clock
        self.messages: List[ChatMessage] = []
        self.panel_open = False
        self.is_typing = False
        self._attention_until = 0.0

    def toggle_panel(self) -> bool:
        self.panel_open = not self.panel_open
        if self.panel_open:
            self.renderer.focus_input()
        return self.panel_open

    def push_message(self, role: ChatRole, text: str) -> ChatMessage:
        message = ChatMessage(role=role, text=text)
        self.messages.append(message)
        self.renderer.scroll_to_bottom()
        return message

    def push_suggestion(self, text: str) -> ChatMessage:
        if not self.panel_open:
            self._attention_until = self.clock() + ATTENTION_SECONDS
            self.renderer.flash_attention(ATTENTION_SECONDS)
        return self.push_message(ChatRole.ASSISTANT, SUGGESTION_PREFIX + text)

    @property
    def attention_active(self) -> bool:
        return self.clock() < self._attention_until

    @contextmanager
    def typing(self) -> Iterator[None]:
        self.is_typing = True
        try:
            yield
        finally:
            self.is_typing = False

    @staticmethod
    def format_for_display(text: str) -> str:
        return format_for_display(text)
