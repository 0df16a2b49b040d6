import logging
from typing import Any, Optional

import httpx

from ytdl_assistant.config import GEMINI_API_URL
from ytdl_assistant.services.errors import AssistantError

logger = logging.getLogger(__name__)

GENERATION_CONFIG = {
    "temperature": 0.7,
    "topK": 40,
    "topP": 0.95,
    "maxOutputTokens": 1024,
}

NO_RESPONSE_TEXT = "Maaf, saya tidak bisa memberikan respons saat ini."

CONTEXT_INSTRUCTIONS = """Anda adalah asisten AI untuk aplikasi YouTube Downloader. Anda membantu user dengan:
1. Cara menggunakan YouTube downloader
2. Troubleshooting masalah download
3. Menjelaskan fitur-fitur aplikasi
4. Tips dan trik penggunaan

Status aplikasi saat ini:"""

CONTEXT_CLOSING = "Jawab dalam bahasa Indonesia dengan ramah dan membantu. Berikan saran praktis dan mudah dipahami."


def build_context(youtube_url: str = "", api_url: str = "", video_title: Optional[str] = None) -> str:
    """Instructions plus an abbreviated snapshot of the current app state."""
    context = CONTEXT_INSTRUCTIONS
    if youtube_url:
        context += f"\n- URL YouTube: {youtube_url}"
    if api_url:
        context += f"\n- API URL: {api_url}"
    if video_title is not None:
        context += f"\n- Video terdeteksi: {video_title or 'Unknown'}"
    context += f"\n\n{CONTEXT_CLOSING}"
    return context


def build_prompt(context: str, message: str) -> str:
    return f"{context}\n\nUser: {message}"


def build_payload(prompt: str) -> dict:
    return {
        "contents": [{"parts": [{"text": prompt}]}],
        "generationConfig": dict(GENERATION_CONFIG),
    }


def extract_reply(data: Any) -> str:
    """Read candidates[0].content.parts[0].text, falling back to a fixed reply."""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return NO_RESPONSE_TEXT
    if not isinstance(text, str) or not text:
        return NO_RESPONSE_TEXT
    return text


def _error_message(response: httpx.Response) -> str:
    try:
        data = response.json()
        message = data["error"]["message"]
    except (ValueError, KeyError, TypeError):
        message = None
    return message or response.reason_phrase


async def generate_reply(client: httpx.AsyncClient, prompt: str, api_key: str,
                         endpoint: str = GEMINI_API_URL) -> str:
    """
    Send one generateContent request and return the reply text.

    Raises AssistantError on transport failure, non-2xx status or invalid JSON.
    """
    logger.info("Sending prompt to Gemini (prompt_chars=%d)", len(prompt))
    try:
        response = await client.post(
            endpoint,
            params={"key": api_key},
            json=build_payload(prompt),
            headers={"Content-Type": "application/json"},
        )
    except httpx.HTTPError as e:
        raise AssistantError(f"Gemini API Error: {e}") from e

    if not response.is_success:
        raise AssistantError(f"Gemini API Error: {_error_message(response)}")

    try:
        data = response.json()
    except ValueError as e:
        raise AssistantError(f"Gemini API Error: invalid JSON response ({e})") from e

    return extract_reply(data)
