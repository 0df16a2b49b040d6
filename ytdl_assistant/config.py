import os
from dotenv import load_dotenv

load_dotenv()


# Helper to clean env values (remove CR/LF, tabs and other non-printable chars)
def _clean_env_value(s: str) -> str:
    if not s:
        return ""
    if not isinstance(s, str):
        s = str(s)
    s = s.replace("\r", "").replace("\n", "").replace("\t", "")
    s = ''.join(ch for ch in s if 32 <= ord(ch) <= 126)
    return s.strip()


DEFAULT_GEMINI_API_URL = (
    "https://generativelanguage.googleapis.com/v1beta/models/gemini-pro:generateContent"
)

GEMINI_API_URL = _clean_env_value(os.getenv("GEMINI_API_URL", "")) or DEFAULT_GEMINI_API_URL
LOG_LEVEL = _clean_env_value(os.getenv("LOG_LEVEL", "")).upper() or "INFO"


def cors_allow_origins() -> list[str]:
    raw = _clean_env_value(os.getenv("CORS_ALLOW_ORIGINS", "*"))
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]
