import html
import re

_BOLD = re.compile(r'\*\*(.*?)\*\*')
_ITALIC = re.compile(r'\*(.*?)\*')
_BULLET = re.compile(r'^- (.+)$')


def format_for_display(text: str) -> str:
    """
    Escape text for HTML, then apply the lightweight chat markup:
    **bold**, *italic*, leading "- " bullets and newlines as <br>.
    """
    formatted = html.escape(text or "")
    formatted = _BOLD.sub(r'<strong>\1</strong>', formatted)
    formatted = _ITALIC.sub(r'<em>\1</em>', formatted)
    lines = [_BULLET.sub(r'• \1', line) for line in formatted.split("\n")]
    return "<br>".join(lines)
