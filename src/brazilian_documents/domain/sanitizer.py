from __future__ import annotations

import unicodedata

MAX_MESSAGE_INPUT = 20


def sanitize_for_message(text: str | None, max_length: int = MAX_MESSAGE_INPUT) -> str:
    """Returns `text` safe for error messages and logs.

    Keeps at most `max_length` characters, drops control characters and
    appends "..." when the input was truncated. Blank input becomes "".
    """
    if text is None or not text.strip():
        return ""
    head = "".join(c for c in text[:max_length] if unicodedata.category(c) != "Cc")
    if len(text) > max_length:
        head += "..."
    return head
