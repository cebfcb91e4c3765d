"""
Chat history helpers: front-end log conversion and role mapping.
"""

from typing import Any, Dict, Iterable, List

from wellness_chat.models import ChatMessage

# Gemini only knows two conversational roles
GEMINI_ROLE_MAP: Dict[str, str] = {
    "system": "user",
    "user": "user",
    "assistant": "model",
}

SENDER_ROLE_MAP: Dict[str, str] = {
    "user": "user",
    "bot": "assistant",
}


def map_gemini_role(role: str) -> str:
    """Map a ChatMessage role onto Gemini's user/model vocabulary."""
    return GEMINI_ROLE_MAP.get(role, "user")


def _field(entry: Any, name: str) -> Any:
    if isinstance(entry, dict):
        return entry.get(name)
    return getattr(entry, name, None)


def convert_chat_history(messages: Iterable[Any]) -> List[ChatMessage]:
    """
    Convert a front-end chat log into ordered ChatMessage history.

    Entries whose sender is neither 'user' nor 'bot' are dropped.

    Args:
        messages: Dicts or objects with 'sender' and 'content'

    Returns:
        List of ChatMessage in the original order
    """
    history = []
    for entry in messages:
        role = SENDER_ROLE_MAP.get(_field(entry, "sender"))
        if role is None:
            continue
        history.append(ChatMessage(role=role, content=_field(entry, "content") or ""))
    return history
