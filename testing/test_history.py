"""
Unit Tests: chat history conversion and role mapping

Run with: pytest testing/test_history.py -v
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from wellness_chat.history import convert_chat_history, map_gemini_role
from wellness_chat.models import ChatLogEntry


def test_convert_drops_unknown_senders_and_keeps_order():
    messages = [
        {"sender": "bot", "content": "Hi, how are you?"},
        {"sender": "system", "content": "typing..."},
        {"sender": "user", "content": "Not great"},
        {"sender": "admin", "content": "ignored"},
        {"sender": "bot", "content": "I'm sorry to hear that"},
    ]

    history = convert_chat_history(messages)

    assert [(m.role, m.content) for m in history] == [
        ("assistant", "Hi, how are you?"),
        ("user", "Not great"),
        ("assistant", "I'm sorry to hear that"),
    ]


def test_convert_accepts_model_objects():
    history = convert_chat_history([ChatLogEntry(sender="user", content="hey")])
    assert history[0].role == "user"
    assert history[0].content == "hey"


def test_convert_empty():
    assert convert_chat_history([]) == []


def test_gemini_role_mapping():
    assert map_gemini_role("system") == "user"
    assert map_gemini_role("user") == "user"
    assert map_gemini_role("assistant") == "model"
