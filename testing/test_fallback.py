"""
Unit Tests: FallbackSelector keyword priority

Run with: pytest testing/test_fallback.py -v
"""

import pytest
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from wellness_chat.fallback import FallbackSelector


@pytest.fixture
def selector():
    return FallbackSelector()


@pytest.mark.parametrize("message,category", [
    ("I feel anxious today", "stress"),
    ("I can't sleep", "sleep"),
    ("I want to harm myself", "crisis"),
    ("Feeling SAD lately", "mood"),
    ("How do I get more energy?", "energy"),
])
def test_classify_single_category(selector, message, category):
    assert selector.classify(message) == category


def test_crisis_wins_over_stress(selector):
    assert selector.classify("anxious and want to harm myself") == "crisis"
    assert "988" in selector.select_fallback("anxious and want to harm myself")


def test_priority_independent_of_keyword_position(selector):
    # 'tired' is in both sleep and energy; sleep comes first in the table
    assert selector.classify("exercise leaves me tired") == "sleep"


def test_no_match_returns_default_menu(selector):
    assert selector.classify("hello") is None
    assert selector.select_fallback("hello") == selector.default_response


def test_crisis_text_contains_hotlines(selector):
    reply = selector.select_fallback("I am in crisis")
    assert "741741" in reply
    assert "988" in reply


def test_selection_is_deterministic(selector):
    replies = {selector.select_fallback("I feel anxious today") for _ in range(5)}
    assert len(replies) == 1


def test_custom_rule_table():
    custom = FallbackSelector(
        rules=[
            {"category": "first", "keywords": ["Alpha"], "response": "one"},
            {"category": "second", "keywords": ["alpha", "beta"], "response": "two"},
        ],
        default_response="none",
    )
    assert custom.select_fallback("ALPHA beta") == "one"
    assert custom.select_fallback("beta") == "two"
    assert custom.select_fallback("gamma") == "none"
