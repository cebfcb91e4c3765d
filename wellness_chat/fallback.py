"""
Fallback Selector Module

This module picks a canned reply when the Gemini call cannot be completed.

Selection walks an ordered table of (category, keywords, response) rules and
returns the response of the first rule with any keyword contained in the
case-folded message. Order is priority: crisis rules must come first so that
hotline text wins over any co-occurring keyword.
"""

import logging
from typing import Any, Dict, List, Optional

from wellness_chat.config_loader import load_config

logger = logging.getLogger(__name__)


class FallbackSelector:
    """Deterministic keyword-based reply selection."""

    def __init__(self, rules: Optional[List[Dict[str, Any]]] = None, default_response: Optional[str] = None):
        """
        Initialize fallback selector.

        Args:
            rules: Ordered list of {"category", "keywords", "response"} dicts.
                Defaults to the 'fallback' config section.
            default_response: Reply when no rule matches
        """
        if rules is None or default_response is None:
            fallback_config = load_config().get("fallback", {})
            if rules is None:
                rules = fallback_config.get("rules", [])
            if default_response is None:
                default_response = fallback_config.get("default_response", "")

        self.rules = [
            (rule["category"], tuple(k.casefold() for k in rule["keywords"]), rule["response"])
            for rule in rules
        ]
        self.default_response = default_response

    def _match(self, user_message: str) -> Optional[tuple]:
        normalized = (user_message or "").casefold()
        for rule in self.rules:
            if any(keyword in normalized for keyword in rule[1]):
                return rule
        return None

    def classify(self, user_message: str) -> Optional[str]:
        """Return the matching category name, or None if no rule matches."""
        rule = self._match(user_message)
        return rule[0] if rule else None

    def select_fallback(self, user_message: str) -> str:
        """Return the canned reply for the message."""
        rule = self._match(user_message)
        if rule is None:
            logger.debug("No fallback keyword matched, using default response")
            return self.default_response
        logger.debug(f"Fallback category matched: {rule[0]}")
        return rule[2]
