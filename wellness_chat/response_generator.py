"""
Response Generator Module

This module produces the assistant's reply to a user message by calling the
Gemini generateContent API with a persona prompt, the user's wellness data and
prior conversation. Any failure of that call is converted into a canned reply
from the FallbackSelector, so callers always receive text.
"""

import asyncio
import os
import logging
from functools import lru_cache
from typing import Any, Callable, Dict, List, Optional, Sequence

import httpx
from dotenv import load_dotenv

from utils.llm import GeminiClient
from wellness_chat.config_loader import load_config, merge_with_defaults
from wellness_chat.fallback import FallbackSelector
from wellness_chat.history import map_gemini_role
from wellness_chat.models import ChatMessage, ReplyResult, WellnessContext
from wellness_chat.prompt_builder import build_system_prompt

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)


class ResponseGenerator:
    """Best-effort Gemini call with keyword fallback."""

    def __init__(
        self,
        client: Optional[GeminiClient] = None,
        fallback: Optional[FallbackSelector] = None,
        config: Optional[Dict[str, Any]] = None,
        role_mapper: Callable[[str], str] = map_gemini_role,
    ):
        """
        Initialize response generator.

        Args:
            client: Gemini client. Built from environment and config if None.
            fallback: Fallback selector. Built from config if None.
            config: Configuration dict (defaults to load_config()). Missing
                values are filled from the built-in defaults.
            role_mapper: Maps ChatMessage roles onto the backend's role vocabulary
        """
        self.config = merge_with_defaults(config) if config else load_config()
        gemini_config = self.config.get("gemini", {})
        self.persona = self.config["persona"]
        self.generation_config = gemini_config.get("generation_config", {})
        self.role_mapper = role_mapper
        fallback_config = self.config["fallback"]
        self.fallback = fallback or FallbackSelector(
            rules=fallback_config["rules"],
            default_response=fallback_config["default_response"],
        )

        if client is None:
            api_key = os.getenv("GEMINI_API_KEY") or os.getenv("VITE_GEMINI_API_KEY")
            client = GeminiClient(
                api_key=api_key,
                base_url=os.getenv("GEMINI_BASE_URL") or gemini_config.get("base_url", "https://generativelanguage.googleapis.com"),
                model=os.getenv("GEMINI_MODEL") or gemini_config.get("model", "gemini-1.5-flash"),
                timeout=float(gemini_config.get("timeout_seconds", 30.0)),
            )
        self.client = client

    def build_contents(
        self,
        user_message: str,
        history: Sequence[ChatMessage] = (),
        context: Optional[WellnessContext] = None,
    ) -> List[Dict[str, Any]]:
        """
        Assemble the ordered request turns.

        The system instruction goes first as a user turn, then each history
        entry with its role mapped, then the current message.
        """
        system_prompt = build_system_prompt(self.persona, context)
        contents = [{"role": "user", "parts": [{"text": system_prompt}]}]
        for msg in history:
            contents.append({"role": self.role_mapper(msg.role), "parts": [{"text": msg.content}]})
        contents.append({"role": "user", "parts": [{"text": user_message}]})
        return contents

    async def generate_tagged_reply(
        self,
        user_message: str,
        history: Sequence[ChatMessage] = (),
        context: Optional[WellnessContext] = None,
    ) -> ReplyResult:
        """
        Generate a reply and report whether it came from the model.

        Never raises (other than task cancellation).
        """
        try:
            contents = self.build_contents(user_message, history, context)
            logger.info(f"Calling Gemini ({self.client.model}) with {len(contents)} turns")
            data = await self.client.generate_content(contents, self.generation_config)

            text = self.client.extract_text(data)
            if not text:
                logger.warning("Gemini returned no candidate text")
                return ReplyResult(text=self.persona["empty_reply_message"], source="empty")
            return ReplyResult(text=text, source="model")

        except (httpx.TimeoutException, asyncio.TimeoutError):
            logger.error(f"Gemini AI API error: request timed out after {self.client.timeout}s")
        except httpx.HTTPStatusError as e:
            logger.error(f"Gemini AI API error: HTTP {e.response.status_code}")
        except Exception as e:
            logger.error(f"Gemini AI API error: {type(e).__name__}: {e}")

        return ReplyResult(text=self.fallback.select_fallback(user_message), source="fallback")

    async def generate_reply(
        self,
        user_message: str,
        history: Sequence[ChatMessage] = (),
        context: Optional[WellnessContext] = None,
    ) -> str:
        """
        Generate a reply to the user's message.

        Args:
            user_message: Current user message
            history: Prior conversation in chronological order
            context: Optional wellness readings

        Returns:
            Model reply, the empty-reply placeholder, or fallback text
        """
        result = await self.generate_tagged_reply(user_message, history, context)
        return result.text


@lru_cache()
def get_response_generator() -> ResponseGenerator:
    """Get shared response generator."""
    return ResponseGenerator()
