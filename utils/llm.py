import asyncio
import logging
import httpx
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


class GeminiClient:
    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = "https://generativelanguage.googleapis.com",
        model: str = "gemini-1.5-flash",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize Gemini client.
        
        Args:
            api_key: Gemini API key, sent as the 'key' query parameter
            base_url: Base URL for API (default: https://generativelanguage.googleapis.com)
            model: Model name (default: gemini-1.5-flash)
            timeout: Hard limit in seconds for the whole request (default: 30.0)
            transport: Optional httpx transport override (used by tests)
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout
        self.transport = transport
        if not api_key:
            # Not fatal: the request will be rejected upstream
            logger.warning("GeminiClient initialized without an API key")

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/v1beta/models/{self.model}:generateContent"

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json"
        }

    async def generate_content(
        self,
        contents: List[Dict[str, Any]],
        generation_config: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Single non-streaming generateContent call.

        Raises:
            httpx.HTTPStatusError: Non-2xx response
            httpx.TimeoutException / asyncio.TimeoutError: Request exceeded timeout
            ValueError: Response body is not JSON
        """
        payload: Dict[str, Any] = {"contents": contents}
        if generation_config:
            payload["generationConfig"] = generation_config

        timeout_config = httpx.Timeout(self.timeout)
        async with httpx.AsyncClient(timeout=timeout_config, transport=self.transport) as client:
            resp = await asyncio.wait_for(
                client.post(
                    self.endpoint,
                    params={"key": self.api_key or ""},
                    headers=self._headers(),
                    json=payload,
                ),
                timeout=self.timeout,
            )
            resp.raise_for_status()
            return resp.json()

    @staticmethod
    def extract_text(data: Any) -> str:
        """
        Return candidates[0].content.parts[0].text, or "" if any element is missing.
        """
        try:
            text = data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            return ""
        return text if isinstance(text, str) else ""
