"""
HTTP wrapper for OpenAI-compatible /v1/chat/completions endpoints.

One request per call: no retries, no provider hopping. Callers that need a
fallback (the orchestrator) handle LiveModelError themselves.

``timeout`` bounds the whole call, not just each socket read: the body is
streamed and abandoned once the budget is spent, so a server trickling bytes
holds the calling thread for at most about twice ``timeout`` (the budget plus
one socket read).
"""

from __future__ import annotations

import json
import logging
import os
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests

from ..config import DEFAULT_BASE_URL, DEFAULT_MODEL, load_api_key, load_dotenv

logger = logging.getLogger(__name__)


class LiveModelError(Exception):
    """Raised when the live model fails: non-2xx, timeout, connection, empty reply."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        super().__init__(f"Live model error {status_code}: {message}")


@dataclass
class ChatCompletionClient:
    """
    HTTP wrapper for OpenAI-compatible /v1/chat/completions endpoints.

    Configure via environment variables:
        OPENAI_API_KEY / LLM_API_KEY -- API key
        LLM_BASE_URL -- API base URL (default: OpenAI)
        LLM_MODEL -- Default model name
    """

    api_key: str = ""
    model: str = ""
    base_url: str = ""
    timeout: float = 5.0

    def __post_init__(self):
        load_dotenv()
        if not self.base_url:
            self.base_url = os.environ.get("LLM_BASE_URL", DEFAULT_BASE_URL).strip().rstrip("/")
        if not self.model:
            self.model = os.environ.get("LLM_MODEL", DEFAULT_MODEL).strip()
        if not self.api_key:
            self.api_key = load_api_key()
        if not self.api_key:
            logger.warning("[LLMClient] No OPENAI_API_KEY or LLM_API_KEY configured, scripted replies only")

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def chat_completion(
        self,
        messages: List[Dict[str, str]],
        temperature: float = 0.7,
        max_tokens: int = 200,
        presence_penalty: Optional[float] = None,
        frequency_penalty: Optional[float] = None,
        model_override: Optional[str] = None,
    ) -> str:
        """
        Call /chat/completions once.

        Returns the assistant's response content as a string.
        Raises LiveModelError on failure.
        """
        if not self.is_available:
            raise LiveModelError(401, "No API key configured")

        body: Dict[str, Any] = {
            "model": model_override or self.model,
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
        }
        if presence_penalty is not None:
            body["presence_penalty"] = presence_penalty
        if frequency_penalty is not None:
            body["frequency_penalty"] = frequency_penalty

        url = f"{self.base_url}/chat/completions"
        deadline = time.monotonic() + self.timeout
        try:
            resp = requests.post(url, headers=self._headers(), json=body, timeout=self.timeout, stream=True)
        except requests.exceptions.Timeout:
            raise LiveModelError(408, "Request timed out")
        except requests.exceptions.ConnectionError as e:
            raise LiveModelError(0, f"Connection error: {e}")

        try:
            if resp.status_code == 429:
                retry_after = resp.headers.get("Retry-After", "?")
                raise LiveModelError(429, f"Rate limited (Retry-After: {retry_after}s)")
            raw = self._read_body(resp, deadline)
        finally:
            resp.close()

        if resp.status_code != 200:
            raise LiveModelError(resp.status_code, raw.decode("utf-8", errors="replace"))

        try:
            data = json.loads(raw)
            content = data["choices"][0]["message"].get("content") or ""
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise LiveModelError(resp.status_code, f"Malformed response: {e}")
        return content

    @staticmethod
    def _read_body(resp: requests.Response, deadline: float) -> bytes:
        """Read the streamed body, giving up once ``deadline`` (monotonic) has passed."""
        chunks = []
        try:
            for chunk in resp.iter_content(chunk_size=4096):
                chunks.append(chunk)
                if time.monotonic() > deadline:
                    raise LiveModelError(408, "Response body exceeded the time budget")
        except requests.exceptions.RequestException as e:
            raise LiveModelError(408, f"Response body interrupted: {e}")
        return b"".join(chunks)

    @property
    def is_available(self) -> bool:
        """Check if the client has an API key configured."""
        return bool(self.api_key)
