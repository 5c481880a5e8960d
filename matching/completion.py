import json
import logging
import time
from typing import Dict, List, Optional

import requests

from errors import ParseError, TransportError, upstream_error_for

logger = logging.getLogger(__name__)

UA = "portfolio-ai/completion-client"
RETRY_STATUSES = {408, 409, 429, 500, 502, 503, 504}
# longest Retry-After we honour, in seconds
MAX_RETRY_AFTER = 10.0


class CompletionClient:
    """Thin client for an OpenAI-compatible chat completions endpoint.

    The client owns the whole retry budget: one call plus ``max_retries``
    extra attempts on timeouts, dropped connections and retryable statuses.
    Callers never retry on top of it.
    """

    def __init__(
        self,
        api_key: Optional[str],
        model: str,
        base_url: str = "https://api.openai.com/v1",
        timeout: float = 30,
        max_retries: int = 2,
        session: Optional[requests.Session] = None,
        backoff: float = 0.5,
    ):
        if not api_key:
            raise ValueError("Missing OPENAI_API_KEY environment variable")
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_retries = max(0, int(max_retries))
        self.session = session or requests.Session()
        self.backoff = backoff

    @property
    def url(self) -> str:
        return f"{self.base_url}/chat/completions"

    def _payload(self, system: str, messages: List[Dict[str, str]], json_mode: bool) -> dict:
        payload = {
            "model": self.model,
            "messages": [{"role": "system", "content": system}] + [
                {"role": m["role"], "content": m["content"]} for m in messages
            ],
            "temperature": 0.4,
        }
        if json_mode:
            payload["response_format"] = {"type": "json_object"}
        return payload

    def _sleep(self, attempt: int, retry_after: Optional[float] = None) -> None:
        if retry_after is not None:
            time.sleep(min(retry_after, MAX_RETRY_AFTER))
        elif self.backoff > 0:
            time.sleep(self.backoff * (2 ** attempt))  # 0.5s, 1s

    def complete(self, system: str, messages: List[Dict[str, str]], json_mode: bool = False) -> str:
        """Send one chat completion request and return the generated text."""
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "User-Agent": UA,
        }
        payload = self._payload(system, messages, json_mode)

        attempts = self.max_retries + 1
        for attempt in range(attempts):
            last = attempt == attempts - 1
            try:
                response = self.session.post(self.url, headers=headers, json=payload, timeout=self.timeout)
            except (requests.exceptions.Timeout, requests.exceptions.ConnectionError) as e:
                logger.warning("Completion call failed (attempt %d/%d): %s", attempt + 1, attempts, e)
                if last:
                    raise TransportError(f"Completion service unreachable: {type(e).__name__}") from e
                self._sleep(attempt)
                continue

            if response.status_code in RETRY_STATUSES and not last:
                logger.warning(
                    "Completion service returned %d (attempt %d/%d), retrying",
                    response.status_code, attempt + 1, attempts,
                )
                self._sleep(attempt, _retry_after(response))
                continue

            if not 200 <= response.status_code < 300:
                logger.warning("Completion service returned %d", response.status_code)
                raise upstream_error_for(response.status_code, _error_message(response))

            logger.info("Completion call succeeded on attempt %d", attempt + 1)
            return _extract_text(response)

        # attempts >= 1 so the loop always returns or raises
        raise TransportError("Completion service unreachable")


def _retry_after(response) -> Optional[float]:
    """Seconds from a Retry-After header; the HTTP-date form falls back to backoff."""
    value = response.headers.get("Retry-After")
    if value is None:
        return None
    try:
        seconds = float(value)
    except ValueError:
        return None
    return max(seconds, 0.0)


def _error_message(response) -> str:
    """Pull the provider's error message out of an error body, never the raw body."""
    try:
        data = response.json()
    except ValueError:
        return f"HTTP {response.status_code}"
    err = data.get("error") if isinstance(data, dict) else None
    if isinstance(err, dict) and err.get("message"):
        return str(err["message"])
    if isinstance(err, str) and err:
        return err
    return f"HTTP {response.status_code}"


def _extract_text(response) -> str:
    try:
        data = response.json()
    except ValueError as e:
        raise ParseError("Completion response was not JSON") from e
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        raise ParseError("Completion response had no generated text") from e
    if isinstance(content, (dict, list)):
        # some compatible endpoints hand back already-decoded JSON
        return json.dumps(content)
    if not isinstance(content, str):
        raise ParseError("Completion response had no generated text")
    return content
