"""Completions endpoint reached through a server-side proxy."""

from typing import List, Optional, Sequence

import requests

from echoguard.config import (
    PHRASING_MAX_TOKENS,
    PHRASING_STOP,
    PHRASING_TEMPERATURE,
    PHRASING_TIMEOUT_SECONDS,
    PROXY_MODEL,
)
from echoguard.errors import PhrasingError


class ProxyCompletionsClient:
    """
    POSTs {model, prompt, max_tokens, temperature, stop} to a proxy that holds
    the real provider credential. Reads choices[*].text from the reply.
    """

    def __init__(
        self,
        url: str,
        token: Optional[str] = None,
        model: str = PROXY_MODEL,
        max_tokens: int = PHRASING_MAX_TOKENS,
        temperature: float = PHRASING_TEMPERATURE,
        stop: Sequence[str] = PHRASING_STOP,
        timeout: float = PHRASING_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        self.url = url
        self.token = token
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.stop = list(stop)
        self.timeout = timeout
        self.session = session or requests.Session()

    def complete(self, prompt: str) -> List[str]:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        payload = {
            "model": self.model,
            "prompt": prompt,
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "stop": self.stop,
        }
        try:
            resp = self.session.post(self.url, json=payload, headers=headers, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except requests.RequestException as e:
            raise PhrasingError(f"proxy request failed: {e}") from e
        except ValueError as e:
            raise PhrasingError(f"proxy returned invalid JSON: {e}") from e

        choices = data.get("choices") if isinstance(data, dict) else None
        if not isinstance(choices, list):
            raise PhrasingError("proxy response has no choices list")
        return [c["text"] for c in choices if isinstance(c, dict) and isinstance(c.get("text"), str)]
