"""Gemini as the phrasing service."""

from typing import List, Optional, Sequence

from echoguard.config import (
    GEMINI_MODEL,
    PHRASING_MAX_TOKENS,
    PHRASING_STOP,
    PHRASING_TEMPERATURE,
    PHRASING_TIMEOUT_SECONDS,
)
from echoguard.errors import PhrasingError


class GeminiClient:
    """Short text completions via Gemini. The API key is injected, never hard-coded."""

    def __init__(
        self,
        api_key: Optional[str],
        model: str = GEMINI_MODEL,
        max_tokens: int = PHRASING_MAX_TOKENS,
        temperature: float = PHRASING_TEMPERATURE,
        stop: Sequence[str] = PHRASING_STOP,
        timeout: float = PHRASING_TIMEOUT_SECONDS,
    ):
        self.api_key = api_key
        self.model_name = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.stop = list(stop)
        self.timeout = timeout
        self._genai = None
        self._client = None
        if self.api_key:
            import google.generativeai as genai
            genai.configure(api_key=self.api_key)
            self._genai = genai
            self._client = genai.GenerativeModel(model)

    def is_available(self) -> bool:
        return self._client is not None

    def complete(self, prompt: str) -> List[str]:
        if not self._client:
            raise PhrasingError("Gemini API key not set")
        try:
            response = self._client.generate_content(
                prompt,
                generation_config=self._genai.types.GenerationConfig(
                    candidate_count=1,
                    max_output_tokens=self.max_tokens,
                    temperature=self.temperature,
                    stop_sequences=self.stop,
                ),
                request_options={"timeout": self.timeout},
            )
            candidates = []
            for c in response.candidates:
                parts = c.content.parts if c.content else []
                text = "".join(getattr(p, "text", "") for p in parts)
                if text:
                    candidates.append(text)
            return candidates
        except Exception as e:
            raise PhrasingError(f"Gemini request failed: {e}") from e
