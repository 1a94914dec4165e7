"""External services: phrasing (Gemini, completions proxy) and TTS."""

from echoguard.cloud.gemini_client import GeminiClient
from echoguard.cloud.proxy_client import ProxyCompletionsClient
from echoguard.cloud.tts_client import TTSClient, Utterance

__all__ = ["GeminiClient", "ProxyCompletionsClient", "TTSClient", "Utterance"]
