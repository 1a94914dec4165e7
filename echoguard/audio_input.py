"""Short voice commands: record a clip with sounddevice, transcribe with Whisper."""

import logging
from typing import Optional

import numpy as np

from echoguard.config import (
    COMMAND_LISTEN_SECONDS,
    COMMAND_SAMPLE_RATE,
    READ_TEXT_TRIGGER,
    WHISPER_MODEL,
)

logger = logging.getLogger(__name__)


def is_read_text_command(transcript: Optional[str], trigger: str = READ_TEXT_TRIGGER) -> bool:
    return bool(transcript) and trigger in transcript.lower()


class CommandListener:
    def __init__(
        self,
        model_name: str = WHISPER_MODEL,
        seconds: float = COMMAND_LISTEN_SECONDS,
        rate: int = COMMAND_SAMPLE_RATE,
    ):
        import whisper
        self.model = whisper.load_model(model_name)
        self.seconds = seconds
        self.rate = rate

    def record(self) -> np.ndarray:
        import sounddevice as sd
        audio = sd.rec(int(self.seconds * self.rate), samplerate=self.rate, channels=1, dtype="int16")
        sd.wait()
        return audio.flatten().astype(np.float32) / 32768.0

    def recognize_command(self) -> Optional[str]:
        """Listen once. Returns the transcript, or None if nothing was understood."""
        try:
            audio = self.record()
            result = self.model.transcribe(
                audio,
                language="en",
                fp16=False,
                temperature=0.0,
                condition_on_previous_text=False,
            )
        except Exception as e:
            logger.warning("[Voice] recognition error: %s", e)
            return None
        text = result.get("text", "").strip()
        if text:
            logger.info("[Voice] heard: %s", text)
        return text or None
