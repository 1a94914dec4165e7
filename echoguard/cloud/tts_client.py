"""Text-to-speech via local pyttsx3, one utterance at a time."""

import logging
import threading
from typing import Optional

from echoguard.config import SPEECH_RATE

logger = logging.getLogger(__name__)


class Utterance:
    """Handle for one spoken sentence. Cancelled when a newer one replaces it."""

    def __init__(self, text: str):
        self.text = text
        self.cancelled = False
        self._done = threading.Event()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until spoken or cancelled. Returns False on timeout."""
        return self._done.wait(timeout)

    def _finish(self) -> None:
        self._done.set()


class TTSClient:
    """
    Speak text on a background thread. Starting a new utterance stops the one
    in progress: last one wins, nothing is queued.
    """

    def __init__(self, rate: int = SPEECH_RATE, engine=None):
        self._engine = engine if engine is not None else self._init_engine(rate)
        self._cond = threading.Condition()
        self._current: Optional[Utterance] = None
        self._pending: Optional[Utterance] = None
        self._closed = False
        self._thread = threading.Thread(target=self._run, name="tts", daemon=True)
        self._thread.start()

    @staticmethod
    def _init_engine(rate: int):
        try:
            import pyttsx3
            engine = pyttsx3.init()
            engine.setProperty("rate", rate)
            return engine
        except Exception as e:
            logger.warning("[TTS] pyttsx3 unavailable: %s", e)
            return None

    @property
    def current(self) -> Optional[Utterance]:
        with self._cond:
            return self._pending or self._current

    def speak(self, text: str) -> Optional[Utterance]:
        """Replace whatever is being said with text. Empty text is ignored."""
        if not text:
            return None
        utterance = Utterance(text)
        with self._cond:
            if self._pending is not None:
                self._pending.cancelled = True
                self._pending._finish()
            if self._current is not None:
                self._current.cancelled = True
                self._stop_engine()
            self._pending = utterance
            self._cond.notify()
        return utterance

    def _stop_engine(self) -> None:
        if self._engine is None:
            return
        try:
            self._engine.stop()
        except Exception as e:
            logger.warning("[TTS] stop failed: %s", e)

    def _run(self) -> None:
        while True:
            with self._cond:
                while self._pending is None and not self._closed:
                    self._cond.wait()
                if self._closed:
                    return
                utterance, self._pending = self._pending, None
                self._current = utterance
            try:
                self._say(utterance.text)
            finally:
                with self._cond:
                    if self._current is utterance:
                        self._current = None
                utterance._finish()

    def _say(self, text: str) -> None:
        if self._engine is None:
            logger.warning("[TTS] (no engine): %s", text)
            return
        try:
            self._engine.say(text)
            self._engine.runAndWait()
        except Exception as e:
            logger.warning("[TTS] pyttsx3 error: %s | %s", e, text)

    def close(self) -> None:
        with self._cond:
            self._closed = True
            if self._current is not None:
                self._current.cancelled = True
                self._stop_engine()
            self._cond.notify()
        self._thread.join(timeout=2.0)
