"""Per-frame alert decision + the camera loop that drives it."""

import logging
import threading
import time
from typing import Callable, List, Optional

import cv2
import numpy as np

from echoguard.audio_input import is_read_text_command
from echoguard.camera import read_frame
from echoguard.config import AlertConfig, BOX_COLOR, DEFAULT_CONFIG, WINDOW_NAME
from echoguard.cooldown import CooldownTracker
from echoguard.detector import Detection
from echoguard.phrasing import Phraser
from echoguard.reader import interpret_text
from echoguard.selector import select_announcement

logger = logging.getLogger(__name__)

READING_MESSAGE = "Reading text now."


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class AlertPipeline:
    """Select -> phrase -> speak -> record cooldown, at most once per frame."""

    def __init__(
        self,
        phraser: Phraser,
        voice,
        cooldown: Optional[CooldownTracker] = None,
        config: AlertConfig = DEFAULT_CONFIG,
    ):
        self.phraser = phraser
        self.voice = voice
        self.config = config
        self.cooldown = cooldown or CooldownTracker(config.cooldown_ms)

    def process_detections(
        self,
        detections: List[Detection],
        frame_width: float,
        now: float,
    ) -> Optional[str]:
        """Returns the spoken text, or None when the frame stays silent."""
        request = select_announcement(detections, frame_width, now, self.cooldown, self.config)
        if request is None:
            return None

        text = self.phraser.phrase_request(request)
        self.speak(text)
        self.cooldown.record_announced(request.key, now)
        logger.info("Announced %s: %s", request.key, text)
        return text

    def speak(self, text: str) -> None:
        """Voice errors are logged, never raised into the frame loop."""
        try:
            self.voice.speak(text)
        except Exception as e:
            logger.warning("[TTS] speak failed: %s | %s", e, text)


class FrameLoop:
    """
    camera -> detector -> AlertPipeline, one frame at a time.

    Detection can be paused (read-text mode); pause() waits for the frame in
    flight to finish, frames keep being read so the latest one stays fresh.
    """

    def __init__(
        self,
        cap,
        detector,
        alerts: AlertPipeline,
        reader=None,
        listener=None,
        show_window: bool = True,
        clock: Callable[[], float] = monotonic_ms,
    ):
        self.cap = cap
        self.detector = detector
        self.alerts = alerts
        self.reader = reader
        self.listener = listener
        self.show_window = show_window
        self.clock = clock

        self._running = False
        self._detecting = threading.Event()
        self._detecting.set()
        self._frame_lock = threading.Lock()
        self._latest_frame: Optional[np.ndarray] = None
        self._latest_lock = threading.Lock()
        self._reading = threading.Lock()
        self._listener_thread: Optional[threading.Thread] = None

    @property
    def paused(self) -> bool:
        return not self._detecting.is_set()

    def step(self, frame: np.ndarray) -> Optional[str]:
        """Detect and maybe announce for one frame."""
        with self._latest_lock:
            self._latest_frame = frame
        with self._frame_lock:
            if self.paused:
                return None
            try:
                dets = self.detector.detect(frame)
            except Exception as e:
                logger.error("[Detector] frame skipped: %s", e)
                return None

            w = frame.shape[1]
            text = self.alerts.process_detections(dets, w, self.clock())
            if self.show_window:
                self._draw(frame, dets)
            return text

    def pause(self) -> None:
        self._detecting.clear()
        # Let the in-flight frame finish
        with self._frame_lock:
            pass

    def resume(self) -> None:
        self._detecting.set()

    def read_text(self, frame: Optional[np.ndarray] = None) -> Optional[str]:
        """Pause detection, OCR a frame, speak the result, resume."""
        if self.reader is None:
            logger.warning("[Reader] read-text requested but no reader configured")
            return None

        if not self._reading.acquire(blocking=False):
            logger.info("[Reader] already reading, request ignored")
            return None

        self.alerts.speak(READING_MESSAGE)
        self.pause()
        try:
            if frame is None:
                with self._latest_lock:
                    frame = self._latest_frame
            text = ""
            if frame is not None:
                try:
                    text = self.reader.recognize(frame)
                except Exception as e:
                    logger.error("[Reader] OCR failed: %s", e)
            message = interpret_text(text)
            self.alerts.speak(message)
            return message
        finally:
            self.resume()
            self._reading.release()

    def _listen_loop(self) -> None:
        while self._running:
            transcript = self.listener.recognize_command()
            if transcript is None:
                time.sleep(0.5)
            elif is_read_text_command(transcript):
                self.read_text()

    def _draw(self, frame: np.ndarray, dets: List[Detection]) -> None:
        frame = frame.copy()
        for d in dets:
            x, y, w, h = (int(v) for v in d.bbox)
            cv2.rectangle(frame, (x, y), (x + w, y + h), BOX_COLOR, 2)
            cv2.putText(
                frame, d.cls_name, (x, y - 5 if y > 10 else y + 15),
                cv2.FONT_HERSHEY_SIMPLEX, 0.5, BOX_COLOR, 1,
            )
        cv2.imshow(WINDOW_NAME, frame)

    def run(self) -> None:
        """Loop until 'q' (window mode) or stop()."""
        self._running = True
        if self.listener is not None:
            self._listener_thread = threading.Thread(target=self._listen_loop, name="listener", daemon=True)
            self._listener_thread.start()

        try:
            while self._running:
                frame = read_frame(self.cap)
                if frame is None:
                    continue
                self.step(frame)

                if self.show_window:
                    key = cv2.waitKey(1) & 0xFF
                    if key == ord("q"):
                        self._running = False
                    elif key == ord("r"):
                        self.read_text(frame)
        finally:
            self._running = False
            self.cap.release()
            if self.show_window:
                cv2.destroyAllWindows()

    def stop(self) -> None:
        self._running = False
