"""
Read-text mode
==============

On user request the frame loop pauses, the current frame goes through
PaddleOCR, and the result is turned into one spoken sentence:

    "STOP"          -> "Stop sign detected. Please stop."
    "SPEED HUMP"    -> "Speed bump ahead."
    "EXIT 4"        -> "Detected text: EXIT 4"
    "" / "a"        -> "No readable text detected."
"""

import logging
import time

import cv2
import numpy as np

from echoguard.config import OCR_CONFIDENCE_THRESHOLD, OCR_SCALE_FACTOR

logger = logging.getLogger(__name__)

NO_TEXT_MESSAGE = "No readable text detected."
STOP_MESSAGE = "Stop sign detected. Please stop."
BUMP_MESSAGE = "Speed bump ahead."


def interpret_text(text: str) -> str:
    """Map raw OCR output to what should be spoken."""
    text = (text or "").strip()
    if len(text) <= 2:
        return NO_TEXT_MESSAGE
    lower = text.lower()
    if "stop" in lower:
        return STOP_MESSAGE
    if "hump" in lower or "bump" in lower:
        return BUMP_MESSAGE
    return f"Detected text: {text}"


class TextReader:
    """
    PaddleOCR wrapper. Only called on demand, never per frame.

    Usage:
        reader = TextReader()
        text = reader.recognize(frame)   # "EXIT 4"
    """

    def __init__(
        self,
        confidence_threshold: float = OCR_CONFIDENCE_THRESHOLD,
        scale_factor: float = OCR_SCALE_FACTOR,
    ):
        logger.info("[Reader] loading PaddleOCR (first run downloads the models)...")
        start = time.time()
        from paddleocr import PaddleOCR
        self.ocr = PaddleOCR(
            lang="en",
            use_doc_orientation_classify=False,
            use_doc_unwarping=False,
            use_textline_orientation=False,
            text_detection_model_name="PP-OCRv5_mobile_det",
            text_recognition_model_name="PP-OCRv5_mobile_rec",
            enable_mkldnn=False,
        )
        self.confidence_threshold = confidence_threshold
        self.scale_factor = scale_factor
        logger.info("[Reader] PaddleOCR loaded in %.1fs", time.time() - start)

    def recognize(self, frame: np.ndarray) -> str:
        """All confident text lines in the frame, joined by spaces."""
        if self.scale_factor < 1.0:
            frame = cv2.resize(frame, None, fx=self.scale_factor, fy=self.scale_factor)

        lines = []
        for res in self.ocr.predict(frame):
            for text, score in zip(res["rec_texts"], res["rec_scores"]):
                text = str(text).strip()
                if text and float(score) >= self.confidence_threshold:
                    lines.append(text)
        return " ".join(lines)
