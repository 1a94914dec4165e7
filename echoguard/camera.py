"""Frame source for the alert loop: local webcam or a phone stream."""

import logging
from typing import Optional, Tuple

import cv2
import numpy as np

from echoguard.config import CAMERA_INDEX, FRAME_HEIGHT, FRAME_WIDTH
from echoguard.errors import CameraError

logger = logging.getLogger(__name__)


def open_camera(
    index: Optional[int] = None,
    width: int = FRAME_WIDTH,
    height: int = FRAME_HEIGHT,
    url: Optional[str] = None,
) -> cv2.VideoCapture:
    """
    Open a stream URL (DroidCam, IP Webcam) if given, else a local device.
    The driver may ignore the requested size; what it settled on is logged.
    """
    source = url if url else (CAMERA_INDEX if index is None else index)
    cap = cv2.VideoCapture(source)
    if not cap.isOpened():
        cap.release()
        raise CameraError(f"Cannot open camera source {source!r}")

    cap.set(cv2.CAP_PROP_FRAME_WIDTH, width)
    cap.set(cv2.CAP_PROP_FRAME_HEIGHT, height)
    actual_w, actual_h = frame_size(cap)
    if (actual_w, actual_h) != (width, height):
        logger.warning("[Camera] requested %dx%d, got %dx%d", width, height, actual_w, actual_h)
    else:
        logger.info("[Camera] %r opened at %dx%d", source, actual_w, actual_h)
    return cap


def frame_size(cap: cv2.VideoCapture) -> Tuple[int, int]:
    return int(cap.get(cv2.CAP_PROP_FRAME_WIDTH)), int(cap.get(cv2.CAP_PROP_FRAME_HEIGHT))


def read_frame(cap: cv2.VideoCapture) -> Optional[np.ndarray]:
    """Next frame, or None when the source has nothing to give."""
    ret, frame = cap.read()
    return frame if ret else None
