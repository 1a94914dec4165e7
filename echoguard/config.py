"""EchoGuard - obstacle alert configuration."""

import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from dotenv import load_dotenv


def _default_real_widths() -> Mapping[str, float]:
    # Assumed physical widths in meters, read-only
    return MappingProxyType({
        "person": 0.5,
        "chair": 0.5,
        "car": 1.8,
        "bicycle": 1.5,
        "motorbike": 1.5,
    })


@dataclass(frozen=True)
class AlertConfig:
    """Tunables for the detection-to-alert decision engine."""

    # Class name -> assumed real-world width (meters)
    real_widths: Mapping[str, float] = field(default_factory=_default_real_widths)

    # Pinhole focal length in pixels. Fixed, not calibrated per device,
    # so distances are an approximation rather than a measurement.
    focal_length: float = 600.0

    # Scan order when several directions have eligible detections
    direction_priority: Tuple[str, ...] = ("ahead", "left", "right")

    # Boxes this narrow (pixels) or narrower are treated as noise
    min_box_width: float = 50.0

    # Same (class, direction) is not repeated within this window
    cooldown_ms: float = 4000.0


DEFAULT_CONFIG = AlertConfig()

# Detector labels that differ from the real-width table names
CLASS_ALIASES = {
    "motorcycle": "motorbike",
}

# Camera
CAMERA_INDEX = 0
FRAME_WIDTH = 640
FRAME_HEIGHT = 480

# Detection
YOLO_MODEL = "yolov8n.pt"
CONFIDENCE_THRESHOLD = 0.5

# Phrasing service
GEMINI_MODEL = "gemini-2.0-flash"
PROXY_MODEL = "groq-v1"
PHRASING_MAX_TOKENS = 60
PHRASING_TEMPERATURE = 0.8
PHRASING_STOP = ("\n",)
PHRASING_TIMEOUT_SECONDS = 2.0

# Voice
SPEECH_RATE = 175
READ_TEXT_TRIGGER = "read the text"
COMMAND_LISTEN_SECONDS = 3.0
COMMAND_SAMPLE_RATE = 16000
WHISPER_MODEL = "base"

# OCR
OCR_CONFIDENCE_THRESHOLD = 0.6
OCR_SCALE_FACTOR = 0.5

# Debug window
WINDOW_NAME = "EchoGuard"
BOX_COLOR = (0, 255, 0)  # lime (BGR)


@dataclass(frozen=True)
class Secrets:
    """Deploy-time credentials. Never committed, always read from the environment."""

    gemini_api_key: Optional[str] = None
    proxy_url: Optional[str] = None
    proxy_token: Optional[str] = None


def load_secrets() -> Secrets:
    """Read credentials from the environment (and a local .env file, if any)."""
    load_dotenv()
    return Secrets(
        gemini_api_key=os.getenv("GEMINI_API_KEY") or None,
        proxy_url=os.getenv("PHRASING_PROXY_URL") or None,
        proxy_token=os.getenv("PHRASING_PROXY_TOKEN") or None,
    )
