"""EchoGuard - prioritized spoken obstacle alerts for visually impaired users."""

from echoguard.config import AlertConfig, DEFAULT_CONFIG
from echoguard.cooldown import CooldownTracker
from echoguard.detector import Detection
from echoguard.direction import classify_direction
from echoguard.distance import estimate_distance
from echoguard.phrasing import Phraser, fallback_phrase
from echoguard.selector import AnnouncementRequest, select_announcement

__all__ = [
    "AlertConfig",
    "DEFAULT_CONFIG",
    "CooldownTracker",
    "Detection",
    "classify_direction",
    "estimate_distance",
    "Phraser",
    "fallback_phrase",
    "AnnouncementRequest",
    "select_announcement",
]
