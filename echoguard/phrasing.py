"""Turn an announcement into a sentence, via the phrasing service or a template."""

import logging
from typing import List, Optional, Protocol

from echoguard.selector import AnnouncementRequest

logger = logging.getLogger(__name__)


class PhrasingClient(Protocol):
    def complete(self, prompt: str) -> List[str]:
        """Return candidate completions. Raise PhrasingError on failure."""


def format_distance(distance: float) -> str:
    # 4.0 -> "4", 3.8 -> "3.8"
    return f"{distance:g}"


def build_prompt(cls_name: str, distance: Optional[float], direction: str) -> str:
    where = (
        f"approximately {format_distance(distance)} meters"
        if distance is not None
        else "an unknown distance"
    )
    return (
        "You are an assistant helping a visually impaired person. "
        f"An object detected is a {cls_name} at {where} to the {direction}. "
        "Provide a clear, polite, and helpful instruction or comment for the user."
    )


def fallback_phrase(cls_name: str, distance: Optional[float], direction: str) -> str:
    """Deterministic sentence used when the phrasing service can't help. No I/O."""
    msg = cls_name
    if distance is not None:
        msg += f" at about {format_distance(distance)} meters"
    msg += f" to your {direction}. Please be careful."
    return msg


class Phraser:
    """
    Ask the phrasing service for a comment, fall back to the template on any
    service failure or empty answer. Never raises to the caller.
    """

    def __init__(self, client: Optional[PhrasingClient] = None):
        self.client = client

    def phrase(self, cls_name: str, distance: Optional[float], direction: str) -> str:
        if self.client is not None:
            try:
                candidates = self.client.complete(build_prompt(cls_name, distance, direction))
            except Exception as e:
                logger.warning("[Phrasing] service failed, using template: %s", e)
            else:
                text = candidates[0].strip() if candidates else ""
                if text:
                    return text
                logger.warning("[Phrasing] no candidates returned, using template")
        return fallback_phrase(cls_name, distance, direction)

    def phrase_request(self, request: AnnouncementRequest) -> str:
        return self.phrase(request.cls_name, request.distance, request.direction)
