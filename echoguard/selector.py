"""Pick at most one detection per frame to announce, by direction priority."""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from echoguard.config import AlertConfig, DEFAULT_CONFIG
from echoguard.cooldown import CooldownTracker, cooldown_key
from echoguard.detector import Detection
from echoguard.direction import classify_direction
from echoguard.distance import estimate_distance


@dataclass(frozen=True)
class AnnouncementRequest:
    cls_name: str
    distance: Optional[float]  # meters, None when unknown
    direction: str

    @property
    def key(self) -> str:
        return cooldown_key(self.cls_name, self.direction)


def eligible_detections(
    detections: Iterable[Detection],
    config: AlertConfig = DEFAULT_CONFIG,
) -> List[Detection]:
    """Known classes wider than the noise floor, detector order preserved."""
    return [
        d for d in detections
        if d.cls_name in config.real_widths and d.width > config.min_box_width
    ]


def select_announcement(
    detections: Iterable[Detection],
    frame_width: float,
    now: float,
    cooldown: CooldownTracker,
    config: AlertConfig = DEFAULT_CONFIG,
) -> Optional[AnnouncementRequest]:
    """
    Walk directions in priority order and return the first one whose
    first eligible detection is not cooling down.

    Only the first detection per direction is considered; if its key is
    cooling down the scan moves on to the next direction.
    """
    filtered = eligible_detections(detections, config)

    for direction in config.direction_priority:
        relevant = next(
            (d for d in filtered
             if classify_direction(d.x, d.width, frame_width) == direction),
            None,
        )
        if relevant is None:
            continue

        request = AnnouncementRequest(
            cls_name=relevant.cls_name,
            distance=estimate_distance(
                relevant.cls_name, relevant.width,
                real_widths=config.real_widths,
                focal_length=config.focal_length,
            ),
            direction=classify_direction(relevant.x, relevant.width, frame_width),
        )
        if cooldown.is_allowed(request.key, now):
            return request
    return None
