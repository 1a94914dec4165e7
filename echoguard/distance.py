"""Monocular distance heuristic from bbox width."""

import math
from typing import Mapping, Optional

from echoguard.config import DEFAULT_CONFIG


def estimate_distance(
    cls_name: str,
    observed_width: float,
    real_widths: Optional[Mapping[str, float]] = None,
    focal_length: float = DEFAULT_CONFIG.focal_length,
) -> Optional[float]:
    """
    Estimate distance (meters, one decimal) with the pinhole model:
        distance = real_width * focal_length / observed_width

    Returns None for classes without a registered real width.
    The focal length is a fixed constant, so treat the result as an
    approximation, not a measurement.
    """
    widths = DEFAULT_CONFIG.real_widths if real_widths is None else real_widths
    real_width = widths.get(cls_name)
    if real_width is None:
        return None
    if observed_width <= 0:
        raise ValueError(f"observed width must be positive, got {observed_width}")
    distance = real_width * focal_length / observed_width
    # Half-up to one decimal (3.75 -> 3.8, 0.25 -> 0.3)
    return math.floor(distance * 10 + 0.5) / 10
