"""Left / ahead / right sector from a bbox's horizontal position."""

LEFT = "left"
AHEAD = "ahead"
RIGHT = "right"


def classify_direction(box_x: float, box_width: float, frame_width: float) -> str:
    """
    Sector of the box center in the user's frame of reference.

    The camera feed is mirrored, so the center is flipped before the frame
    is cut into thirds. Centers exactly on a third boundary are "ahead".
    """
    center = box_x + box_width / 2
    flipped = frame_width - center
    if flipped < frame_width / 3:
        return LEFT
    if flipped > 2 * frame_width / 3:
        return RIGHT
    return AHEAD
