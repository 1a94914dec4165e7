"""Announcement selection and cooldown."""

from echoguard.config import AlertConfig
from echoguard.cooldown import CooldownTracker, cooldown_key
from echoguard.detector import Detection
from echoguard.selector import AnnouncementRequest, eligible_detections, select_announcement

FRAME_WIDTH = 640


def det(cls_name, x, w=80, y=50, h=200):
    return Detection(cls_name=cls_name, bbox=(x, y, w, h))


# Box positions for a 640px mirrored frame
def ahead(cls_name="person"):
    return det(cls_name, 280)   # center 320


def left(cls_name="person"):
    return det(cls_name, 500)   # center 540 -> flipped 100


def right(cls_name="person"):
    return det(cls_name, 100)   # center 140 -> flipped 500


# --------------------------- cooldown ---------------------------

def test_unseen_key_is_allowed():
    cd = CooldownTracker()
    assert cd.is_allowed("person-right", 0)


def test_cooldown_window_is_exclusive():
    cd = CooldownTracker(window_ms=4000)
    cd.record_announced("person-right", 1000)
    assert not cd.is_allowed("person-right", 1001)
    assert not cd.is_allowed("person-right", 5000)
    assert cd.is_allowed("person-right", 5001)


def test_cooldown_is_per_key():
    cd = CooldownTracker()
    cd.record_announced("person-right", 1000)
    assert cd.is_allowed("person-left", 1001)
    assert cd.is_allowed("car-right", 1001)


def test_record_overwrites_timestamp():
    cd = CooldownTracker()
    cd.record_announced("car-ahead", 0)
    cd.record_announced("car-ahead", 3000)
    assert cd.last_announced("car-ahead") == 3000
    assert not cd.is_allowed("car-ahead", 6000)
    assert len(cd) == 1


def test_timestamp_zero_still_counts():
    cd = CooldownTracker()
    cd.record_announced("chair-left", 0)
    assert not cd.is_allowed("chair-left", 10)


# --------------------------- filtering ---------------------------

def test_small_boxes_are_ignored():
    dets = [det("person", 100, w=30), det("car", 100, w=50)]
    assert eligible_detections(dets) == []
    assert select_announcement(dets, FRAME_WIDTH, 0, CooldownTracker()) is None


def test_unknown_classes_are_ignored():
    dets = [det("dog", 280, w=200), det("traffic light", 100, w=120)]
    assert select_announcement(dets, FRAME_WIDTH, 0, CooldownTracker()) is None


def test_eligibility_keeps_detector_order():
    dets = [right("car"), det("dog", 0), left("chair"), det("person", 0, w=10)]
    assert [d.cls_name for d in eligible_detections(dets)] == ["car", "chair"]


# --------------------------- selection ---------------------------

def test_single_person_scenario():
    req = select_announcement([det("person", 100)], FRAME_WIDTH, 0, CooldownTracker())
    assert req == AnnouncementRequest(cls_name="person", distance=3.8, direction="right")
    assert req.key == "person-right"


def test_ahead_beats_left_and_right():
    dets = [left("chair"), right("car"), ahead("bicycle")]
    req = select_announcement(dets, FRAME_WIDTH, 0, CooldownTracker())
    assert req.cls_name == "bicycle"
    assert req.direction == "ahead"


def test_left_beats_right():
    dets = [right("car"), left("chair")]
    req = select_announcement(dets, FRAME_WIDTH, 0, CooldownTracker())
    assert (req.cls_name, req.direction) == ("chair", "left")


def test_first_detection_in_a_direction_wins():
    dets = [ahead("chair"), ahead("person")]
    req = select_announcement(dets, FRAME_WIDTH, 0, CooldownTracker())
    assert req.cls_name == "chair"


def test_cooled_down_direction_moves_to_next_direction():
    cd = CooldownTracker()
    cd.record_announced(cooldown_key("person", "ahead"), 0)
    dets = [ahead("person"), ahead("car"), right("car")]
    req = select_announcement(dets, FRAME_WIDTH, 1000, cd)
    # the second ahead detection is not considered
    assert (req.cls_name, req.direction) == ("car", "right")


def test_everything_cooling_down_gives_nothing():
    cd = CooldownTracker()
    cd.record_announced("person-ahead", 0)
    cd.record_announced("chair-left", 0)
    dets = [ahead("person"), left("chair")]
    assert select_announcement(dets, FRAME_WIDTH, 4000, cd) is None
    assert select_announcement(dets, FRAME_WIDTH, 4001, cd).key == "person-ahead"


def test_selection_does_not_record_cooldown():
    cd = CooldownTracker()
    select_announcement([ahead()], FRAME_WIDTH, 0, cd)
    assert len(cd) == 0


def test_custom_priority_order():
    cfg = AlertConfig(direction_priority=("right", "left", "ahead"))
    dets = [ahead("person"), left("chair"), right("car")]
    req = select_announcement(dets, FRAME_WIDTH, 0, CooldownTracker(), cfg)
    assert req.direction == "right"


def test_empty_frame():
    assert select_announcement([], FRAME_WIDTH, 0, CooldownTracker()) is None


def test_detection_from_detector_dict():
    d = Detection.from_dict({"class": "person", "bbox": [100, 50, 80, 200]})
    assert d == det("person", 100)
