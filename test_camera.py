"""Camera opening and frame reads, with cv2.VideoCapture replaced."""

import cv2
import numpy as np
import pytest

from echoguard import camera
from echoguard.errors import CameraError


class FakeCapture:
    instances = []

    def __init__(self, source, opened=True, size=None, frames=()):
        self.source = source
        self.opened = opened
        self.size = size
        self.frames = list(frames)
        self.props = {}
        self.released = False
        FakeCapture.instances.append(self)

    def isOpened(self):
        return self.opened

    def set(self, prop, value):
        self.props[prop] = value

    def get(self, prop):
        if self.size is not None:
            w, h = self.size
            return {cv2.CAP_PROP_FRAME_WIDTH: w, cv2.CAP_PROP_FRAME_HEIGHT: h}[prop]
        return self.props.get(prop, 0)

    def read(self):
        if not self.frames:
            return False, None
        return True, self.frames.pop(0)

    def release(self):
        self.released = True


@pytest.fixture
def fake_capture(monkeypatch):
    FakeCapture.instances = []

    def install(**kwargs):
        monkeypatch.setattr(camera.cv2, "VideoCapture", lambda source: FakeCapture(source, **kwargs))
        return FakeCapture.instances

    return install


def test_opens_default_index_at_requested_size(fake_capture):
    instances = fake_capture()
    cap = camera.open_camera(width=640, height=480)
    assert instances[0].source == 0
    assert camera.frame_size(cap) == (640, 480)


def test_url_wins_over_index(fake_capture):
    instances = fake_capture()
    camera.open_camera(index=2, url="http://192.168.1.100:4747/video")
    assert instances[0].source == "http://192.168.1.100:4747/video"


def test_unopenable_source_raises_and_releases(fake_capture):
    instances = fake_capture(opened=False)
    with pytest.raises(CameraError):
        camera.open_camera(index=3)
    assert instances[0].released


def test_driver_size_mismatch_is_reported(fake_capture, caplog):
    fake_capture(size=(1280, 720))
    with caplog.at_level("WARNING"):
        cap = camera.open_camera(width=640, height=480)
    assert camera.frame_size(cap) == (1280, 720)
    assert "requested 640x480, got 1280x720" in caplog.text


def test_read_frame():
    frame = np.zeros((480, 640, 3), dtype=np.uint8)
    cap = FakeCapture(0, frames=[frame])
    assert camera.read_frame(cap) is frame
    assert camera.read_frame(cap) is None
