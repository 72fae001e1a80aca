#!/usr/bin/env python3

import threading
import time

import cv2
import numpy as np
import pytest


def draw_textured_image(
    seed: int,
    height: int = 240,
    width: int = 320,
) -> np.ndarray:
    """Random rectangles and circles; gives ORB plenty of corners"""
    rng = np.random.RandomState(seed)
    img = np.full((height, width, 3), 255, dtype=np.uint8)
    for _ in range(40):
        pt1 = (int(rng.randint(0, width)), int(rng.randint(0, height)))
        pt2 = (int(rng.randint(0, width)), int(rng.randint(0, height)))
        color = tuple(int(c) for c in rng.randint(0, 256, size=3))
        cv2.rectangle(img, pt1, pt2, color, -1)
    for _ in range(30):
        center = (int(rng.randint(0, width)), int(rng.randint(0, height)))
        radius = int(rng.randint(5, 40))
        color = tuple(int(c) for c in rng.randint(0, 256, size=3))
        cv2.circle(img, center, radius, color, -1)
    return img


class FakeCamera(object):
    """Stands in for `cv2.VideoCapture`; cycles through `frames`"""

    def __init__(self, frames=()) -> None:
        self.frames = list(frames)
        self.reads = 0
        self.released = False
        self._lock = threading.Lock()

    def isOpened(self) -> bool:
        return not self.released

    def read(self):
        assert not self.released, "read after release"
        with self._lock:
            i = self.reads
            self.reads += 1
        if len(self.frames) == 0:
            return False, None
        return True, self.frames[i % len(self.frames)]

    def release(self) -> None:
        assert not self.released, "released twice"
        self.released = True


class FakeCameraFactory(object):

    def __init__(self, frames=()) -> None:
        self.frames = list(frames)
        self.cameras = []
        self.devices = []

    def __call__(self, device: int) -> FakeCamera:
        self.devices.append(device)
        camera = FakeCamera(self.frames)
        self.cameras.append(camera)
        return camera

    @property
    def busy(self) -> bool:
        return any(not camera.released for camera in self.cameras)


def wait_until(predicate, timeout: float = 5.0, interval: float = 0.01) -> bool:
    end = time.time() + timeout
    while time.time() < end:
        if predicate():
            return True
        time.sleep(interval)
    return predicate()


@pytest.fixture
def textured_image():
    return draw_textured_image


@pytest.fixture
def camera_factory():
    return FakeCameraFactory


@pytest.fixture
def wait():
    return wait_until


@pytest.fixture
def reference_dir(tmp_path, textured_image):
    """
    tmp/
    ├── cat.jpg
    ├── broken.jpg
    ├── notes.txt
    ├── dog/
    │   ├── photo1.jpg
    │   └── photo2.JPG
    └── birds/
        └── owl/
            └── photo1.jpg
    """
    cv2.imwrite(str(tmp_path / "cat.jpg"), textured_image(0))
    (tmp_path / "broken.jpg").write_bytes(b"this is not a jpeg")
    (tmp_path / "notes.txt").write_text("not an image")

    (tmp_path / "dog").mkdir()
    cv2.imwrite(str(tmp_path / "dog" / "photo1.jpg"), textured_image(1))
    # upper-case extension, written via imencode
    _, buf = cv2.imencode(".jpg", textured_image(2))
    (tmp_path / "dog" / "photo2.JPG").write_bytes(buf.tobytes())

    (tmp_path / "birds" / "owl").mkdir(parents=True)
    cv2.imwrite(str(tmp_path / "birds" / "owl" / "photo1.jpg"), textured_image(3))
    return tmp_path
