#!/usr/bin/env python3

"""Live capture loop

Runs on a single worker thread which owns the camera handle for its whole
lifetime. The controlling thread only flips the stop flag and joins.
"""

from threading import Event, Thread
import time
from typing import Any, Callable, Optional

import cv2
import numpy as np

from ImageLookup.core.errors import InvalidOperation
from ImageLookup.core.logging import logger
from ImageLookup.Recognizer.features import FeatureExtractor
from ImageLookup.Recognizer.index import ReferenceIndex
from ImageLookup.Recognizer.matcher import Matcher
from ImageLookup.Recognizer.records import NO_MATCH, MatchResult

CameraFactory = Callable[[int], Any]
Sink = Callable[[str], Any]


class CaptureLoop(object):

    # Properties
    index: ReferenceIndex
    extractor: FeatureExtractor
    matcher: Matcher

    _thread: Optional[Thread]
    _stop_event: Event
    _running: bool
    _last_message: str
    _last_result: MatchResult

    def __init__(
        self,
        index: ReferenceIndex,
        extractor: FeatureExtractor,
        matcher: Matcher,
        device: int = 0,
        poll_interval: float = 0.1,
        camera_factory: CameraFactory = cv2.VideoCapture,
        sink: Optional[Sink] = None,
    ) -> None:
        """Capture Loop

        params:
        - index (ReferenceIndex): loaded reference images (read-only)
        - extractor (FeatureExtractor)
        - matcher (Matcher)
        - device (int): camera device index
        - poll_interval (float): seconds between frame pulls
        - camera_factory (Callable): opens the camera given `device`;
          the returned object needs `read()` and `release()`
        - sink (Callable): receives match messages, defaults to `logger.info`

        NOTE: `extractor` and `matcher` are used by the worker thread only
        once `start` is called
        """
        assert poll_interval >= 0

        self.index = index
        self.extractor = extractor
        self.matcher = matcher
        self.device = device
        self.poll_interval = poll_interval

        self._camera_factory = camera_factory
        self._sink = sink if sink is not None else logger.info

        self._thread = None
        self._stop_event = Event()
        self._running = False
        self._last_message = ""
        self._last_result = NO_MATCH

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def last_result(self) -> MatchResult:
        return self._last_result

    def start(self) -> None:
        """Spawn the worker thread and return without waiting for a frame"""
        if self._running:
            raise InvalidOperation("capture loop is already running")

        self._stop_event.clear()
        self._thread = Thread(
            target=self._run,
            name="CaptureLoop",
            daemon=True,
        )
        self._running = True
        self._thread.start()

    def stop(self) -> None:
        """Signal the worker to exit and block until the camera is released"""
        if not self._running:
            raise InvalidOperation("capture loop is not running")

        self._stop_event.set()
        self._thread.join()
        self._thread = None
        self._running = False

    def log_if_changed(self, message: str) -> bool:
        if message == self._last_message:
            return False
        self._sink(message)
        self._last_message = message
        return True

    def recognize(self, frame: np.ndarray) -> MatchResult:
        features = self.extractor.extract(frame)
        return self.matcher.find_best(features.descriptors, self.index)

    def step(self, camera) -> Optional[MatchResult]:
        """Run one capture cycle

        Returns `None` when no frame was available or OpenCV failed on it;
        either way the next cycle tries again.
        """
        t = time.time()
        try:
            ret, frame = camera.read()
            if not ret or frame is None:
                return None
            result = self.recognize(frame)
        except cv2.error as e:
            logger.warning(f"skipping frame: {e}")
            return None

        elapsed = time.time() - t
        if elapsed > self.poll_interval:
            logger.debug(f"matching took {elapsed:.3f}s (interval {self.poll_interval:.3f}s)")

        self._last_result = result
        if result.matched:
            self.log_if_changed(result.message)
        return result

    def _run(self) -> None:
        camera = self._camera_factory(self.device)
        try:
            if hasattr(camera, "isOpened") and not camera.isOpened():
                logger.warning(f"camera {self.device} could not be opened")

            # the flag is only checked between cycles
            while not self._stop_event.wait(self.poll_interval):
                self.step(camera)
        finally:
            camera.release()
