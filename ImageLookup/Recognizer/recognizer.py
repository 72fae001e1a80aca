#!/usr/bin/env python3

import os
from typing import Optional, Sequence

import cv2
import numpy as np

from ImageLookup.config import Config
from ImageLookup.core.errors import InvalidOperation
from ImageLookup.core.logging import logger
from ImageLookup.Recognizer.capture import CameraFactory, CaptureLoop, Sink
from ImageLookup.Recognizer.corpus import DEFAULT_EXTENSIONS, load_reference_images
from ImageLookup.Recognizer.features import FeatureExtractor
from ImageLookup.Recognizer.index import ReferenceIndex
from ImageLookup.Recognizer.matcher import Matcher
from ImageLookup.Recognizer.records import MatchResult


class ImageRecognizer(object):

    # Properties
    source_dir: os.PathLike
    extractor: FeatureExtractor
    matcher: Matcher

    _index: Optional[ReferenceIndex]
    _loop: Optional[CaptureLoop]

    def __init__(
        self,
        source_dir: os.PathLike,
        extractor: Optional[FeatureExtractor] = None,
        matcher: Optional[Matcher] = None,
        extensions: Sequence[str] = DEFAULT_EXTENSIONS,
        device: int = 0,
        poll_interval: float = 0.1,
        camera_factory: CameraFactory = cv2.VideoCapture,
        sink: Optional[Sink] = None,
        verbose: bool = False,
    ) -> None:
        """Image Recognizer

        params:
        - source_dir (PathLike): root of the reference images
        - extractor (FeatureExtractor): defaults to ORB with OpenCV defaults
        - matcher (Matcher): defaults to the default `Scorer`
        - extensions (Sequence[str]): reference image extensions
        - device (int): camera device index
        - poll_interval (float): seconds between frame pulls
        - camera_factory (Callable): opens the camera
        - sink (Callable): receives "Matched image" messages
        - verbose (bool): show progress while indexing

        NOTE: intended usage
        - call `load` once to build the reference index
        - call `start` to begin matching live frames on a worker thread
        - call `stop` to end it; `start` may be called again afterwards
        """
        if extractor is None:
            extractor = FeatureExtractor()
        if matcher is None:
            matcher = Matcher()

        self.source_dir = source_dir
        self.extractor = extractor
        self.matcher = matcher
        self.extensions = tuple(extensions)
        self.device = device
        self.poll_interval = poll_interval
        self.verbose = verbose

        self._camera_factory = camera_factory
        self._sink = sink
        self._index = None
        self._loop = None

    @classmethod
    def from_config(cls, cfg: Config, **kwargs):
        return cls(
            source_dir=cfg.source_dir,
            extractor=FeatureExtractor.from_config(cfg),
            matcher=Matcher.from_config(cfg),
            extensions=cfg.corpus.extensions,
            device=cfg.capture.device,
            poll_interval=cfg.capture.poll_interval,
            verbose=cfg.get("verbose", False),
            **kwargs,
        )

    @property
    def index(self) -> ReferenceIndex:
        if self._index is None:
            raise InvalidOperation("reference images have not been loaded")
        return self._index

    @property
    def is_loaded(self) -> bool:
        return self._index is not None

    @property
    def is_running(self) -> bool:
        return self._loop is not None and self._loop.is_running

    def load(self) -> ReferenceIndex:
        """Load and index the reference images

        Raises `DirectoryNotFound` when `source_dir` does not exist, in
        which case no index is kept.
        """
        if self.is_running:
            raise InvalidOperation("cannot reload while running")

        images = list(
            load_reference_images(self.source_dir, extensions=self.extensions)
        )
        self._index = ReferenceIndex.build(
            images,
            extractor=self.extractor,
            verbose=self.verbose,
        )
        self._loop = CaptureLoop(
            index=self._index,
            extractor=self.extractor.clone(),
            matcher=self.matcher.clone(),
            device=self.device,
            poll_interval=self.poll_interval,
            camera_factory=self._camera_factory,
            sink=self._sink,
        )
        logger.info(f"Loaded {len(self._index)} reference images from {self.source_dir}")
        return self._index

    def start(self) -> None:
        if self._loop is None:
            raise InvalidOperation("call `load` before `start`")
        self._loop.start()

    def stop(self) -> None:
        if self._loop is None:
            raise InvalidOperation("recognizer is not running")
        self._loop.stop()

    def recognize(self, frame: np.ndarray) -> MatchResult:
        features = self.extractor.extract(frame)
        return self.matcher.find_best(features.descriptors, self.index)
