#!/usr/bin/env python3

from typing import List, Sequence

import cv2
import numpy as np
from tqdm import tqdm

from ImageLookup.config import Config
from ImageLookup.core.improc import to_gray
from ImageLookup.Recognizer.records import Features, empty_descriptors


class FeatureExtractor(object):

    detector = None

    def __init__(
        self,
        max_features: int = 500,
        scale_factor: float = 1.2,
        n_levels: int = 8,
        edge_threshold: int = 31,
        patch_size: int = 31,
        fast_threshold: int = 20,
    ) -> None:
        """ORB keypoint detector and descriptor

        params:
        - max_features (int): cap on detected keypoints
        - scale_factor (float): pyramid scale step
        - n_levels (int): pyramid depth
        - edge_threshold (int): border where features are not detected
        - patch_size (int): size of the patch used by the oriented BRIEF descriptor
        - fast_threshold (int): FAST corner threshold

        Defaults are OpenCV's.
        """
        assert max_features > 0
        assert scale_factor > 1.0
        assert n_levels > 0

        self.max_features = max_features
        self.scale_factor = scale_factor
        self.n_levels = n_levels
        self.edge_threshold = edge_threshold
        self.patch_size = patch_size
        self.fast_threshold = fast_threshold

        self.detector = cv2.ORB_create(
            nfeatures=max_features,
            scaleFactor=scale_factor,
            nlevels=n_levels,
            edgeThreshold=edge_threshold,
            patchSize=patch_size,
            fastThreshold=fast_threshold,
        )

    @classmethod
    def from_config(cls, cfg: Config):
        orb_cfg = cfg.orb
        return cls(
            max_features=orb_cfg.max_features,
            scale_factor=orb_cfg.scale_factor,
            n_levels=orb_cfg.n_levels,
            edge_threshold=orb_cfg.edge_threshold,
            patch_size=orb_cfg.patch_size,
            fast_threshold=orb_cfg.fast_threshold,
        )

    def clone(self) -> "FeatureExtractor":
        """New extractor with the same parameters (detectors aren't shared across threads)"""
        return FeatureExtractor(
            max_features=self.max_features,
            scale_factor=self.scale_factor,
            n_levels=self.n_levels,
            edge_threshold=self.edge_threshold,
            patch_size=self.patch_size,
            fast_threshold=self.fast_threshold,
        )

    def extract(self, image: np.ndarray) -> Features:
        """Extract keypoints and descriptors from a BGR or gray image"""
        gray = to_gray(image)
        keypoints, descriptors = self.detector.detectAndCompute(gray, None)

        # NOTE: OpenCV returns `None` descriptors when nothing was detected
        if descriptors is None or len(keypoints) == 0:
            return Features(keypoints=(), descriptors=empty_descriptors())

        return Features(keypoints=keypoints, descriptors=descriptors)

    def extract_all(
        self,
        images: Sequence[np.ndarray],
        verbose: bool = False,
    ) -> List[Features]:
        return [
            self.extract(image)
            for image in tqdm(images, desc="Extracting", disable=not verbose)
        ]
