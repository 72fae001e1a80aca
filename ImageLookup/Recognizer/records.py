#!/usr/bin/env python3

import os
from typing import Optional, Tuple

import attr
import cv2
import numpy as np

# ORB descriptors are 256 bits
DESCRIPTOR_BYTES = 32

FROM_FILE = "file"
FROM_DIRECTORY = "directory"


def empty_descriptors() -> np.ndarray:
    return np.empty((0, DESCRIPTOR_BYTES), dtype=np.uint8)


def _readonly(descriptors: np.ndarray) -> np.ndarray:
    descriptors = np.array(descriptors, dtype=np.uint8, copy=True)
    descriptors.setflags(write=False)
    return descriptors


@attr.s(auto_attribs=True, frozen=True)
class Label:
    """Where a reference image's label came from

    `source` is either `FROM_FILE` (the file's base name) or
    `FROM_DIRECTORY` (the containing subdirectory's name).
    """

    name: str
    source: str = attr.ib(
        validator=attr.validators.in_((FROM_FILE, FROM_DIRECTORY)),
    )

    @classmethod
    def derive(cls, path: str, subdirectory: Optional[str] = None) -> "Label":
        if subdirectory:
            return cls(name=subdirectory, source=FROM_DIRECTORY)
        name = os.path.splitext(os.path.basename(path))[0]
        return cls(name=name, source=FROM_FILE)


@attr.s(auto_attribs=True, frozen=True, eq=False)
class Features:
    keypoints: Tuple[cv2.KeyPoint, ...] = attr.ib(converter=tuple, factory=tuple)
    descriptors: np.ndarray = attr.ib(factory=empty_descriptors)

    def __len__(self) -> int:
        return len(self.descriptors)

    @property
    def is_empty(self) -> bool:
        return len(self.descriptors) == 0


@attr.s(auto_attribs=True, frozen=True, eq=False)
class ReferenceImage:
    path: str
    label: str
    label_source: str
    image: np.ndarray = attr.ib(repr=False)
    keypoints: Tuple[cv2.KeyPoint, ...] = attr.ib(
        converter=tuple, factory=tuple, repr=False,
    )
    descriptors: np.ndarray = attr.ib(
        converter=_readonly, factory=empty_descriptors, repr=False,
    )

    @classmethod
    def from_file(
        cls,
        path: str,
        image: np.ndarray,
        subdirectory: Optional[str] = None,
    ) -> "ReferenceImage":
        label = Label.derive(path, subdirectory)
        return cls(
            path=path,
            label=label.name,
            label_source=label.source,
            image=image,
        )

    def with_features(self, features: Features) -> "ReferenceImage":
        return attr.evolve(
            self,
            keypoints=features.keypoints,
            descriptors=features.descriptors,
        )

    @property
    def num_features(self) -> int:
        return len(self.descriptors)


@attr.s(auto_attribs=True, frozen=True)
class MatchResult:
    label: Optional[str] = None
    score: float = 0.0
    match_count: int = 0
    index: Optional[int] = None

    @property
    def matched(self) -> bool:
        return self.label is not None

    @property
    def message(self) -> Optional[str]:
        if self.label is None:
            return None
        return f"Matched image: {self.label}"


NO_MATCH = MatchResult()
