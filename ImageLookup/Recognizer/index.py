#!/usr/bin/env python3

from typing import Iterable, Iterator, List, Tuple

from tqdm import tqdm

from ImageLookup.core.logging import logger
from ImageLookup.Recognizer.features import FeatureExtractor
from ImageLookup.Recognizer.records import ReferenceImage


class ReferenceIndex(object):
    """Read-only, ordered collection of reference images with features

    Built once before the capture loop starts and shared by it without
    locking; there is no API to add or remove entries.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[ReferenceImage] = ()) -> None:
        entries = tuple(entries)
        for entry in entries:
            if entry.num_features == 0:
                raise ValueError(f"ERR: {entry.path} has no descriptors")
        object.__setattr__(self, "_entries", entries)

    def __setattr__(self, name, value):
        raise AttributeError("ReferenceIndex is immutable")

    @classmethod
    def build(
        cls,
        images: Iterable[ReferenceImage],
        extractor: FeatureExtractor,
        verbose: bool = False,
    ) -> "ReferenceIndex":
        """Compute features for every image, dropping featureless ones"""
        entries: List[ReferenceImage] = []
        for image in tqdm(images, desc="Indexing", disable=not verbose):
            features = extractor.extract(image.image)
            if features.is_empty:
                logger.warning(f"No features found in {image.path}, skipping")
                continue
            entries.append(image.with_features(features))
        return cls(entries)

    @property
    def entries(self) -> Tuple[ReferenceImage, ...]:
        return self._entries

    @property
    def labels(self) -> List[str]:
        return [entry.label for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ReferenceImage]:
        return iter(self._entries)

    def __getitem__(self, idx: int) -> ReferenceImage:
        return self._entries[idx]
