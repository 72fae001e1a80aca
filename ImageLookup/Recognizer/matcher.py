#!/usr/bin/env python3

from typing import Optional

import cv2
import numpy as np

from ImageLookup.config import Config
from ImageLookup.Recognizer.index import ReferenceIndex
from ImageLookup.Recognizer.records import NO_MATCH, MatchResult
from ImageLookup.Recognizer.scorer import Scorer


class Matcher(object):

    matcher = None

    def __init__(self, scorer: Optional[Scorer] = None) -> None:
        """Brute-force hamming matcher over a `ReferenceIndex`

        Every query descriptor is matched to its single nearest reference
        descriptor (no ratio test, no cross check).
        """
        if scorer is None:
            scorer = Scorer()
        self.scorer = scorer
        self.matcher = cv2.BFMatcher(normType=cv2.NORM_HAMMING, crossCheck=False)

    @classmethod
    def from_config(cls, cfg: Config):
        return cls(scorer=Scorer.from_config(cfg))

    def clone(self) -> "Matcher":
        return Matcher(scorer=self.scorer)

    def match_distances(
        self,
        query: np.ndarray,
        reference: np.ndarray,
    ) -> np.ndarray:
        """Nearest-neighbor distances from `query` to `reference`, ascending"""
        if len(query) == 0 or len(reference) == 0:
            return np.empty((0,), dtype=np.float64)

        matches = self.matcher.match(query, reference)
        distances = np.array([m.distance for m in matches], dtype=np.float64)
        distances.sort()
        return distances

    def find_best(
        self,
        query: np.ndarray,
        index: ReferenceIndex,
    ) -> MatchResult:
        """Score every reference entry and return the best accepted one

        The scan is exhaustive. Ties keep the entry that was loaded first.
        """
        if len(query) == 0:
            return NO_MATCH

        best = NO_MATCH
        best_score = 0.0
        for i, entry in enumerate(index):
            distances = self.match_distances(query, entry.descriptors)
            score = self.scorer.score(distances)
            if self.scorer.accepts(score, best_score):
                best_score = score
                best = MatchResult(
                    label=entry.label,
                    score=score,
                    match_count=len(self.scorer.good_matches(distances)),
                    index=i,
                )
        return best
