#!/usr/bin/env python3

from typing import Sequence, Union

import numpy as np

from ImageLookup.config import Config

Distances = Union[np.ndarray, Sequence[float]]


class Scorer(object):

    def __init__(
        self,
        distance_threshold: float = 30,
        weight: float = 0.1,
        acceptance_floor: float = 20,
    ) -> None:
        """Turns match distances into a single confidence score

        params:
        - distance_threshold (float): hamming distance below which a match is "good"
        - weight (float): penalty per unit of average good-match distance
        - acceptance_floor (float): minimum score for a candidate to count as a match

        score = (# good matches) - weight * (mean distance of good matches)
        """
        assert distance_threshold > 0
        assert weight >= 0

        self.distance_threshold = distance_threshold
        self.weight = weight
        self.acceptance_floor = acceptance_floor

    @classmethod
    def from_config(cls, cfg: Config):
        scorer_cfg = cfg.scorer
        return cls(
            distance_threshold=scorer_cfg.distance_threshold,
            weight=scorer_cfg.weight,
            acceptance_floor=scorer_cfg.acceptance_floor,
        )

    def good_matches(self, distances: Distances) -> np.ndarray:
        distances = np.asarray(distances, dtype=np.float64)
        return distances[distances < self.distance_threshold]

    def score(self, distances: Distances) -> float:
        good = self.good_matches(distances)
        if len(good) == 0:
            return 0.0
        return float(len(good) - self.weight * good.mean())

    def accepts(self, score: float, best_score: float) -> bool:
        # a lone candidate still has to clear the floor
        return score > best_score and score > self.acceptance_floor
