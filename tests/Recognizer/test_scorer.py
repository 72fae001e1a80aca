#!/usr/bin/env python3

import numpy as np
import pytest

from ImageLookup.Recognizer.scorer import Scorer


def test_empty_matches_score_zero():
    scorer = Scorer()
    assert scorer.score([]) == 0.0
    assert scorer.score(np.empty((0,))) == 0.0


def test_no_good_matches_score_zero():
    scorer = Scorer()
    # threshold is strict
    assert scorer.score([30, 31, 64, 128]) == 0.0


@pytest.mark.parametrize('n', [1, 5, 25, 100])
@pytest.mark.parametrize('d', [0, 10, 29])
def test_uniform_distance(n: int, d: int):
    scorer = Scorer()
    assert scorer.score([d] * n) == pytest.approx(n - 0.1 * d)


def test_mixed_distances():
    scorer = Scorer()
    distances = [10] * 25 + [50] * 25
    assert len(scorer.good_matches(distances)) == 25
    assert scorer.score(distances) == pytest.approx(24.0)

    assert scorer.score([0, 10, 20]) == pytest.approx(3 - 0.1 * 10)


def test_custom_parameters():
    scorer = Scorer(distance_threshold=50, weight=0.5, acceptance_floor=1)
    assert scorer.score([40, 40]) == pytest.approx(2 - 0.5 * 40)


def test_accepts():
    scorer = Scorer()
    # must beat the running best and the floor
    assert scorer.accepts(24.0, 0.0)
    assert not scorer.accepts(24.0, 24.0)
    assert not scorer.accepts(24.0, 30.0)
    assert not scorer.accepts(20.0, 0.0)
    assert not scorer.accepts(15.0, 0.0)
    assert scorer.accepts(20.5, 0.0)
