#!/usr/bin/env python3

import os

import pytest

from ImageLookup.config import Config
from ImageLookup.Recognizer import FeatureExtractor, Matcher, Scorer


@pytest.mark.parametrize('name', ['default.py', 'jpeg_png.py'])
def test_configs_build(name: str):
    cfg_path = os.path.join("configs", name)
    assert os.path.exists(cfg_path)
    cfg = Config.fromfile(cfg_path)

    extractor = FeatureExtractor.from_config(cfg)
    assert extractor.max_features == cfg.orb.max_features

    scorer = Scorer.from_config(cfg)
    assert scorer.distance_threshold == 30
    assert scorer.weight == 0.1

    matcher = Matcher.from_config(cfg)
    assert matcher.scorer.acceptance_floor == scorer.acceptance_floor

    assert cfg.capture.device == 0
    assert cfg.capture.poll_interval == 0.1


def test_jpeg_png_overrides():
    cfg = Config.fromfile(os.path.join("configs", "jpeg_png.py"))
    assert tuple(cfg.corpus.extensions) == (".jpg", ".jpeg", ".png")
    assert cfg.scorer.acceptance_floor == 15
    # untouched keys come from the base
    assert cfg.scorer.distance_threshold == 30
    assert cfg.source_dir == "./data/source-images"
