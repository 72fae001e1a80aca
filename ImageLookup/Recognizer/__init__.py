#!/usr/bin/env python3

from .capture import CaptureLoop
from .corpus import load_reference_images
from .features import FeatureExtractor
from .index import ReferenceIndex
from .matcher import Matcher
from .recognizer import ImageRecognizer
from .records import Features, Label, MatchResult, ReferenceImage
from .scorer import Scorer

__all__ = [
    "CaptureLoop",
    "Features",
    "FeatureExtractor",
    "ImageRecognizer",
    "Label",
    "MatchResult",
    "Matcher",
    "ReferenceImage",
    "ReferenceIndex",
    "Scorer",
    "load_reference_images",
]
