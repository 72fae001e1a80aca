#!/usr/bin/env python3

import os
from typing import Sequence

import cv2
import numpy as np


def has_extension(path: str, extensions: Sequence[str]) -> bool:
    # NOTE: case-insensitive, `.JPG` matches `.jpg`
    ext = os.path.splitext(path)[1].lower()
    return ext in [e.lower() for e in extensions]


def load2numpy(img_path: str) -> np.ndarray:
    """Decode an image file into a BGR `uint8` array

    Raises `ValueError` when OpenCV cannot decode the file.
    """
    assert os.path.exists(img_path), f"{img_path} doesn't exist"
    img = cv2.imread(img_path, cv2.IMREAD_COLOR)
    if img is None:
        raise ValueError(f"cannot decode {img_path}")
    return img


def to_gray(img: np.ndarray) -> np.ndarray:
    if img.ndim == 2:
        return img
    if img.shape[2] == 4:
        return cv2.cvtColor(img, cv2.COLOR_BGRA2GRAY)
    return cv2.cvtColor(img, cv2.COLOR_BGR2GRAY)
