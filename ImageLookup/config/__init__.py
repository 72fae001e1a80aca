#!/usr/bin/env python3

from .config import Config, DictAction

__all__ = [
    "Config",
    "DictAction",
]
