#!/usr/bin/env python3

from mmengine import Config, DictAction

__all__ = [
    "Config",
    "DictAction",
]
