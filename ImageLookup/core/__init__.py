#!/usr/bin/env python3

from ImageLookup.core.errors import (
    DirectoryNotFound,
    ImageLookupError,
    InvalidOperation,
)
from ImageLookup.core.logging import logger

__all__ = [
    "DirectoryNotFound",
    "ImageLookupError",
    "InvalidOperation",
    "logger",
]
