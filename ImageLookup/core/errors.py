#!/usr/bin/env python3


class ImageLookupError(Exception):
    """Base class for errors raised by ImageLookup."""


class DirectoryNotFound(ImageLookupError, FileNotFoundError):
    """The reference image root does not exist."""


class InvalidOperation(ImageLookupError, RuntimeError):
    """A lifecycle method was called in the wrong state."""
