#!/usr/bin/env python3

"""Reference corpus loading

Walks the source image directory and yields one `ReferenceImage` per
decodable image. Images inside a subdirectory are labeled with that
subdirectory's name; images at the root are labeled with their file name.

```
source-images/
├── cat.jpg          -> "cat"
└── dog/
    ├── photo1.jpg   -> "dog"
    └── photo2.jpg   -> "dog"
```
"""

import os
from typing import Iterator, Optional, Sequence

from ImageLookup.core.errors import DirectoryNotFound
from ImageLookup.core.improc import has_extension, load2numpy
from ImageLookup.core.logging import logger
from ImageLookup.Recognizer.records import ReferenceImage

DEFAULT_EXTENSIONS = (".jpg",)


def load_reference_images(
    directory: os.PathLike,
    extensions: Sequence[str] = DEFAULT_EXTENSIONS,
    subdirectory: Optional[str] = None,
) -> Iterator[ReferenceImage]:
    """Recursively load reference images under `directory`

    params:
    - directory (PathLike): root of the reference images
    - extensions (Sequence[str]): file extensions to load
    - subdirectory (str): label inherited from the containing directory

    Subdirectories are visited before the files of the current directory,
    both in sorted order. Images that fail to decode are logged and skipped.
    """
    directory = os.fspath(directory)
    if not os.path.isdir(directory):
        raise DirectoryNotFound(
            f"The specified directory was not found: {directory}"
        )

    entries = sorted(os.listdir(directory))

    for name in entries:
        path = os.path.join(directory, name)
        if os.path.isdir(path):
            yield from load_reference_images(
                path,
                extensions=extensions,
                subdirectory=name,
            )

    for name in entries:
        path = os.path.join(directory, name)
        if not os.path.isfile(path) or not has_extension(path, extensions):
            continue

        try:
            image = load2numpy(path)
        except (OSError, ValueError) as e:
            logger.warning(f"Error loading image {path}: {e}")
            continue

        yield ReferenceImage.from_file(path, image, subdirectory)

