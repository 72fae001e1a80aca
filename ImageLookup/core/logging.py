#!/usr/bin/env python3

import logging
from typing import Optional


class _Logger(logging.Logger):
    def __init__(
        self,
        name: str,
        level: int,
        filename: Optional[str] = None,
        filemode: str = "a",
        stream=None,
        format_str: Optional[str] = None,
        dateformat: Optional[str] = None,
        style: str = "%",
    ) -> None:
        super().__init__(name, level)
        if filename is not None:
            handler = logging.FileHandler(filename, filemode)
        else:
            handler = logging.StreamHandler(stream)
        self._formatter = logging.Formatter(format_str, dateformat, style)
        handler.setFormatter(self._formatter)
        super().addHandler(handler)

    def add_filehandler(self, log_filename: str) -> None:
        filehandler = logging.FileHandler(log_filename)
        filehandler.setFormatter(self._formatter)
        self.addHandler(filehandler)


logger = _Logger(
    name="ImageLookup",
    level=logging.INFO,
    format_str="%(asctime)-15s %(message)s",
)
