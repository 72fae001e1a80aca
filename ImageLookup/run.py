#!/usr/bin/env python3

"""Run the image recognizer against the default camera until Ctrl+C

```
python -m ImageLookup.run --config configs/default.py \
    --options source_dir=./data/source-images scorer.acceptance_floor=15
```

Add `verbose=True` to `--options` to print the merged config before starting.
"""

import argparse
import os
import time
from typing import List, Optional

import cv2

from ImageLookup.config import Config, DictAction
from ImageLookup.core.logging import logger
from ImageLookup.Recognizer import ImageRecognizer


def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Live reference image lookup")
    parser.add_argument(
        "--config",
        type=str,
        required=True,
    )
    parser.add_argument(
        '--options',
        nargs='+',
        action=DictAction,
        help='arguments in dict',
    )
    return parser.parse_args(argv)


def wait_for_interrupt(interval: float = 0.25) -> None:
    try:
        while True:
            time.sleep(interval)
    except KeyboardInterrupt:
        pass


def run(cfg: Config, **kwargs) -> int:
    """Load, start, wait for Ctrl+C, stop; `kwargs` go to `ImageRecognizer.from_config`"""
    if cfg.get("log_file", None) is not None:
        log_path = cfg.log_file.format(log_root=cfg.get("log_root", "."))
        parent_path = os.path.dirname(log_path)
        if parent_path and not os.path.exists(parent_path):
            os.makedirs(parent_path, exist_ok=True)
        logger.add_filehandler(log_path)

    cv2.setNumThreads(cfg.get("num_threads", 1))

    logger.info(f"Application starting. Source image directory is {cfg.source_dir}")

    recognizer = ImageRecognizer.from_config(cfg, **kwargs)
    recognizer.load()
    recognizer.start()

    logger.info("Recognizer running. Press Ctrl+C to end.")
    wait_for_interrupt()

    logger.info("Stopping recognizer.")
    recognizer.stop()
    logger.info("Recognizer stopped.")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    cfg = Config.fromfile(args.config)
    if args.options is not None:
        cfg.merge_from_dict(args.options)

    if cfg.get("verbose", False):
        print(">>> Config:")
        print(cfg.pretty_text)

    return run(cfg)


if __name__ == "__main__":
    raise SystemExit(main())
