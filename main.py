# ------------------------------------------------------------------------------
# Main Script for the Detection-Triggered Fish Feeder
# main.py
# ------------------------------------------------------------------------------
"""
Feeds detection results into the feeder.

The detection pipeline runs outside this process; it hands over the captured
image together with its verdict:

    python main.py --fish capture.jpg
    python main.py --no-fish capture.jpg
"""
import argparse
import sys

import cv2

from config import get_config
from logging_config import configure_file_logging, get_logger

config = get_config()
logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Detection-triggered fish feeder")
    verdict = parser.add_mutually_exclusive_group(required=True)
    verdict.add_argument("--fish", metavar="IMAGE", help="image in which fish were detected")
    verdict.add_argument("--no-fish", metavar="IMAGE", help="image without fish")
    parser.add_argument("--config", default=None, help="motor sequence config file")
    parser.add_argument("--archive", default=None, help="archive directory")
    parser.add_argument(
        "--motor-pin", type=int, default=None, help="GPIO pin (negative: no hardware)"
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_file_logging(config["LOG_FILE"])

    from feeder.dispatcher import DetectionDispatcher
    from feeder.feeder import Feeder

    image_path = args.fish or args.no_fish
    image = cv2.imread(image_path)
    if image is None:
        logger.error(f"Could not read image: {image_path}")
        return 1

    with Feeder(
        motor_pin=args.motor_pin, config_path=args.config, archive_dir=args.archive
    ) as feeder:
        if config["CLEAR_ARCHIVE_ON_START"]:
            feeder.archiver.clear()

        dispatcher = DetectionDispatcher()
        dispatcher.register_callback(feeder)
        dispatcher.dispatch(image, fish_detected=args.fish is not None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
