"""Configuration constants and logging setup."""

import logging
from pathlib import Path

OUTPUT_DIR = Path("tests/expected")
LOGGER_NAME = "echor_fixtures"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(message)s",
    datefmt="%H:%M:%S",
)
