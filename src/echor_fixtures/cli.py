"""Command-line interface."""

import argparse
import logging
import sys

from .constants import LOGGER_NAME, OUTPUT_DIR
from .fixtures import FIXTURES, FixtureError, check_fixtures, write_fixtures

log = logging.getLogger(LOGGER_NAME)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Generate the expected-output files for the echor "
        f"tests under {OUTPUT_DIR}/.",
    )
    # Extra arguments are accepted and ignored
    parser.parse_known_args()

    log.info("Writing %d fixtures to %s", len(FIXTURES), OUTPUT_DIR)
    try:
        write_fixtures()
    except FixtureError as exc:
        log.error("%s", exc)
        sys.exit(1)

    # Sanity check: what is on disk must match what was rendered
    mismatched = check_fixtures()
    if mismatched:
        log.error(
            "%d fixture(s) did not round-trip: %s",
            len(mismatched), ", ".join(mismatched),
        )
        sys.exit(1)


if __name__ == "__main__":
    main()
