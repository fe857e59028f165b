"""Expected-output fixtures for the echor test suite."""

import logging
from dataclasses import dataclass
from pathlib import Path

from .constants import LOGGER_NAME, OUTPUT_DIR
from .echo import render_echo

log = logging.getLogger(LOGGER_NAME)


class FixtureError(RuntimeError):
    """Raised when the fixtures cannot be generated."""


class DirectoryCreationError(FixtureError):
    """Raised when the output directory cannot be created."""


class FileWriteError(FixtureError):
    """Raised when a fixture file cannot be written."""


@dataclass(frozen=True)
class Fixture:
    """One expected-output file and the echo words that produce it."""

    name: str
    words: tuple[str, ...]
    newline: bool = True

    @property
    def content(self) -> str:
        return render_echo(list(self.words), newline=self.newline)


FIXTURES: tuple[Fixture, ...] = (
    Fixture("hello1.txt", ("Hello there",)),
    Fixture("hello2.txt", ("Hello", "there")),
    Fixture("hello1.n.txt", ("Hello  there",), newline=False),
    Fixture("hello2.n.txt", ("Hello", "there"), newline=False),
)


def ensure_output_dir(output_dir: Path = OUTPUT_DIR) -> Path:
    """Create *output_dir* and its parents unless it already exists."""
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreationError(
            f"cannot create {output_dir}: {exc}"
        ) from exc
    return output_dir


def write_fixture(fixture: Fixture, output_dir: Path = OUTPUT_DIR) -> Path:
    """Write *fixture* into *output_dir*, replacing any existing file."""
    filepath = output_dir / fixture.name
    try:
        filepath.write_bytes(fixture.content.encode("utf-8"))
    except OSError as exc:
        raise FileWriteError(f"cannot write {filepath}: {exc}") from exc
    log.info("  wrote %s", filepath)
    return filepath


def write_fixtures(
    output_dir: Path = OUTPUT_DIR,
    fixtures: tuple[Fixture, ...] = FIXTURES,
) -> list[Path]:
    """Generate every fixture under *output_dir*.

    Stops at the first failure and leaves files already written in
    place.  Returns the written paths in fixture order.
    """
    ensure_output_dir(output_dir)
    return [write_fixture(fx, output_dir=output_dir) for fx in fixtures]


def check_fixtures(
    output_dir: Path = OUTPUT_DIR,
    fixtures: tuple[Fixture, ...] = FIXTURES,
) -> list[str]:
    """Return the names of fixtures that are missing or differ on disk."""
    mismatched = []
    for fx in fixtures:
        filepath = output_dir / fx.name
        if not filepath.is_file():
            log.warning("Missing fixture: %s", filepath)
            mismatched.append(fx.name)
        elif filepath.read_bytes() != fx.content.encode("utf-8"):
            log.warning("Fixture content differs: %s", filepath)
            mismatched.append(fx.name)
    return mismatched
