"""Output sinks: ordered save locations tried until one accepts the file"""

import logging
from dataclasses import dataclass
from pathlib import Path


logger = logging.getLogger(__name__)


class SinkError(RuntimeError):
    """Raised when no sink could store an output file."""


@dataclass
class DirectorySink:
    """Writes files into a directory, creating it on first use."""
    directory: Path

    def __post_init__(self):
        self.directory = Path(self.directory).expanduser()

    def write(self, name: str, data: bytes) -> Path:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.directory / name
        path.write_bytes(data)
        return path


def default_sinks(output_dir: str, fallback_dir: str | None = None) -> list[DirectorySink]:
    """Primary output directory first, then the fallback directory when one is configured."""
    sinks = [DirectorySink(Path(output_dir))]
    if fallback_dir:
        sinks.append(DirectorySink(Path(fallback_dir)))
    return sinks


def write_first(sinks: list, name: str, data: bytes, log: logging.Logger = None) -> Path:
    """Write data to the first sink that succeeds and return its path.

    An OSError moves on to the next sink; SinkError is raised when none succeeds.
    """
    log = log or logger
    last_error: Exception = None
    for sink in sinks:
        try:
            path = sink.write(name, data)
        except OSError as e:
            log.warning("Could not write %s to %s: %s", name, sink, e)
            last_error = e
            continue
        log.info("Wrote %s", path)
        return path
    raise SinkError(f"No output location accepted {name}") from last_error
