"""
Loading reference centers from delimited text.

Each non-blank line holds one center: decimal values separated by ``,`` or
``;``.
"""

import re
from importlib import resources
from typing import Iterable

from .errors import CenterFileError, ConfigurationError
from .logger import analysis_logger
from .scorer import CenterSet

DEFAULT_CENTERS_RESOURCE = "sample_centers.csv"

_SEPARATOR = re.compile(r"[,;]")
_DECIMAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def parse_centers(lines: Iterable[str], source: str = "<memory>") -> CenterSet:
    """Parse delimited lines into a CenterSet."""
    centers = []
    for lineno, line in enumerate(lines, 1):
        line = line.strip()
        if not line:
            continue
        values = [value.strip() for value in _SEPARATOR.split(line)]
        for value in values:
            if not _DECIMAL.fullmatch(value):
                analysis_logger.log_configuration_error(f"{source}:{lineno}")
                raise CenterFileError(
                    f"{source}, line {lineno}: not a decimal number: {value!r}"
                )
        centers.append([float(value) for value in values])

    try:
        center_set = CenterSet(centers)
    except ConfigurationError as e:
        analysis_logger.log_configuration_error(f"{source}: {e}")
        raise

    analysis_logger.log_centers_loaded(source, len(center_set))
    return center_set


def load_centers(path: str) -> CenterSet:
    """Read a center file from disk."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return parse_centers(f, source=str(path))
    except OSError as e:
        analysis_logger.log_configuration_error(f"{path}: {e.strerror}")
        raise CenterFileError(f"Cannot read center file {path}: {e}") from e


def load_default_centers() -> CenterSet:
    """Load the sample centers bundled with the package."""
    resource = resources.files("pwaffinity") / "data" / DEFAULT_CENTERS_RESOURCE
    text = resource.read_text(encoding="utf-8")
    return parse_centers(text.splitlines(), source=DEFAULT_CENTERS_RESOURCE)
