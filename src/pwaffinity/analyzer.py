"""
Password analysis facade: affinity mask plus nearest-centroid distance.
"""

from dataclasses import dataclass
from typing import Iterable, Tuple, Union

from .affinity import Fingerprinter
from .centers import load_centers, load_default_centers
from .logger import analysis_logger
from .md5 import md5_hexdigest
from .scorer import CenterSet, NearestCentroidScorer, Vector


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of analysing one password."""
    password_length: int
    fingerprint: Tuple[int, ...]
    distance: float


class PasswordAnalyzer:
    """Score passwords against a fixed set of reference centers."""

    def __init__(self, centers: Union[CenterSet, Iterable[Vector]]):
        self.scorer = NearestCentroidScorer(centers)

    @classmethod
    def from_file(cls, path: str) -> 'PasswordAnalyzer':
        """Build an analyzer from a center file on disk."""
        return cls(load_centers(path))

    @classmethod
    def from_default(cls) -> 'PasswordAnalyzer':
        """Build an analyzer from the bundled sample centers."""
        return cls(load_default_centers())

    @property
    def centers(self) -> CenterSet:
        return self.scorer.centers

    def mask(self, password: str) -> Tuple[int, ...]:
        return Fingerprinter.fingerprint(password)

    def distance(self, password: str) -> float:
        """Minimal distance between the password's mask and any center."""
        distance = self.scorer.min_distance(self.mask(password))
        analysis_logger.log_query(len(password), distance)
        return distance

    def analyze(self, password: str) -> AnalysisResult:
        mask = self.mask(password)
        distance = self.scorer.min_distance(mask)
        analysis_logger.log_query(len(password), distance)
        return AnalysisResult(len(password), mask, distance)

    @staticmethod
    def compute_md5(text: Union[str, bytes]) -> str:
        """Hex MD5 of ``text`` (UTF-8 encoded when given a str)."""
        return md5_hexdigest(text)
