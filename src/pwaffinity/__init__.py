"""
pwaffinity - password affinity distance and MD5 digests.
"""

from .affinity import MASK_LENGTH, Fingerprinter, classify, fingerprint
from .analyzer import AnalysisResult, PasswordAnalyzer
from .centers import load_centers, load_default_centers, parse_centers
from .errors import CenterFileError, ConfigurationError, DimensionError, PwAffinityError
from .md5 import MD5, md5_digest, md5_file, md5_hexdigest
from .scorer import CenterSet, NearestCentroidScorer, euclidean_distance

__version__ = "1.0.0"

__all__ = [
    "AnalysisResult",
    "CenterFileError",
    "CenterSet",
    "ConfigurationError",
    "DimensionError",
    "Fingerprinter",
    "MASK_LENGTH",
    "MD5",
    "NearestCentroidScorer",
    "PasswordAnalyzer",
    "PwAffinityError",
    "classify",
    "euclidean_distance",
    "fingerprint",
    "load_centers",
    "load_default_centers",
    "md5_digest",
    "md5_file",
    "md5_hexdigest",
    "parse_centers",
]
