"""
Analysis logging for center loading and distance queries.
"""

import logging
from typing import Optional

class AnalysisLogger:
    """Log analysis-relevant events. Password text is never logged."""

    def __init__(self, log_file: Optional[str] = None, level: int = logging.INFO):
        self.logger = logging.getLogger('pwaffinity')
        self.logger.setLevel(level)

        if log_file:
            self.add_file_handler(log_file, level)

    def add_file_handler(self, log_file: str, level: int = logging.INFO) -> logging.Handler:
        """Attach a file handler; pair with remove_handler."""
        fh = logging.FileHandler(log_file)
        fh.setLevel(level)

        # Formatter
        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        fh.setFormatter(formatter)

        self.logger.addHandler(fh)
        return fh

    def remove_handler(self, handler: logging.Handler):
        """Detach and close a handler added by add_file_handler."""
        self.logger.removeHandler(handler)
        handler.close()

    def log_centers_loaded(self, source: str, count: int):
        """Log a successfully loaded reference center set."""
        self.logger.info(f"Loaded {count} reference centers from {source}")

    def log_query(self, length: int, distance: float):
        """Log a distance query by password length only."""
        self.logger.debug(f"Distance query (length {length}) -> {distance:.6f}")

    def log_configuration_error(self, details: str = ""):
        """Log reference data problems."""
        details_str = f" - {details}" if details else ""
        self.logger.warning(f"Configuration error{details_str}")

# Global logger instance
analysis_logger = AnalysisLogger()
