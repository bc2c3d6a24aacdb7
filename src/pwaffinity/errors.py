"""
Custom exceptions for pwaffinity.
"""

class PwAffinityError(Exception):
    """Base exception for pwaffinity."""
    pass

class ConfigurationError(PwAffinityError):
    """Reference center set is empty or has the wrong dimension."""
    pass

class CenterFileError(ConfigurationError):
    """Reference center file could not be read or parsed."""
    pass

class DimensionError(PwAffinityError, ValueError):
    """Query vector length does not match the mask length."""
    pass
