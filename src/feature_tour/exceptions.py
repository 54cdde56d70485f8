"""Exception hierarchy for the feature tour.

Every tour-specific exception inherits from :class:`FeatureTourError` so
callers can catch a single base class.
"""


class FeatureTourError(Exception):
    """Base exception for all feature tour errors."""


class ConfigurationError(FeatureTourError, ValueError):
    """Raised when an environment setting cannot be parsed."""


class NoValuePresentError(FeatureTourError, LookupError):
    """Raised when an optional value is unwrapped but holds ``None``."""
