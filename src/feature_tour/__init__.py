"""A guided tour of modern Python language features.

Every topic module exposes small routines that build literal sample data,
transform it and print the result. ``python -m feature_tour`` runs them all
in a fixed order.
"""

from __future__ import annotations

from .exceptions import ConfigurationError, FeatureTourError, NoValuePresentError
from .settings import Settings, load_settings

__all__ = [
    "ConfigurationError",
    "FeatureTourError",
    "NoValuePresentError",
    "Settings",
    "load_settings",
]

__version__ = "1.0.0"
