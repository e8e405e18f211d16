"""layoutfix: recover text typed with the wrong keyboard layout active."""

from layoutfix.__version__ import __version__
from layoutfix.core import (
    DEFAULT_REGISTRY,
    ConfigurationError,
    Language,
    LayoutRegistry,
    transform_text,
)

__all__ = [
    "__version__",
    "ConfigurationError",
    "DEFAULT_REGISTRY",
    "Language",
    "LayoutRegistry",
    "transform_text",
]
