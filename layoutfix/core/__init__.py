from layoutfix.core.errors import ConfigurationError
from layoutfix.core.languages import Language
from layoutfix.core.registry import DEFAULT_REGISTRY, LayoutRegistry
from layoutfix.core.text_converter import transform_text

__all__ = [
    "ConfigurationError",
    "DEFAULT_REGISTRY",
    "Language",
    "LayoutRegistry",
    "transform_text",
]
