"""
Bionic Reading API client

Unofficial async Python client for the Bionic Reading RapidAPI. Converts
text to a Bionic Reading highlighted string, available as raw HTML or
Markdown.
"""

from .builder import ConvertBuilder
from .client import Client
from .config import Settings, get_settings, setup_logging
from .exceptions import ConversionError
from .models import ConversionRequest, ConversionResult, Fixation, Saccade
from .secret import Secret

__version__ = "0.1.0"

__all__ = [
    "Client",
    "ConvertBuilder",
    "ConversionRequest",
    "ConversionResult",
    "ConversionError",
    "Fixation",
    "Saccade",
    "Secret",
    "Settings",
    "get_settings",
    "setup_logging",
]
