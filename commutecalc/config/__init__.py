"""
Configuration file support for CommuteCalc
"""

from .models import ConfigFormat, EstimateConfig
from .parser import ConfigParser, ConfigParserError

__all__ = ["ConfigFormat", "ConfigParser", "ConfigParserError", "EstimateConfig"]
