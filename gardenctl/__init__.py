"""
gardenctl - registry of Garden clusters and target pattern matching.
"""
from .errors import GardenctlError
from .matcher import match_pattern
from .models import Config, Garden, PatternMatch
from .registry import GardenRegistry

__version__ = "0.1.0"

__all__ = [
    'Config',
    'Garden',
    'GardenRegistry',
    'GardenctlError',
    'PatternMatch',
    'match_pattern',
]
