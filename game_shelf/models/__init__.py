"""
Models package for Game Shelf.

Contains the game record, form, statistics and platform catalogue.
"""

from .game import GameRecord
from .forms import GameForm, MISSING_INFO_TITLE, MISSING_INFO_MESSAGE
from .stats import CollectionStats
from .platform import PLATFORMS, PLATFORM_COLORS, platform_color

__all__ = [
    'GameRecord',
    'GameForm',
    'MISSING_INFO_TITLE',
    'MISSING_INFO_MESSAGE',
    'CollectionStats',
    'PLATFORMS',
    'PLATFORM_COLORS',
    'platform_color'
]
