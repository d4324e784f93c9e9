"""
External service integrations for Game Shelf.
"""

from .image_search import ImageSearchClient, ImageSearchError, ImageSearchNotConfigured

__all__ = [
    'ImageSearchClient',
    'ImageSearchError',
    'ImageSearchNotConfigured'
]
