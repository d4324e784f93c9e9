"""
Game Shelf - a terminal catalog for a personal video game collection.
"""

__version__ = "1.0.0"
