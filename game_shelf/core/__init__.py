"""
Core package for Game Shelf.

Contains the collection manager, the storage adapter and import/export.
"""

from .storage import JsonFileStore
from .collection_manager import CollectionManager
from .data_manager import (
    CollectionExportError,
    CollectionImportError,
    export_collection,
    import_collection,
    load_seed_games,
    seed_if_empty,
)

__all__ = [
    'JsonFileStore',
    'CollectionManager',
    'CollectionExportError',
    'CollectionImportError',
    'export_collection',
    'import_collection',
    'load_seed_games',
    'seed_if_empty'
]
