"""
Key-value store adapter backed by JSON files on local disk.
"""
import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

_KEY_PATTERN = re.compile(r'^[A-Za-z0-9_.-]+$')


class JsonFileStore:
    """Stores each key's text value in ``<directory>/<key>.json``.

    Writes go through a temporary file and an atomic rename, so a value is
    always either the previous snapshot or the new one in full.
    """

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def _path_for(self, key: str) -> Path:
        if not key or not _KEY_PATTERN.match(key) or key.startswith('.'):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.directory / f"{key}.json"

    def has_item(self, key: str) -> bool:
        """Check if a value is stored under key."""
        return self._path_for(key).exists()

    def get_item(self, key: str) -> Optional[str]:
        """Return the stored text, or None when the key is absent."""
        path = self._path_for(key)
        if not path.exists():
            return None
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()

    def set_item(self, key: str, value: str) -> None:
        """Overwrite the value stored under key."""
        path = self._path_for(key)
        self.directory.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(value)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Wrote %d characters to %s", len(value), path)

    def remove_item(self, key: str) -> bool:
        """Delete a key; returns False when it was not stored."""
        path = self._path_for(key)
        if not path.exists():
            return False
        path.unlink()
        return True

