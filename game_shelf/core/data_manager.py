"""
Collection import/export and bundled seed data.
"""
import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Iterable, List, Optional

from pydantic import ValidationError

from ..models.game import GameRecord

if TYPE_CHECKING:
    from .collection_manager import CollectionManager

logger = logging.getLogger(__name__)

SEED_FILE = Path(__file__).resolve().parent.parent / "assets" / "games.json"


class CollectionImportError(Exception):
    """Raised when a file or text is not a valid game collection."""


class CollectionExportError(Exception):
    """Raised when the collection cannot be written out."""


def _as_json_dict(record: Any) -> Any:
    if isinstance(record, GameRecord):
        return record.to_json_dict()
    return record


def serialize_collection(records: Iterable[Any], indent: Optional[int] = 2) -> str:
    """Serialize records to the storage/interchange JSON array."""
    return json.dumps([_as_json_dict(r) for r in records], indent=indent, ensure_ascii=False)


def parse_collection(text: str) -> List[GameRecord]:
    """Parse the interchange JSON array into records.

    Raises CollectionImportError for invalid JSON, a non-array document, or
    any element that is not a game record object.
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, TypeError) as e:
        raise CollectionImportError(f"Not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise CollectionImportError(
            f"Expected a JSON array of games, got {type(data).__name__}"
        )

    records = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise CollectionImportError(f"Entry {index} is not an object")
        try:
            records.append(GameRecord.model_validate(item))
        except ValidationError as e:
            raise CollectionImportError(f"Entry {index} is not a valid game: {e}") from e

    return records


def export_collection(records: Iterable[Any], output_file: Path) -> Path:
    """Write the collection, pretty-printed, to output_file."""
    output_file = Path(output_file)
    try:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        content = serialize_collection(records, indent=2)
        with open(output_file, 'w', encoding='utf-8') as f:
            f.write(content)
    except (OSError, TypeError, ValueError) as e:
        logger.error("Error exporting collection to %s: %s", output_file, e)
        raise CollectionExportError(f"Could not write {output_file}: {e}") from e

    logger.info("Exported collection to %s", output_file)
    return output_file


def import_collection(input_file: Path) -> List[GameRecord]:
    """Read and validate a collection file; does not touch any manager."""
    input_file = Path(input_file)
    try:
        with open(input_file, 'r', encoding='utf-8') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error reading import file %s: %s", input_file, e)
        raise CollectionImportError(f"Could not read {input_file}: {e}") from e

    records = parse_collection(text)
    logger.info("Read %d games from %s", len(records), input_file)
    return records


def load_seed_games(seed_file: Optional[Path] = None) -> List[GameRecord]:
    """Load the bundled starter collection; failures yield an empty list."""
    seed_file = Path(seed_file) if seed_file else SEED_FILE
    try:
        return import_collection(seed_file)
    except CollectionImportError as e:
        logger.error("Error loading seed games from %s: %s", seed_file, e)
        return []


def seed_if_empty(manager: "CollectionManager", seed_file: Optional[Path] = None) -> int:
    """Populate a first-run collection from the seed file.

    Only runs when the store holds no snapshot yet. Returns the number of
    seeded games.
    """
    if manager.has_snapshot():
        return 0

    games = load_seed_games(seed_file)
    if not games:
        return 0

    manager.replace(games)
    logger.info("Seeded collection with %d games", len(games))
    return len(games)
