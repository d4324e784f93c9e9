"""
Add/edit form model: the only place title and platform are checked.
"""
from typing import Any, Dict
from pydantic import BaseModel, field_validator

from .game import GameRecord

MISSING_INFO_TITLE = "Missing Information"
MISSING_INFO_MESSAGE = "Please enter at least the title and select a platform."


class GameForm(BaseModel):
    """Values submitted from the add or edit form."""
    title: str = ""
    platform: str = ""
    notes: str = ""
    image_url: str = ""
    has_manual: bool = False
    has_box: bool = False

    @field_validator('title', 'platform')
    @classmethod
    def require_text(cls, v):
        """Presence check; the value itself is kept as entered."""
        if not v or not v.strip():
            raise ValueError(MISSING_INFO_MESSAGE)
        return v

    def to_fields(self) -> Dict[str, Any]:
        """Fields for ``CollectionManager.add``."""
        return self.model_dump()

    def apply_to(self, record: GameRecord) -> GameRecord:
        """Build the edited record, keeping the original id."""
        return GameRecord(id=record.id, **self.to_fields())

    @classmethod
    def from_record(cls, record: GameRecord) -> "GameForm":
        """Prefill an edit form from an existing record."""
        return cls.model_construct(
            title=record.title,
            platform=record.platform,
            notes=record.notes,
            image_url=record.image_url,
            has_manual=record.has_manual,
            has_box=record.has_box
        )
