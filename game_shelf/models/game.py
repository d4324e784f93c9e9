"""
Game record model.
"""
from typing import Any, Dict, Mapping
from pydantic import BaseModel, ConfigDict, Field, field_validator


class GameRecord(BaseModel):
    """One catalogued game.

    Serialized with the camelCase field names used by the storage and
    interchange format (``imageUrl``, ``hasManual``, ``hasBox``); either
    spelling is accepted on input.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    platform: str
    notes: str = ""
    image_url: str = Field(default="", alias="imageUrl")
    has_manual: bool = Field(default=False, alias="hasManual")
    has_box: bool = Field(default=False, alias="hasBox")

    @field_validator('id', mode='before')
    @classmethod
    def coerce_id(cls, v):
        # Older exports carried numeric timestamps
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator('notes', 'image_url', mode='before')
    @classmethod
    def none_to_empty(cls, v):
        return "" if v is None else v

    @classmethod
    def from_loose(cls, data: Mapping[str, Any]) -> "GameRecord":
        """Build a record from any mapping, filling gaps instead of rejecting it.

        Missing text fields become "", missing flags become False.
        """
        def pick(*names, default=None):
            for name in names:
                if data.get(name) is not None:
                    return data[name]
            return default

        def flag(value) -> bool:
            if isinstance(value, str):
                return value.strip().lower() in ("true", "1", "yes")
            return bool(value)

        return cls(
            id=str(pick("id", default="")),
            title=str(pick("title", default="")),
            platform=str(pick("platform", default="")),
            notes=str(pick("notes", default="")),
            image_url=str(pick("imageUrl", "image_url", default="")),
            has_manual=flag(pick("hasManual", "has_manual", default=False)),
            has_box=flag(pick("hasBox", "has_box", default=False)),
        )

    def to_json_dict(self) -> Dict[str, Any]:
        """Dict in the storage/interchange shape."""
        return self.model_dump(by_alias=True)

    def has_cover(self) -> bool:
        """Check if a cover image URL is set."""
        return bool(self.image_url and self.image_url.strip())

    def includes_str(self) -> str:
        """Describe what comes with the game, e.g. "Manual & Box"."""
        parts = []
        if self.has_manual:
            parts.append("Manual")
        if self.has_box:
            parts.append("Box")
        return " & ".join(parts)

    def __str__(self) -> str:
        return f"{self.title} – {self.platform}"
