"""
Collection statistics model.
"""
from typing import Dict
from pydantic import BaseModel, Field

from .game import GameRecord


class CollectionStats(BaseModel):
    """Statistics for a collection of games."""
    total_games: int = 0
    boxed: int = 0
    with_manual: int = 0
    by_platform: Dict[str, int] = Field(default_factory=dict)

    def boxed_rate(self) -> float:
        """Percentage of games that have their box."""
        if self.total_games == 0:
            return 0.0
        return (self.boxed / self.total_games) * 100

    def manual_rate(self) -> float:
        """Percentage of games that have their manual."""
        if self.total_games == 0:
            return 0.0
        return (self.with_manual / self.total_games) * 100

    def platform_share(self, platform: str) -> float:
        """Percentage of the collection on one platform."""
        if self.total_games == 0:
            return 0.0
        return (self.by_platform.get(platform, 0) / self.total_games) * 100

    def update_with_game(self, game: GameRecord) -> None:
        """Update stats with a game."""
        self.total_games += 1

        if game.has_box:
            self.boxed += 1
        if game.has_manual:
            self.with_manual += 1

        self.by_platform[game.platform] = self.by_platform.get(game.platform, 0) + 1
