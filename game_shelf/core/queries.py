"""
Read-only views over a collection: search, platform grouping, statistics.
"""
from typing import Dict, Iterable, List

from ..models.game import GameRecord
from ..models.stats import CollectionStats


def search_by_title(games: Iterable[GameRecord], term: str) -> List[GameRecord]:
    """Case-insensitive title substring search; a blank term matches nothing."""
    if not term or not term.strip():
        return []
    needle = term.lower()
    return [g for g in games if needle in g.title.lower()]


def games_for_platform(games: Iterable[GameRecord], platform: str) -> List[GameRecord]:
    """Games on one platform, sorted by title."""
    matching = [g for g in games if g.platform == platform]
    return sorted(matching, key=lambda g: g.title.casefold())


def count_by_platform(games: Iterable[GameRecord]) -> Dict[str, int]:
    """Number of games per platform, keyed in alphabetical order."""
    counts: Dict[str, int] = {}
    for game in games:
        if game.platform:
            counts[game.platform] = counts.get(game.platform, 0) + 1
    return {platform: counts[platform] for platform in sorted(counts)}


def collection_stats(games: Iterable[GameRecord]) -> CollectionStats:
    """Calculate totals and per-platform counts for a collection."""
    stats = CollectionStats()
    for game in games:
        stats.update_with_game(game)
    return stats
