"""Data models for the live client agent."""

from rift_watch.models.game_status import (
    Ability,
    GameStatus,
    Item,
    Score,
    SummonerSpell,
    SummonerSpells,
)
from rift_watch.models.live_client import (
    ActivePlayerPayload,
    ChampionStats,
    GameStatsPayload,
    ItemPayload,
    RosterEntryPayload,
)

__all__ = [
    "Ability",
    "GameStatus",
    "Item",
    "Score",
    "SummonerSpell",
    "SummonerSpells",
    "ActivePlayerPayload",
    "ChampionStats",
    "GameStatsPayload",
    "ItemPayload",
    "RosterEntryPayload",
]
