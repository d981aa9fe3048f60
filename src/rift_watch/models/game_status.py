"""Normalized game status snapshot."""

from dataclasses import dataclass, fields, is_dataclass
from typing import Any

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from rift_watch.models.live_client import ChampionStats

ABILITY_SLOTS = ("Q", "W", "E", "R", "Passive")


@dataclass(frozen=True)
class Score:
    """Scoreboard line of the active player. Always complete."""

    kills: int
    deaths: int
    assists: int
    creep_score: int
    ward_score: float


@dataclass(frozen=True)
class SummonerSpell:
    display_name: str
    description: str = ""


@dataclass(frozen=True)
class SummonerSpells:
    slot_one: SummonerSpell | None = None
    slot_two: SummonerSpell | None = None


@dataclass(frozen=True)
class Ability:
    slot: str  # One of ABILITY_SLOTS
    display_name: str
    level: int | None = None  # None for the passive


@dataclass(frozen=True)
class Item:
    """An occupied inventory slot."""

    slot: int  # 0-5 inventory, 6 trinket
    item_id: int
    display_name: str
    count: int
    can_use: bool
    consumable: bool
    price: int


@dataclass(frozen=True)
class GameStatus:
    """One reconciled snapshot of the live game.

    Only ``is_in_game`` is guaranteed. Every other field is None when its
    source endpoint was unavailable, and all of them are None when the
    player is not in a game.
    """

    is_in_game: bool
    # Game metadata (gamestats)
    game_time: float | None = None
    game_mode: str | None = None
    map_name: str | None = None
    map_number: int | None = None
    # Active player
    active_player_name: str | None = None
    level: int | None = None
    current_gold: float | None = None
    champion_stats: ChampionStats | None = None
    abilities: tuple[Ability, ...] | None = None
    # Roster
    champion_name: str | None = None
    team: str | None = None
    score: Score | None = None
    summoner_spells: SummonerSpells | None = None
    # Inventory
    items: tuple[Item, ...] | None = None

    def __post_init__(self):
        if not self.is_in_game:
            populated = [
                f.name for f in fields(self)
                if f.name != "is_in_game" and getattr(self, f.name) is not None
            ]
            if populated:
                raise ValueError(f"offline status cannot carry {', '.join(populated)}")
        if self.items is not None:
            slots = [item.slot for item in self.items]
            if len(slots) != len(set(slots)):
                raise ValueError(f"duplicate item slots: {slots}")

    @classmethod
    def offline(cls) -> "GameStatus":
        """The canonical not-in-game status."""
        return cls(is_in_game=False)

    def to_dict(self) -> dict[str, Any]:
        """Render as a camelCase dict, leaving out unset fields."""
        return _render(self)


def _render(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True)
    if is_dataclass(value):
        return {
            to_camel(f.name): _render(getattr(value, f.name))
            for f in fields(value)
            if getattr(value, f.name) is not None
        }
    if isinstance(value, (list, tuple)):
        return [_render(v) for v in value]
    return value
