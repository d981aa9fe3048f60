"""Payload schemas for the Live Client Data API.

Each endpoint has its own schema. Models run in strict mode so a payload with
a wrong type is rejected instead of coerced; keys the game adds that we do not
use are ignored.
"""

from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, TypeAdapter, model_validator
from pydantic.alias_generators import to_camel

EMPTY_ITEM_ID = 0  # itemID the game reports for an empty inventory slot
TRINKET_SLOT = 6


class LiveClientPayload(BaseModel):
    """Base for all Live Client payload models."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        strict=True,
        extra="ignore",
        frozen=True,
    )


class GameStatsPayload(LiveClientPayload):
    """GET /liveclientdata/gamestats"""

    game_time: float
    game_mode: str
    map_name: str
    map_number: int


class SummonerSpellPayload(LiveClientPayload):
    display_name: str
    raw_description: str = ""


class SummonerSpellsPayload(LiveClientPayload):
    summoner_spell_one: Optional[SummonerSpellPayload] = None
    summoner_spell_two: Optional[SummonerSpellPayload] = None


class AbilityPayload(LiveClientPayload):
    ability_level: Optional[int] = None  # Passive has no rank
    display_name: str
    raw_description: str = ""
    raw_display_name: str = ""


class AbilitiesPayload(LiveClientPayload):
    q: Optional[AbilityPayload] = Field(default=None, alias="Q")
    w: Optional[AbilityPayload] = Field(default=None, alias="W")
    e: Optional[AbilityPayload] = Field(default=None, alias="E")
    r: Optional[AbilityPayload] = Field(default=None, alias="R")
    passive: Optional[AbilityPayload] = Field(default=None, alias="Passive")


class ChampionStats(LiveClientPayload):
    """Combat attributes of the active player.

    The game drops attributes that do not apply to a champion, so every
    field has a neutral default.
    """

    ability_haste: float = 0
    ability_power: float = 0
    armor: float = 0
    armor_penetration_flat: float = 0
    armor_penetration_percent: float = 0
    attack_damage: float = 0
    attack_range: float = 0
    attack_speed: float = 0
    bonus_armor_penetration_percent: float = 0
    bonus_magic_penetration_percent: float = 0
    cooldown_reduction: float = 0
    crit_chance: float = 0
    crit_damage: float = 0
    current_health: float = 0
    health_regen_rate: float = 0
    life_steal: float = 0
    magic_lethality: float = 0
    magic_penetration_flat: float = 0
    magic_penetration_percent: float = 0
    magic_resist: float = 0
    max_health: float = 0
    move_speed: float = 0
    physical_lethality: float = 0
    resource_max: float = 0
    resource_regen_rate: float = 0
    resource_type: str = ""
    resource_value: float = 0
    spell_vamp: float = 0
    tenacity: float = 0


class ActivePlayerPayload(LiveClientPayload):
    """GET /liveclientdata/activeplayer"""

    riot_id: Optional[str] = None  # "GameName#TAG"
    summoner_name: Optional[str] = None  # legacy display name
    level: int
    current_gold: float
    champion_stats: ChampionStats
    abilities: Optional[AbilitiesPayload] = None
    summoner_spells: Optional[SummonerSpellsPayload] = None

    @model_validator(mode="after")
    def _require_identity(self) -> "ActivePlayerPayload":
        if not self.identity:
            raise ValueError("either riotId or summonerName must be present")
        return self

    @property
    def identity(self) -> str | None:
        """Tag-qualified Riot ID, falling back to the legacy summoner name."""
        return self.riot_id or self.summoner_name


class ScoresPayload(LiveClientPayload):
    kills: int
    deaths: int
    assists: int
    creep_score: int
    ward_score: float


class RosterEntryPayload(LiveClientPayload):
    """One element of GET /liveclientdata/playerlist"""

    riot_id: Optional[str] = None
    summoner_name: Optional[str] = None
    champion_name: str
    team: str
    scores: ScoresPayload
    summoner_spells: SummonerSpellsPayload

    def matches(self, identity: str) -> bool:
        """Exact, case-sensitive match against either identity field."""
        return identity in (self.riot_id, self.summoner_name)


class ItemPayload(LiveClientPayload):
    """One element of GET /liveclientdata/playeritems"""

    can_use: bool
    consumable: bool
    count: int
    display_name: str
    item_id: int = Field(alias="itemID")
    price: int
    raw_description: str = ""
    slot: int = Field(ge=0, le=TRINKET_SLOT)

    @property
    def is_empty(self) -> bool:
        return self.item_id == EMPTY_ITEM_ID


def _unique_slots(items: list[ItemPayload]) -> list[ItemPayload]:
    slots = [item.slot for item in items]
    if len(slots) != len(set(slots)):
        raise ValueError(f"duplicate item slots: {sorted(slots)}")
    return items


GAME_STATS_SCHEMA = TypeAdapter(GameStatsPayload)
ACTIVE_PLAYER_SCHEMA = TypeAdapter(ActivePlayerPayload)
PLAYER_LIST_SCHEMA = TypeAdapter(list[RosterEntryPayload])
PLAYER_ITEMS_SCHEMA = TypeAdapter(Annotated[list[ItemPayload], AfterValidator(_unique_slots)])
