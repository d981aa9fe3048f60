"""Builds one GameStatus per poll from the Live Client endpoints.

Endpoints are queried cheapest and most authoritative first. Game stats
decides whether we are in a game at all; after that every call can only
degrade the fields it is responsible for.
"""

import logging
from typing import Any

from rift_watch.models.game_status import (
    Ability,
    GameStatus,
    Item,
    Score,
    SummonerSpell,
    SummonerSpells,
)
from rift_watch.models.live_client import (
    ACTIVE_PLAYER_SCHEMA,
    GAME_STATS_SCHEMA,
    PLAYER_ITEMS_SCHEMA,
    PLAYER_LIST_SCHEMA,
    AbilitiesPayload,
    ActivePlayerPayload,
    ItemPayload,
    RosterEntryPayload,
    SummonerSpellPayload,
    SummonerSpellsPayload,
)
from rift_watch.services.live_client_api import LiveClientAPI
from rift_watch.services.response_validator import validate

logger = logging.getLogger(__name__)


def _spell(payload: SummonerSpellPayload | None) -> SummonerSpell | None:
    if payload is None:
        return None
    return SummonerSpell(display_name=payload.display_name, description=payload.raw_description)


def convert_summoner_spells(payload: SummonerSpellsPayload) -> SummonerSpells:
    return SummonerSpells(
        slot_one=_spell(payload.summoner_spell_one),
        slot_two=_spell(payload.summoner_spell_two),
    )


def convert_abilities(payload: AbilitiesPayload) -> tuple[Ability, ...]:
    """Flatten the Q/W/E/R/Passive mapping into slot-ordered abilities."""
    slots = [
        ("Q", payload.q),
        ("W", payload.w),
        ("E", payload.e),
        ("R", payload.r),
        ("Passive", payload.passive),
    ]
    return tuple(
        Ability(slot=slot, display_name=ability.display_name, level=ability.ability_level)
        for slot, ability in slots
        if ability is not None
    )


def convert_items(payload: list[ItemPayload]) -> tuple[Item, ...]:
    """Drop empty slots and order the rest by slot index."""
    occupied = sorted((item for item in payload if not item.is_empty), key=lambda i: i.slot)
    return tuple(
        Item(
            slot=item.slot,
            item_id=item.item_id,
            display_name=item.display_name,
            count=item.count,
            can_use=item.can_use,
            consumable=item.consumable,
            price=item.price,
        )
        for item in occupied
    )


def find_roster_entry(
    roster: list[RosterEntryPayload], identity: str
) -> RosterEntryPayload | None:
    """Find the participant whose Riot ID or summoner name equals identity."""
    return next((entry for entry in roster if entry.matches(identity)), None)


class StatusReconciler:
    """Merges the four Live Client endpoints into a GameStatus."""

    def __init__(self, api: LiveClientAPI):
        self.api = api

    async def get_game_status(self) -> GameStatus:
        """Run one full reconciliation cycle.

        Returns:
            GameStatus.offline() when game stats is unavailable or invalid,
            otherwise an in-game status with whatever the other endpoints
            could provide.
        """
        try:
            game_stats = validate(
                GAME_STATS_SCHEMA, await self.api.get_game_stats(), "game stats"
            )
        except Exception:
            # Not in a game (or still on the loading screen)
            return GameStatus.offline()

        status: dict[str, Any] = {
            "is_in_game": True,
            "game_time": game_stats.game_time,
            "game_mode": game_stats.game_mode,
            "map_name": game_stats.map_name,
            "map_number": game_stats.map_number,
        }

        active_player = await self._fetch_active_player()
        if active_player is None:
            return GameStatus(**status)

        identity = active_player.identity
        status.update(
            active_player_name=identity,
            level=active_player.level,
            current_gold=active_player.current_gold,
            champion_stats=active_player.champion_stats,
        )
        if active_player.abilities is not None:
            status["abilities"] = convert_abilities(active_player.abilities)
        if active_player.summoner_spells is not None:
            # Provisional, the roster overrides it below
            status["summoner_spells"] = convert_summoner_spells(active_player.summoner_spells)

        items = await self._fetch_items(identity)
        if items is not None:
            status["items"] = convert_items(items)

        entry = await self._fetch_roster_entry(identity)
        if entry is not None:
            status.update(
                champion_name=entry.champion_name,
                team=entry.team,
                score=Score(
                    kills=entry.scores.kills,
                    deaths=entry.scores.deaths,
                    assists=entry.scores.assists,
                    creep_score=entry.scores.creep_score,
                    ward_score=entry.scores.ward_score,
                ),
                summoner_spells=convert_summoner_spells(entry.summoner_spells),
            )

        return GameStatus(**status)

    async def _fetch_active_player(self) -> ActivePlayerPayload | None:
        try:
            return validate(
                ACTIVE_PLAYER_SCHEMA, await self.api.get_active_player(), "active player"
            )
        except Exception as e:
            # Spectator and some custom modes have no active player
            logger.debug(f"Could not fetch active player info: {e}")
            return None

    async def _fetch_items(self, identity: str) -> list[ItemPayload] | None:
        try:
            return validate(
                PLAYER_ITEMS_SCHEMA, await self.api.get_player_items(identity), "items"
            )
        except Exception as e:
            logger.debug(f"Items endpoint failed, no items available: {e}")
            return None

    async def _fetch_roster_entry(self, identity: str) -> RosterEntryPayload | None:
        try:
            roster = validate(
                PLAYER_LIST_SCHEMA, await self.api.get_player_list(), "player list"
            )
        except Exception as e:
            logger.debug(f"Could not fetch player list: {e}")
            return None

        entry = find_roster_entry(roster, identity)
        if entry is None:
            logger.debug(f"Active player {identity} not found in player list")
        return entry
