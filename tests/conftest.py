"""Shared fixtures: Live Client payloads as the game serves them."""

import copy
from unittest.mock import AsyncMock

import httpx
import pytest

from rift_watch.services.live_client_api import LiveClientAPI, LiveClientUnavailable

CHAMPION_STATS = {
    "abilityHaste": 0.0,
    "abilityPower": 85.5,
    "armor": 28.2,
    "armorPenetrationFlat": 0.0,
    "armorPenetrationPercent": 1.0,
    "attackDamage": 62.8,
    "attackRange": 525.0,
    "attackSpeed": 0.625,
    "bonusArmorPenetrationPercent": 1.0,
    "bonusMagicPenetrationPercent": 1.0,
    "critChance": 0.0,
    "critDamage": 175.0,
    "currentHealth": 518.0,
    "healthRegenRate": 1.2,
    "lifeSteal": 0.0,
    "magicLethality": 0.0,
    "magicPenetrationFlat": 0.0,
    "magicPenetrationPercent": 1.0,
    "magicResist": 30.0,
    "maxHealth": 518.0,
    "moveSpeed": 325.0,
    "physicalLethality": 0.0,
    "resourceMax": 245.0,
    "resourceRegenRate": 1.4,
    "resourceType": "MANA",
    "resourceValue": 245.0,
    "spellVamp": 0.0,
    "tenacity": 0.0,
}

GAME_STATS = {
    "gameMode": "CLASSIC",
    "gameTime": 600.5,
    "mapName": "Map11",
    "mapNumber": 11,
    "mapTerrain": "Default",
}

ACTIVE_PLAYER = {
    "riotId": "TestPlayer#NA1",
    "riotIdGameName": "TestPlayer",
    "riotIdTagLine": "NA1",
    "summonerName": "TestPlayer#NA1",
    "level": 12,
    "currentGold": 4500.25,
    "championStats": CHAMPION_STATS,
    "abilities": {
        "Passive": {
            "displayName": "Get Excited!",
            "id": "JinxPassive",
            "rawDescription": "GeneratedTip_Passive_JinxPassive_Description",
            "rawDisplayName": "GeneratedTip_Passive_JinxPassive_DisplayName",
        },
        "Q": {"abilityLevel": 5, "displayName": "Switcheroo!", "id": "JinxQ"},
        "W": {"abilityLevel": 1, "displayName": "Zap!", "id": "JinxW"},
        "E": {"abilityLevel": 3, "displayName": "Flame Chompers!", "id": "JinxE"},
        "R": {"abilityLevel": 2, "displayName": "Super Mega Death Rocket!", "id": "JinxR"},
    },
    "fullRunes": {"keystone": {"displayName": "Lethal Tempo", "id": 8008}},
}

FLASH = {
    "displayName": "Flash",
    "rawDescription": "GeneratedTip_SummonerSpell_SummonerFlash_Description",
}
HEAL = {
    "displayName": "Heal",
    "rawDescription": "GeneratedTip_SummonerSpell_SummonerHeal_Description",
}

PLAYER_LIST = [
    {
        "championName": "Jinx",
        "isBot": False,
        "isDead": False,
        "level": 12,
        "position": "BOTTOM",
        "riotId": "TestPlayer#NA1",
        "riotIdGameName": "TestPlayer",
        "summonerName": "TestPlayer#NA1",
        "team": "ORDER",
        "scores": {"assists": 8, "creepScore": 145, "deaths": 2, "kills": 5, "wardScore": 12.5},
        "summonerSpells": {"summonerSpellOne": FLASH, "summonerSpellTwo": HEAL},
    },
    {
        "championName": "Ashe",
        "isBot": False,
        "isDead": True,
        "level": 11,
        "position": "BOTTOM",
        "riotId": "EnemyPlayer#EUW",
        "riotIdGameName": "EnemyPlayer",
        "summonerName": "EnemyPlayer#EUW",
        "team": "CHAOS",
        "scores": {"assists": 1, "creepScore": 130, "deaths": 5, "kills": 2, "wardScore": 7.0},
        "summonerSpells": {"summonerSpellOne": FLASH, "summonerSpellTwo": HEAL},
    },
]

PLAYER_ITEMS = [
    {
        "canUse": True,
        "consumable": True,
        "count": 2,
        "displayName": "Health Potion",
        "itemID": 2003,
        "price": 50,
        "rawDescription": "GeneratedTip_Item_2003_Description",
        "slot": 1,
    },
    {
        "canUse": False,
        "consumable": False,
        "count": 1,
        "displayName": "Doran's Blade",
        "itemID": 1055,
        "price": 450,
        "rawDescription": "GeneratedTip_Item_1055_Description",
        "slot": 0,
    },
    {
        "canUse": False,
        "consumable": False,
        "count": 0,
        "displayName": "",
        "itemID": 0,
        "price": 0,
        "rawDescription": "",
        "slot": 2,
    },
    {
        "canUse": True,
        "consumable": False,
        "count": 1,
        "displayName": "Stealth Ward",
        "itemID": 3340,
        "price": 0,
        "rawDescription": "GeneratedTip_Item_3340_Description",
        "slot": 6,
    },
]


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def game_stats():
    return copy.deepcopy(GAME_STATS)


@pytest.fixture
def active_player():
    return copy.deepcopy(ACTIVE_PLAYER)


@pytest.fixture
def player_list():
    return copy.deepcopy(PLAYER_LIST)


@pytest.fixture
def player_items():
    return copy.deepcopy(PLAYER_ITEMS)


@pytest.fixture
def mock_api(game_stats, active_player, player_list, player_items):
    """LiveClientAPI stand-in where every endpoint answers with the fixtures."""
    api = AsyncMock(spec=LiveClientAPI)
    api.get_game_stats.return_value = game_stats
    api.get_active_player.return_value = active_player
    api.get_player_list.return_value = player_list
    api.get_player_items.return_value = player_items
    return api


@pytest.fixture
def offline_api():
    """LiveClientAPI stand-in for when the game is not running."""
    api = AsyncMock(spec=LiveClientAPI)
    refused = LiveClientUnavailable("/liveclientdata/gamestats unreachable: connection refused")
    api.get_game_stats.side_effect = refused
    api.get_active_player.side_effect = refused
    api.get_player_list.side_effect = refused
    api.get_player_items.side_effect = refused
    return api


@pytest.fixture
def json_transport():
    """Factory for an httpx transport answering each path with its JSON body."""

    def build(routes: dict[str, object]) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path in routes:
                return httpx.Response(200, json=routes[request.url.path])
            return httpx.Response(404, json={"errorCode": "RESOURCE_NOT_FOUND"})

        return httpx.MockTransport(handler)

    return build
