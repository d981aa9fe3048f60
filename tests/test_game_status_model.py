"""Tests for the GameStatus snapshot model."""

import dataclasses

import pytest

from rift_watch.models.game_status import (
    Ability,
    GameStatus,
    Item,
    Score,
    SummonerSpell,
    SummonerSpells,
)


def _item(slot: int, item_id: int = 1055) -> Item:
    return Item(
        slot=slot,
        item_id=item_id,
        display_name="Doran's Blade",
        count=1,
        can_use=False,
        consumable=False,
        price=450,
    )


class TestInvariants:
    def test_offline_has_no_other_fields(self):
        status = GameStatus.offline()

        assert status.is_in_game is False
        assert status.to_dict() == {"isInGame": False}

    def test_offline_rejects_game_fields(self):
        with pytest.raises(ValueError, match="game_time"):
            GameStatus(is_in_game=False, game_time=12.0)

    def test_duplicate_item_slots_rejected(self):
        with pytest.raises(ValueError, match="duplicate"):
            GameStatus(is_in_game=True, items=(_item(0), _item(0, 2003)))

    def test_snapshot_is_immutable(self):
        status = GameStatus(is_in_game=True, level=3)

        with pytest.raises(dataclasses.FrozenInstanceError):
            status.level = 4


class TestToDict:
    def test_camel_case_and_unset_fields_omitted(self):
        status = GameStatus(
            is_in_game=True,
            game_time=61.0,
            game_mode="ARAM",
            map_name="Map12",
            map_number=12,
            active_player_name="TestPlayer#NA1",
            score=Score(kills=1, deaths=0, assists=2, creep_score=10, ward_score=0.0),
            summoner_spells=SummonerSpells(slot_one=SummonerSpell("Snowball", "Mark")),
            abilities=(Ability(slot="Q", display_name="Switcheroo!", level=1),),
            items=(_item(0),),
        )

        assert status.to_dict() == {
            "isInGame": True,
            "gameTime": 61.0,
            "gameMode": "ARAM",
            "mapName": "Map12",
            "mapNumber": 12,
            "activePlayerName": "TestPlayer#NA1",
            "abilities": [{"slot": "Q", "displayName": "Switcheroo!", "level": 1}],
            "score": {
                "kills": 1,
                "deaths": 0,
                "assists": 2,
                "creepScore": 10,
                "wardScore": 0.0,
            },
            "summonerSpells": {"slotOne": {"displayName": "Snowball", "description": "Mark"}},
            "items": [
                {
                    "slot": 0,
                    "itemId": 1055,
                    "displayName": "Doran's Blade",
                    "count": 1,
                    "canUse": False,
                    "consumable": False,
                    "price": 450,
                }
            ],
        }
