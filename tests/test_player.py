import io

import pytest

from cavequest.constants import CharacterType, WeaponAbility
from cavequest.player import Player
from cavequest.weapon import Weapon

WEAPONS = [
    Weapon("Stick", 5, 0),
    Weapon("Dagger", 15, 20),
    Weapon("Enchanted Bow", 65, 300, WeaponAbility.CRITICAL_HIT),
]


def make(kind=CharacterType.TANKER):
    return Player(kind, io.StringIO())


@pytest.mark.parametrize(
    "kind, health, damage, name",
    [
        (CharacterType.TANKER, 150, 10, "Tanker"),
        (CharacterType.ATTACKER, 100, 20, "Attacker"),
        (CharacterType.MAGICIAN, 100, 15, "Magician"),
    ],
)
def test_base_stats(kind, health, damage, name):
    player = make(kind)
    assert player.max_health == health
    assert player.health == health
    assert player.damage == damage
    assert player.type_name() == name
    assert (player.gold, player.xp, player.level) == (0, 0, 1)


def test_take_damage_reduces_health():
    player = make()
    player.take_damage(30)
    assert player.health == player.max_health - 30


def test_defend_halves_one_hit_only():
    player = make()
    player.defend()
    player.take_damage(40)
    assert player.health == player.max_health - 20
    assert player.is_defending is False
    player.take_damage(40)
    assert player.health == player.max_health - 60


def test_non_magician_dies():
    player = make(CharacterType.ATTACKER)
    player.take_damage(500)
    assert player.health == 0
    assert not player.is_alive()


def test_magician_second_wind_once():
    out = io.StringIO()
    player = Player(CharacterType.MAGICIAN, out)
    player.take_damage(500)
    assert player.health == 1
    assert player.second_wind_used is True
    assert "SECOND WIND" in out.getvalue()
    player.take_damage(500)
    assert player.health == 0


def test_heal_is_capped():
    player = make()
    player.take_damage(10)
    player.heal(1000)
    assert player.health == player.max_health


def test_full_heal():
    player = make()
    player.take_damage(100)
    player.full_heal()
    assert player.health == player.max_health


def test_add_xp_levels_up():
    out = io.StringIO()
    player = Player(CharacterType.TANKER, out)
    player.take_damage(50)
    player.add_xp(120)
    assert player.level == 2
    assert player.xp == 120 - 100
    assert player.max_health == 150 + 10
    assert player.damage == 10 + 2
    assert player.health == player.max_health
    assert "DING" in out.getvalue()


def test_add_xp_multiple_levels():
    player = make()
    player.add_xp(250)
    assert player.level == 3
    assert player.xp < 100


def test_spend_gold():
    player = make()
    player.add_gold(30)
    assert player.spend_gold(20) is True
    assert player.gold == 10
    assert player.spend_gold(20) is False
    assert player.gold == 10


def test_equip_weapon_adds_to_inventory():
    player = make()
    player.equip_weapon(WEAPONS[0])
    player.equip_weapon(WEAPONS[1])
    assert player.current_weapon == WEAPONS[1]
    assert player.inventory == WEAPONS[:2]


def test_reset_clears_progress():
    player = make(CharacterType.MAGICIAN)
    player.equip_weapon(WEAPONS[1])
    player.add_gold(99)
    player.add_xp(150)
    player.take_damage(1000)
    player.reset()
    assert player.max_health == 100
    assert player.damage == 15
    assert player.health == player.max_health
    assert (player.gold, player.xp, player.level) == (0, 0, 1)
    assert player.second_wind_used is False
    assert player.inventory == []
    assert player.current_weapon == WEAPONS[1]


def test_save_format():
    player = make(CharacterType.MAGICIAN)
    player.equip_weapon(WEAPONS[0])
    buf = io.StringIO()
    player.save_state(buf)
    lines = buf.getvalue().splitlines()
    assert lines[0] == "characterType:2"
    assert "secondWindUsed:0" in lines
    assert "currentWeapon:Stick" in lines
    assert lines[-1] == "inventory:Stick,"


def test_save_without_weapon():
    buf = io.StringIO()
    make().save_state(buf)
    assert "currentWeapon:None" in buf.getvalue().splitlines()


def test_save_load_round_trip():
    original = make(CharacterType.ATTACKER)
    original.equip_weapon(WEAPONS[0])
    original.equip_weapon(WEAPONS[2])
    original.add_gold(77)
    original.add_xp(130)
    original.take_damage(20)
    buf = io.StringIO()
    original.save_state(buf)
    buf.seek(0)

    loaded = make(CharacterType.TANKER)
    loaded.load_state(buf, WEAPONS)
    assert loaded.type is CharacterType.ATTACKER
    assert loaded.health == original.health
    assert loaded.max_health == original.max_health
    assert loaded.damage == original.damage
    assert loaded.gold == original.gold
    assert loaded.xp == original.xp
    assert loaded.level == original.level
    assert loaded.second_wind_used == original.second_wind_used
    assert loaded.current_weapon == WEAPONS[2]
    assert loaded.inventory == [WEAPONS[0], WEAPONS[2]]


def test_load_skips_unknown_weapons():
    player = make()
    player.load_state(
        io.StringIO("currentWeapon:Laser\ninventory:Dagger,Laser,\n"), WEAPONS
    )
    assert player.current_weapon is None
    assert player.inventory == [WEAPONS[1]]


def test_load_rejects_bad_character_type():
    with pytest.raises(ValueError):
        make().load_state(io.StringIO("characterType:9\n"), WEAPONS)


def test_load_rejects_bad_number():
    with pytest.raises(ValueError):
        make().load_state(io.StringIO("gold:lots\n"), WEAPONS)