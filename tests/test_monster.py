from cavequest.constants import MonsterAbility
from cavequest.monster import Monster


def make_monster():
    return Monster("Goblin", 4, 40, 10)


def test_default_state():
    monster = make_monster()
    assert monster.ability is MonsterAbility.NONE
    assert monster.dot_turns == 0
    assert monster.attack_counter == 0
    assert monster.initial_health == 40


def test_take_damage_reduces_health():
    monster = make_monster()
    monster.take_damage(15)
    assert monster.health == 40 - 15
    assert monster.is_alive()


def test_take_damage_clamps_at_zero():
    monster = make_monster()
    monster.take_damage(1000)
    assert monster.health == 0
    assert not monster.is_alive()


def test_exact_lethal_damage_kills():
    monster = make_monster()
    monster.take_damage(40)
    assert monster.is_alive() is False


def test_reset_restores_health_and_counters():
    monster = Monster("Fire Dragon", 16, 200, 40, MonsterAbility.DOT)
    monster.take_damage(150)
    monster.dot_turns = 3
    monster.attack_counter = 6
    monster.reset()
    assert monster.health == 200
    assert monster.dot_turns == 0
    assert monster.attack_counter == 0
    assert monster.is_alive()