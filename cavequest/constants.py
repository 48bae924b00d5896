"""Enumerations shared across the game."""

from enum import Enum


class CharacterType(Enum):
    """Playable character classes, numbered as stored in save files."""

    TANKER = 0
    ATTACKER = 1
    MAGICIAN = 2


class WeaponAbility(Enum):
    """Special effects a weapon may trigger when attacking."""

    NONE = 0
    CRITICAL_HIT = 1
    DOUBLE_ATTACK = 2
    HEAL_ON_HIT = 3


class MonsterAbility(Enum):
    """Special effects a monster may trigger on its turn."""

    NONE = 0
    DOT = 1
    STUN = 2
    BREAK_DEFENSE = 3