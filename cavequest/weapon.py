"""Weapons the player can buy and equip."""

from dataclasses import dataclass

from .constants import WeaponAbility


@dataclass(frozen=True)
class Weapon:
    """An immutable weapon description."""

    name: str
    damage: int
    price: int
    ability: WeaponAbility = WeaponAbility.NONE