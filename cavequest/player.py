"""The player character: stats, progression and save files."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, TextIO

from .constants import CharacterType
from .weapon import Weapon

_BASE_STATS = {
    CharacterType.TANKER: (150, 10),
    CharacterType.ATTACKER: (100, 20),
    CharacterType.MAGICIAN: (100, 15),
}

_TYPE_NAMES = {
    CharacterType.TANKER: "Tanker",
    CharacterType.ATTACKER: "Attacker",
    CharacterType.MAGICIAN: "Magician",
}

XP_PER_LEVEL = 100


class Player:
    """A player character with health, gold, experience and weapons."""

    def __init__(self, character_type: CharacterType, output: Optional[TextIO] = None):
        self.type = character_type
        self.output = output if output is not None else sys.stdout
        self.is_defending = False
        self.is_stunned = False
        self.current_weapon: Optional[Weapon] = None
        self.inventory: list[Weapon] = []
        self._restore_base()

    def _restore_base(self) -> None:
        self.max_health, self.damage = _BASE_STATS[self.type]
        self.health = self.max_health
        self.gold = 0
        self.xp = 0
        self.level = 1
        self.second_wind_used = False

    def type_name(self) -> str:
        return _TYPE_NAMES.get(self.type, "Unknown")

    def is_alive(self) -> bool:
        return self.health > 0

    def take_damage(self, amount: int) -> None:
        """Lose health; defending halves one hit, a Magician survives death once."""
        if self.is_defending:
            amount //= 2
            self.is_defending = False
        self.health -= amount
        if self.health <= 0:
            self.health = 0
            if self.type is CharacterType.MAGICIAN and not self.second_wind_used:
                self._activate_second_wind()

    def _activate_second_wind(self) -> None:
        self.output.write(
            "\n!!! Noi tai SECOND WIND da kich hoat! Ban se duoc hoi sinh! !!!\n"
        )
        self.health = 1
        self.second_wind_used = True

    def heal(self, amount: int) -> None:
        self.health = min(self.health + amount, self.max_health)

    def full_heal(self) -> None:
        self.health = self.max_health

    def defend(self) -> None:
        self.is_defending = True

    def add_xp(self, amount: int) -> None:
        self.xp += amount
        while self.xp >= XP_PER_LEVEL:
            self._level_up()

    def _level_up(self) -> None:
        self.xp -= XP_PER_LEVEL
        self.level += 1
        self.max_health += 10
        self.damage += 2
        self.health = self.max_health
        self.output.write(f"\n*** DING! Ban da len cap {self.level}! ***\n")

    def add_gold(self, amount: int) -> None:
        self.gold += amount

    def spend_gold(self, amount: int) -> bool:
        """Pay ``amount`` if affordable; report whether the purchase happened."""
        if self.gold >= amount:
            self.gold -= amount
            return True
        return False

    def equip_weapon(self, weapon: Weapon) -> None:
        self.current_weapon = weapon
        self.inventory.append(weapon)

    def reset(self) -> None:
        """Drop all progress after a defeat; the equipped weapon is kept."""
        self._restore_base()
        self.inventory.clear()

    def save_state(self, stream: TextIO) -> None:
        weapon_name = self.current_weapon.name if self.current_weapon else "None"
        stream.write(f"characterType:{self.type.value}\n")
        stream.write(f"health:{self.health}\n")
        stream.write(f"maxHealth:{self.max_health}\n")
        stream.write(f"baseDamage:{self.damage}\n")
        stream.write(f"gold:{self.gold}\n")
        stream.write(f"xp:{self.xp}\n")
        stream.write(f"level:{self.level}\n")
        stream.write(f"secondWindUsed:{int(self.second_wind_used)}\n")
        stream.write(f"currentWeapon:{weapon_name}\n")
        stream.write("inventory:" + "".join(f"{w.name}," for w in self.inventory) + "\n")

    def load_state(self, stream: Iterable[str], weapons: Iterable[Weapon]) -> None:
        """Read a saved state; weapon names are resolved against ``weapons``.

        Raises ValueError on a malformed number or unknown character type.
        """
        by_name: dict[str, Weapon] = {}
        for weapon in weapons:
            by_name.setdefault(weapon.name, weapon)

        int_fields = {
            "health": "health",
            "maxHealth": "max_health",
            "baseDamage": "damage",
            "gold": "gold",
            "xp": "xp",
            "level": "level",
        }

        for raw in stream:
            key, _, value = raw.rstrip("\n").partition(":")
            if key == "characterType":
                self.type = CharacterType(int(value.strip()))
            elif key in int_fields:
                setattr(self, int_fields[key], int(value.strip()))
            elif key == "secondWindUsed":
                self.second_wind_used = bool(int(value.strip()))
            elif key == "currentWeapon":
                if value in by_name:
                    self.current_weapon = by_name[value]
            elif key == "inventory":
                self.inventory = [
                    by_name[name] for name in value.split(",") if name in by_name
                ]