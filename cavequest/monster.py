"""Monsters the player fights."""

from dataclasses import dataclass, field

from .constants import MonsterAbility


@dataclass
class Monster:
    """A monster with mutable combat state that can be reset between fights."""

    name: str
    level: int
    health: int
    damage: int
    ability: MonsterAbility = MonsterAbility.NONE
    dot_turns: int = 0
    attack_counter: int = 0
    initial_health: int = field(init=False)

    def __post_init__(self) -> None:
        self.initial_health = self.health

    def is_alive(self) -> bool:
        return self.health > 0

    def take_damage(self, amount: int) -> None:
        """Lose health, never dropping below zero."""
        self.health = max(self.health - amount, 0)

    def reset(self) -> None:
        """Restore full health and clear ability counters."""
        self.health = self.initial_health
        self.dot_turns = 0
        self.attack_counter = 0