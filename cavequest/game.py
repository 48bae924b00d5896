"""The interactive text adventure: menus, shop, cave fights and saving."""

from __future__ import annotations

import argparse
import os
import random
import re
import subprocess
import sys
from pathlib import Path
from typing import Callable, Optional, TextIO

from .constants import CharacterType, MonsterAbility, WeaponAbility
from .monster import Monster
from .player import Player
from .weapon import Weapon

DEFAULT_SAVE_PATH = Path("../data/savegame.txt")

# The victory check compares against this title, which no monster carries.
_FINAL_BOSS_TITLE = "Phu thuy bang (Ice Witch)"

_INT_PATTERN = re.compile(r"[+-]?\d+")
_BANNER = "=============================\n"


def default_weapons() -> list[Weapon]:
    """The weapons on sale, the free starting stick first."""
    return [
        Weapon("Stick", 5, 0),
        Weapon("Dagger", 15, 20),
        Weapon("Short Sword", 25, 50),
        Weapon("Long Sword", 35, 100),
        Weapon("Battle Axe", 45, 150),
        Weapon("War Hammer", 55, 200),
        Weapon("Enchanted Bow", 65, 300, WeaponAbility.CRITICAL_HIT),
        Weapon("Mystic Staff", 75, 400, WeaponAbility.DOUBLE_ATTACK),
        Weapon("Divine Blade", 100, 500, WeaponAbility.HEAL_ON_HIT),
    ]


def default_monsters() -> list[Monster]:
    """The monsters of the cave, the final boss last."""
    return [
        Monster("Slime", 2, 20, 5),
        Monster("Goblin", 4, 40, 10),
        Monster("Soi (Wolf)", 6, 55, 15),
        Monster("Orc", 8, 70, 20),
        Monster("Troll", 10, 85, 25),
        Monster("Minotaur", 12, 120, 30),
        Monster("Giant Spider", 14, 150, 35),
        Monster("Fire Dragon", 16, 200, 40, MonsterAbility.DOT),
        Monster("Dark Knight", 18, 300, 45, MonsterAbility.BREAK_DEFENSE),
        Monster("Ice Witch", 20, 450, 50, MonsterAbility.STUN),
    ]


def _system_clear() -> None:
    command = "cls" if os.name == "nt" else "clear"
    try:
        subprocess.run(command, shell=True, check=False)
    except OSError:
        pass


class _Input:
    """Whitespace-separated integer reading with line discarding, like a console."""

    def __init__(self, stream: TextIO):
        self._stream = stream
        self._buffer = ""

    def _fill(self) -> bool:
        if not self._buffer:
            self._buffer = self._stream.readline()
        return bool(self._buffer)

    def read_int(self) -> Optional[int]:
        """Return the next integer, or None if the next token is not one.

        Raises EOFError when the input is exhausted.
        """
        while True:
            if not self._fill():
                raise EOFError("input exhausted")
            stripped = self._buffer.lstrip()
            if stripped:
                self._buffer = stripped
                break
            self._buffer = ""
        match = _INT_PATTERN.match(self._buffer)
        if match is None:
            return None
        self._buffer = self._buffer[match.end():]
        return int(match.group())

    def skip_line(self) -> None:
        if self._fill():
            self._buffer = ""

    def read_char(self) -> None:
        if self._fill():
            self._buffer = self._buffer[1:]


class Game:
    """The whole game session driven by a text input and output."""

    def __init__(
        self,
        input_stream: Optional[TextIO] = None,
        output: Optional[TextIO] = None,
        rng: Optional[random.Random] = None,
        save_path: Optional[os.PathLike | str] = None,
        clear_screen: Optional[Callable[[], None]] = None,
    ):
        self._input = _Input(input_stream if input_stream is not None else sys.stdin)
        self._out = output if output is not None else sys.stdout
        self._rng = rng if rng is not None else random.Random()
        self.save_path = Path(save_path) if save_path is not None else DEFAULT_SAVE_PATH
        self._clear = clear_screen if clear_screen is not None else _system_clear
        self.weapons = default_weapons()
        self.monsters = default_monsters()
        self.player: Optional[Player] = None
        self.is_running = True

    def run(self) -> None:
        """Show the main menu until the player quits or wins."""
        while self.is_running:
            self._main_menu()

    # --- console helpers ---

    def _say(self, text: str) -> None:
        self._out.write(text)

    def _banner(self, title: str) -> None:
        self._say(_BANNER + title + "\n" + _BANNER)

    def _wait_for_enter(self) -> None:
        self._say("\nNhan Enter de tiep tuc...")
        self._out.flush()
        self._input.skip_line()
        self._input.read_char()

    def _get_choice(self, low: int, high: int) -> int:
        self._say(f"Lua chon cua ban ({low}-{high}): ")
        self._out.flush()
        while True:
            value = self._input.read_int()
            if value is not None and low <= value <= high:
                return value
            self._say(
                f"Lua chon khong hop le. Vui long nhap mot so tu {low} den {high}: "
            )
            self._out.flush()
            self._input.skip_line()

    def _print_player_status(self) -> None:
        player = self.player
        if player is None:
            return
        self._say(f"Nhan vat: {player.type_name()} | Cap: {player.level}\n")
        self._say(
            f"Mau: {player.health}/{player.max_health} | Sat thuong: {player.damage}\n"
        )
        self._say(f"Vang: {player.gold} | XP: {player.xp}/100\n")
        weapon = player.current_weapon
        if weapon is not None:
            self._say(f"Vu khi: {weapon.name} (+{weapon.damage} DMG)\n")

    # --- menus ---

    def _main_menu(self) -> None:
        self._clear()
        self._banner("       GAME NHAP VAI")
        self._say("1. Game Moi\n2. Tai Game\n3. Thoat\n")
        choice = self._get_choice(1, 3)
        if choice == 1:
            self._character_selection()
            self._town_square()
        elif choice == 2:
            self._load_game()
            if self.player is not None:
                self._town_square()
        else:
            self.is_running = False

    def _character_selection(self) -> None:
        self._clear()
        self._banner("      CHON NHAN VAT")
        self._say("1. Tanker - Mau cao, sat thuong thap\n")
        self._say("2. Attacker - Sat thuong cao, mau trung binh\n")
        self._say("3. Magician - Hoi sinh mot lan\n")
        choice = self._get_choice(1, 3)
        self.player = Player(CharacterType(choice - 1), self._out)
        self.player.equip_weapon(self.weapons[0])

    def _town_square(self) -> None:
        player = self.player
        while player.is_alive() and self.is_running:
            self._clear()
            self._banner("   QUANG TRUONG THI TRAN")
            self._print_player_status()
            self._say("-----------------------------\n")
            self._say("Ban co the:\n")
            self._say("1. Di den Cua hang\n")
            self._say("2. Di den Hang dong\n")
            self._say("3. CHIEN DAU VOI BOSS CUOI\n")
            self._say("4. Luu Game\n")
            self._say("5. Quay ve Menu Chinh\n")
            choice = self._get_choice(1, 5)
            if choice == 1:
                self._store()
            elif choice == 2:
                self._cave()
            elif choice == 3:
                boss = self.monsters[-1]
                self._start_combat(boss)
                if player.is_alive() and not boss.is_alive():
                    self.is_running = False
            elif choice == 4:
                self._save_game()
            else:
                return

    def _store(self) -> None:
        player = self.player
        while player.is_alive():
            self._clear()
            self._banner("           CUA HANG")
            self._print_player_status()
            self._say("-----------------------------\n")
            self._say("1. Mua mau (+20 mau) - 10 vang\n")
            self._say("2. Nang cap vu khi\n")
            self._say("3. Tro ve quang truong\n")
            choice = self._get_choice(1, 3)
            if choice == 1:
                if player.spend_gold(10):
                    player.heal(20)
                    self._say("Ban da mua mau!\n")
                else:
                    self._say("Khong du vang!\n")
                self._wait_for_enter()
            elif choice == 2:
                self._weapon_shop()
            else:
                return

    def _weapon_shop(self) -> None:
        player = self.player
        back = len(self.weapons)
        while True:
            self._clear()
            self._say("--- Nang Cap Vu Khi ---\n")
            self._print_player_status()
            self._say("-------------------\n")
            for number, weapon in enumerate(self.weapons[1:], start=1):
                self._say(
                    f"{number}. {weapon.name} ({weapon.damage} DMG) - {weapon.price} vang\n"
                )
            self._say(f"{back}. Quay lai\n")
            choice = self._get_choice(1, back)
            if choice == back:
                return
            selected = self.weapons[choice]
            if player.spend_gold(selected.price):
                player.equip_weapon(selected)
                self._say(f"Nang a thanh cong !{selected.name}!\n")
            else:
                self._say("Khong du vang!\n")
            self._wait_for_enter()

    def _cave(self) -> None:
        player = self.player
        back = len(self.monsters)
        while player.is_alive():
            self._clear()
            self._banner("          HANG DONG")
            self._print_player_status()
            self._say("-----------------------------\n")
            self._say("Chon quai vat de chien dau:\n")
            for number, monster in enumerate(self.monsters[:-1], start=1):
                self._say(f"{number}. {monster.name} (Cap {monster.level})\n")
            self._say(f"{back}. Tro ve quang truong\n")
            choice = self._get_choice(1, back)
            if choice == back:
                return
            self._start_combat(self.monsters[choice - 1])

    # --- combat ---

    def _start_combat(self, monster: Monster) -> None:
        player = self.player
        monster.reset()
        player.is_defending = False
        player.is_stunned = False

        while player.is_alive() and monster.is_alive():
            if not player.is_stunned:
                self._player_turn(monster)
            else:
                self._say("Ban bi choang va bo qua luot!\n")
                player.is_stunned = False
                self._wait_for_enter()

            if not monster.is_alive():
                break

            self._monster_turn(monster)

            if monster.dot_turns > 0:
                self._say("Ban mat 5 mau do bi dot chay!\n")
                player.take_damage(5)
                monster.dot_turns -= 1
                self._wait_for_enter()

        self._clear()
        if player.is_alive():
            self._banner("          CHIEN THANG!")
            self._say(f"Ban da ha guc {monster.name}.\n")
            if monster.name == _FINAL_BOSS_TITLE:
                self._say("\nXIN CHUC MUNG! BAN DA PHA DAO GAME!\n")
                self._wait_for_enter()
                return
            gold_gained = monster.level * 10
            xp_gained = monster.level * 20
            player.add_gold(gold_gained)
            player.add_xp(xp_gained)
            self._say(f"Ban nhan duoc {gold_gained} vang va {xp_gained} XP.\n")
            self._wait_for_enter()
            self._play_mini_game()
        else:
            self._banner("           THAT BAI!")
            self._say("Ban da bi ha guc.\n")
            self._say("Tien trinh cua ban se duoc reset!\n")
            player.reset()
            player.equip_weapon(self.weapons[0])
            self._wait_for_enter()

    def _player_turn(self, monster: Monster) -> None:
        player = self.player
        self._clear()
        self._banner("          CHIEN DAU")
        self._say(f"Ban vs. {monster.name} (HP: {monster.health})\n")
        self._print_player_status()
        self._say("-----------------------------\n")
        self._say("1. Tan cong\n2. Phong thu\n")
        choice = self._get_choice(1, 2)

        if choice == 1:
            weapon = player.current_weapon
            total = player.damage + weapon.damage
            chance = self._rng.randint(1, 100)
            if weapon.ability is WeaponAbility.CRITICAL_HIT and chance <= 30:
                total *= 2
                self._say("BAO KICH! Sat thuong x2!\n")
            elif weapon.ability is WeaponAbility.DOUBLE_ATTACK and chance <= 40:
                extra = total // 2
                self._say(f"DANH THEM! Gay them {extra} sat thuong!\n")
                total += extra
            elif weapon.ability is WeaponAbility.HEAL_ON_HIT:
                healed = int(total * 0.3)
                player.heal(healed)
                self._say(f"HUT MAU! Ban hoi {healed} HP!\n")
            self._say(f"Ban gay {total} sat thuong len {monster.name}.\n")
            monster.take_damage(total)
        else:
            player.defend()
            self._say(
                "Ban vao the phong thu, giam 50% sat thuong nhan vao o luot tiep theo.\n"
            )
        self._wait_for_enter()

    def _monster_turn(self, monster: Monster) -> None:
        player = self.player
        self._say(f"{monster.name} tan cong!\n")
        chance = self._rng.randint(1, 100)

        if monster.ability is MonsterAbility.BREAK_DEFENSE and chance <= 40:
            if player.is_defending:
                self._say("Hiep si bong toi PHA THE PHONG THU cua ban!\n")
                player.is_defending = False
        elif monster.ability is MonsterAbility.STUN and chance <= 40:
            player.is_stunned = True
            self._say("Phu thuy bang lam CHOANG ban!\n")
        elif monster.ability is MonsterAbility.DOT:
            monster.attack_counter += 1
            if monster.attack_counter % 3 == 0:
                monster.dot_turns = 3
                self._say("Rong lua thieu dot ban!\n")

        player.take_damage(monster.damage)
        self._say(f"{monster.name} gay {monster.damage} sat thuong.\n")

        if (
            player.health == 1
            and player.type is CharacterType.MAGICIAN
            and player.is_alive()
        ):
            player.full_heal()
            self._say("Ban duoc hoi day mau nho Second Wind!\n")
        self._wait_for_enter()

    def _play_mini_game(self) -> None:
        player = self.player
        self._clear()
        self._banner("      MINI-GAME DOAN SO")
        self._say("Doan mot so tu 1 den 10: ")
        secret = self._rng.randint(1, 10)
        guess = self._get_choice(1, 10)
        if guess == secret:
            if self._rng.randint(1, 10) % 2 == 0:
                player.add_gold(50)
                self._say("Dung roi! Ban nhan duoc 50 vang!\n")
            else:
                player.add_xp(50)
                self._say("Dung roi! Ban nhan duoc 50 XP!\n")
        else:
            player.take_damage(10)
            self._say(f"Sai roi! So dung la {secret}. Ban mat 10 mau.\n")
            if not player.is_alive():
                self._say("Ban da thua do het mau trong mini-game!\n")
        self._wait_for_enter()

    # --- persistence ---

    def _save_game(self) -> None:
        if self.player is None:
            self._say("Khong co game de luu!\n")
            self._wait_for_enter()
            return
        try:
            with open(self.save_path, "w", encoding="utf-8") as stream:
                self.player.save_state(stream)
        except OSError:
            self._say("Loi: Khong the mo file de luu.\n")
        else:
            self._say("Da luu game thanh cong!\n")
        self._wait_for_enter()

    def _load_game(self) -> None:
        try:
            with open(self.save_path, encoding="utf-8") as stream:
                player = Player(CharacterType.TANKER, self._out)
                player.load_state(stream, self.weapons)
        except OSError:
            self.player = None
            self._say("Khong tim thay file luu. Vui long bat dau game moi.\n")
        else:
            self.player = player
            self._say("Da tai game thanh cong!\n")
        self._wait_for_enter()


def main(argv: Optional[list[str]] = None) -> int:
    """Start an interactive game on the terminal."""
    parser = argparse.ArgumentParser(description="A small text role-playing game.")
    parser.add_argument(
        "--save-file",
        default=str(DEFAULT_SAVE_PATH),
        help="where the game is saved and loaded from",
    )
    args = parser.parse_args(argv)
    game = Game(save_path=args.save_file)
    try:
        game.run()
    except (EOFError, KeyboardInterrupt):
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())