# cavequest

A turn-based role-playing game that runs in the terminal. You pick a hero,
fight monsters in the cave, buy healing and better weapons in the store, and
once you are strong enough you take on the final boss.

## Installing

```
pip install .
```

## Playing

```
cavequest
cavequest --save-file mygame.txt
```

`--save-file` sets the file that games are saved to and loaded from. The
default is `../data/savegame.txt`, relative to the current directory. The
directory must already exist, because the game does not create it.

The main menu offers a new game, loading a saved game, or quitting. Every
prompt takes a number from the range shown next to it. If the input is not
valid, the prompt is shown again. When the input ends or you press Ctrl-C,
the game exits. The screen is cleared between menus.

### Heroes

| Hero     | Health | Damage | Special                                  |
|----------|--------|--------|------------------------------------------|
| Tanker   | 150    | 10     | Most health                              |
| Attacker | 100    | 20     | Highest damage                           |
| Magician | 100    | 15     | Second Wind: survives one fatal hit      |

Every hero starts with a Stick. Each level costs 100 XP. A level up adds
10 maximum health and 2 damage, and restores your health to full.

### Town square

- **Store**: a potion gives +20 health for 10 gold. The store also sells
  weapons, from the Dagger (20 gold) up to the Divine Blade (500 gold). The
  Enchanted Bow has a 30% chance to double its damage. The Mystic Staff has a
  40% chance to add half its damage again. The Divine Blade heals you for 30%
  of the damage it deals.
- **Cave**: pick one of nine monsters, from the level 2 Slime to the level 18
  Dark Knight. A win pays level × 10 gold and level × 20 XP. After it comes a
  guess-the-number mini-game (1 to 10). A correct guess earns 50 gold or
  50 XP. A wrong guess costs 10 health.
- **Final boss**: the level 20 Ice Witch. She has a 40% chance to stun you,
  and a stunned hero loses the next turn. If you beat her and stay alive,
  the game ends.
- **Save**: writes your progress to the save file. You can pick it up again
  later with *Tai Game* (load game) from the main menu.

In combat you either attack or defend. Defending halves the next hit you
take. Every third attack of the Fire Dragon sets you on fire, and then you
lose 5 health a turn for three turns. The Dark Knight has a 40% chance to
break your defence. If you lose a fight, your level, gold and experience are
reset and you start over with a Stick.

There is one save file. The game does not keep several save slots.

## Save file format

A save file is plain text with one `key:value` pair per line:
`characterType` (0 Tanker, 1 Attacker, 2 Magician), `health`, `maxHealth`,
`baseDamage`, `gold`, `xp`, `level`, `secondWindUsed` (0 or 1),
`currentWeapon` (a weapon name or `None`) and `inventory` (weapon names, each
followed by a comma). `Player.save_state` writes this format and
`Player.load_state` reads it. `load_state` raises `ValueError` on a malformed
number or an unknown character type.

## Embedding

`cavequest.game.Game` takes these arguments:

- the input stream
- the output stream
- a `random.Random` instance
- the save file path
- the function that clears the screen

With these, a game can be scripted or driven from other code:

```python
import io
import random
from cavequest.game import Game

script = io.StringIO("3\n")          # choose "quit" at the main menu
out = io.StringIO()
Game(script, out, random.Random(1), "save.txt", lambda: None).run()
print(out.getvalue())
```

`default_weapons()` and `default_monsters()` return fresh copies of the
game's weapon and monster lists. The building blocks live in their own
modules:

- `cavequest.weapon.Weapon`
- `cavequest.monster.Monster`
- `cavequest.player.Player`
- the enumerations in `cavequest.constants`