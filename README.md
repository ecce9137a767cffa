# marais

A small turn-based role-playing game played in the terminal. You wake up on
an island covered by an 8×8 board of tiles. Explore it by rolling a four-sided
die, pick up chests of gold and items, buy equipment from the merchant, and
fight goblins and orcs on your way to the dragon waiting in the far corner.

The game's text is in French.

## Installing

```
pip install .
```

## Playing

```
marais
```

At the start you choose a name and a class:

- **Warrior** (`Warrior`): 80 health and 20 strength; a leaping special attack.
- **Mage** (`Mage`): attacks with 20 spell power; the special ability heals.
- **Thief** (`Thief`): very lucky, with five inventory slots; the special
  ability steals a healing potion from the enemy.

While exploring you can:

1. Move: roll a D4 and spend the moves with `w`, `a`, `s`, `d`. Landing on a
   tile with an enemy starts a fight; an item or gold is picked up.
2. Open the inventory and use the item in slot 1 to 4.
3. Visit the merchant (potion 2, shield 7, sword 6, scroll 6 coins).
4. Quit.

Only the tiles next to you and the ones you have already visited are shown.
In a fight you attack, use your special ability, open the inventory or try to
flee. Every action is decided by a D20 roll boosted by your luck. The game
ends when you quit or when your health reaches zero.

## Using the pieces in code

The game logic can be used without the terminal loop. Combat methods return
the text they would show:

```python
from marais.heroes import Warrior
from marais.enemies import Goblin
from marais.merchant import Merchant

hero = Warrior("Aude")
goblin = Goblin()
print(hero.basic_attack(goblin))
print(goblin.stats_text())

Merchant().sell(1, hero, choose_replacement=lambda hero, item: 0)
print(hero.inventory_text())
```

`choose_replacement` is asked which slot (from 1) to replace when the
inventory is full; returning 0 throws the new item away.

`marais.dice.seed` makes the rolls reproducible, and `marais.board.Board`
builds a random island on its own.

`marais.game.Game` takes `input_fn`, `output` and `sleep` keyword arguments,
so a whole game can be driven by scripted input and captured output.

## What it does not do

There is no saving or loading: a game lives only as long as the process.

## Running the tests

```
pip install .[test]
pytest
```