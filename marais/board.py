"""The island map: a grid of cells holding enemies, items or gold."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from marais import dice, icons
from marais.enemies import Dragon, Enemy, Goblin, Orc
from marais.items import HealingPotion, Item, Scroll, Shield, Sword


@dataclass(eq=False)
class Cell:
    """One square of the island, holding at most an enemy, an item or gold."""

    gold: int = 0
    item: Optional[Item] = None
    enemy: Optional[Enemy] = None
    visited: bool = False

    def is_empty(self) -> bool:
        """Return True when the cell holds neither an item nor an enemy."""
        return self.item is None and self.enemy is None

    def contains_enemy(self) -> bool:
        return self.enemy is not None

    def contains_item(self) -> bool:
        return self.item is not None

    def mark_visited(self) -> None:
        self.visited = True

    def remove_enemy(self) -> None:
        self.enemy = None

    def remove_item(self) -> None:
        self.item = None

    def icon(self, visible: bool) -> str:
        """Return the emoji that draws this cell on the map."""
        if not visible:
            return icons.HIDDEN
        if self.enemy is not None:
            return self.enemy.icon
        if self.item is not None or self.gold > 0:
            return icons.CHEST
        return icons.ISLAND


def _random_enemy() -> Enemy:
    return Goblin() if dice.d10() <= 6 else Orc()


def _random_item() -> Item:
    roll = dice.d10()
    if roll <= 3:
        return HealingPotion()
    if roll <= 6:
        return Shield()
    if roll <= 8:
        return Sword()
    return Scroll()


def _random_cell() -> Cell:
    roll = dice.d10()
    if roll <= 3:
        return Cell()
    if roll <= 5:
        return Cell(enemy=_random_enemy())
    if roll <= 7:
        return Cell(item=_random_item())
    if roll == 8:
        return Cell(gold=dice.d4())
    return Cell()


class Board:
    """A randomly filled grid; the hero starts at (0, 0), the dragon waits
    in the opposite corner."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._columns: list[list[Cell]] = []
        for x in range(width):
            column = []
            for y in range(height):
                if x == 0 and y == 0:
                    column.append(Cell())
                elif x == width - 1 and y == height - 1:
                    column.append(Cell(enemy=Dragon()))
                else:
                    column.append(_random_cell())
            self._columns.append(column)

    def __repr__(self) -> str:
        return f"Board(width={self.width}, height={self.height})"

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Cell:
        """Return the cell at ``(x, y)``; raise IndexError outside the map."""
        if not self.in_bounds(x, y):
            raise IndexError("Coordonnées hors plateau")
        return self._columns[x][y]

    def remove_item(self, x: int, y: int) -> None:
        """Take the item off the cell at ``(x, y)``."""
        self.cell(x, y).remove_item()

    def render(self, player_x: int, player_y: int) -> str:
        """Draw the whole map, top row first, with every cell shown."""
        lines = ["\n"]
        for y in reversed(range(self.height)):
            row = "".join(
                (icons.WARRIOR if (x, y) == (player_x, player_y)
                 else self._columns[x][y].icon(True)) + "    "
                for x in range(self.width)
            )
            lines.append(f"\t{row}\n")
        return "".join(lines)