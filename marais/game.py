"""The game loop: character creation, exploration, shopping and combat."""

from __future__ import annotations

import sys
import time
from collections import deque
from enum import Enum
from typing import Callable, Optional, TextIO

from marais import dice
from marais.board import Board
from marais.enemies import Enemy
from marais.heroes import Hero, Mage, Thief, Warrior
from marais.items import Item, ItemKind
from marais.merchant import Merchant

CLEAR = "\033[2J\033[1;1H"
_RULE = "=" * 50
_LONG_RULE = "=" * 109
_TITLE = (
    CLEAR
    + "============================================= MARAIS DE LA PERDITION "
    "=============================================\n\n"
)

_MOVES = {"w": (0, 1), "d": (1, 0), "s": (0, -1), "a": (-1, 0)}
_SHOP_CHOICES = {
    1: ItemKind.POTION,
    2: ItemKind.SHIELD,
    3: ItemKind.SWORD,
    4: ItemKind.SCROLL,
}
_HERO_CLASSES = {
    1: (Warrior, "Guerrier! Bonne courage."),
    2: (Mage, "Mage! La magie est forte en vous"),
    3: (Thief, "Voleur! La guilde vous a bien preparé"),
}


class GameState(Enum):
    """Where the main loop currently is."""

    PRE_GAME = "pre_game"
    EXPLORATION = "exploration"
    COMBAT = "combat"
    GAME_OVER = "game_over"
    QUIT = "quit"


class Game:
    """One play-through on a randomly generated island.

    Input is read through ``input_fn`` (a callable returning one line and
    raising EOFError when input runs out), output goes to ``output`` and
    pauses go through ``sleep``; all default to the terminal.
    """

    def __init__(
        self,
        width: int = 8,
        height: int = 8,
        *,
        input_fn: Optional[Callable[[], str]] = None,
        output: Optional[TextIO] = None,
        sleep: Optional[Callable[[float], None]] = None,
        merchant: Optional[Merchant] = None,
    ) -> None:
        self.board = Board(width, height)
        self.merchant = merchant if merchant is not None else Merchant()
        self.state = GameState.PRE_GAME
        self.player: Optional[Hero] = None
        self.x = 0
        self.y = 0
        self._input = input_fn if input_fn is not None else input
        self._output = output
        self._sleep = sleep if sleep is not None else time.sleep
        self._tokens: deque[str] = deque()

    # --- input and output ---------------------------------------------

    def _write(self, text: str) -> None:
        out = self._output if self._output is not None else sys.stdout
        out.write(text)
        out.flush()

    def _next_token(self) -> str:
        while not self._tokens:
            self._tokens.extend(self._input().split())
        return self._tokens.popleft()

    def _ask_int(self) -> Optional[int]:
        try:
            return int(self._next_token())
        except ValueError:
            return None

    def _wait_enter(self) -> None:
        self._tokens.clear()
        self._input()

    def _pause(self, milliseconds: int) -> None:
        self._sleep(milliseconds / 1000)

    def _dice_animation(self) -> None:
        self._write("Lancement des dés")
        for _ in range(3):
            self._pause(400)
            self._write(".")
        self._write(" ")

    def _frame(self, enemy: Optional[Enemy] = None) -> None:
        self._write(_TITLE)
        if enemy is not None:
            self._write(enemy.stats_text())
        self._write(self.player.stats_text())

    def _map_frame(self) -> None:
        self._frame()
        self._write(self.render_board())
        self._write("\n")

    def _choose_replacement(self, hero: Hero, item: Item) -> int:
        self._write(hero.inventory_text())
        self._write("Inventaire complet! choisir une option à remplacer\n")
        self._write(f"{_RULE} ACTIONS {_RULE}\n\n")
        for number, slot in enumerate(hero.inventory, start=1):
            name = slot.name if slot is not None else ""
            self._write(f"\t{number}. Remplacer {name}")
        self._write("\t0. Jeter nouveau objet.\n\n")
        self._write(f"{_LONG_RULE}\n\t\tOption: ")
        choice = self._ask_int()
        return 0 if choice is None else choice

    # --- board --------------------------------------------------------

    def set_player(self, hero: Hero) -> None:
        """Make ``hero`` the player; full-inventory choices are asked on input."""
        if hero.replacement_chooser is None:
            hero.replacement_chooser = self._choose_replacement
        self.player = hero

    def move_player(self, x: int, y: int) -> bool:
        """Put the player at ``(x, y)`` if it lies on the board."""
        if not self.board.in_bounds(x, y):
            return False
        self.x, self.y = x, y
        return True

    def is_cell_visible(self, x: int, y: int) -> bool:
        """Cells next to the player, diagonals included, are visible."""
        return abs(x - self.x) <= 1 and abs(y - self.y) <= 1

    def render_board(self) -> str:
        """Draw the map, top row first, hiding cells not seen yet."""
        lines = []
        for y in reversed(range(self.board.height)):
            parts = []
            for x in range(self.board.width):
                if (x, y) == (self.x, self.y):
                    parts.append(self.player.emoji)
                else:
                    cell = self.board.cell(x, y)
                    visible = self.is_cell_visible(x, y) or cell.visited
                    parts.append(cell.icon(visible))
                parts.append("   ")
            lines.append("\t" + "".join(parts) + "\n")
        return "".join(lines)

    # --- main loop ----------------------------------------------------

    def run(self) -> None:
        """Play until the player quits, dies or input runs out."""
        handlers = {
            GameState.PRE_GAME: self.pre_game,
            GameState.EXPLORATION: self.explore,
            GameState.COMBAT: self.combat,
        }
        try:
            while self.state in handlers:
                handlers[self.state]()
        except EOFError:
            self.state = GameState.QUIT
        if self.state is GameState.QUIT:
            self._write(CLEAR)
            self._write("Merci pour Jouer!\n")

    def pre_game(self) -> None:
        """Tell the intro, then ask for a name and a class."""
        self._write(CLEAR)
        self._write("\n\t\t\t\t")
        for _ in range(5):
            self._pause(400)
            self._write(".")
        self._pause(1000)
        self._write(CLEAR)
        for line in (
            "Vous vous réveillez sur un île.",
            "Vous etais là pour une raison, mais vous ne vous souvenez pas.",
            "Il y a des ennemis proche, fait gaffe.",
        ):
            self._write(f"\t\t\t{line}\n")
            self._pause(4000)
        self._write(CLEAR)
        self._pause(4000)
        self._write("Comment vous voulez être appelé, ami courageux?\n")
        self._write("Choisir un nom: ")
        name = self._next_token()

        while True:
            self._write(CLEAR)
            self._write(_TITLE)
            self._write(
                "\t\tJouer comme:\n"
                "\t\t1. Guerrier\n"
                "\t\t2. Mage\n"
                "\t\t3. Voleur\n"
            )
            choice = self._HERO_CHOICE(self._ask_int())
            if choice is not None:
                break
        hero_class, greeting = choice
        self._write(greeting + "\n")
        self.set_player(hero_class(name))
        self._pause(2000)
        self.state = GameState.EXPLORATION

    @staticmethod
    def _HERO_CHOICE(option: Optional[int]):
        return _HERO_CLASSES.get(option)

    def explore(self) -> None:
        """Show the map and carry out one exploration action."""
        self._map_frame()
        self._write(f"{_RULE} ACTIONS {_RULE}\n\n")
        self._write(
            "\t1. Bouger \t 2. Inventaire \t\t 3. Marchand \t\t 4. Quitter Jeu\n\n"
        )
        self._write(f"{_LONG_RULE}\n\t\tOption: ")
        option = self._ask_int()
        if option == 1:
            self._move_turn()
        elif option == 2:
            self.inventory_menu()
        elif option == 3:
            self._shop()
        elif option == 4:
            self.state = GameState.QUIT

    def _move_turn(self) -> None:
        self._map_frame()
        self._write("Appuyer ENTER pour Lancer le Des 4\n")
        self._wait_enter()
        self._map_frame()
        self._dice_animation()
        moves = dice.d4()
        self._write(f"{moves}\n")
        while moves > 0:
            self._map_frame()
            self._write("Appuyez sur WASD pour bouger.\n")
            self._write(f"Vous avez {moves} mouvements.\n")
            step = _MOVES.get(self._next_token()[0])
            if step is not None and self.move_player(self.x + step[0], self.y + step[1]):
                moves -= 1

        cell = self.board.cell(self.x, self.y)
        cell.mark_visited()
        if cell.contains_enemy():
            self._write(_TITLE)
            self._write(f"\n\n\nDANGER! {cell.enemy.race}!\n")
            self._write("Appuyez sur ENTER pour entrer en combat.\n")
            self._wait_enter()
            self.state = GameState.COMBAT
        elif cell.contains_item():
            self._write(_TITLE)
            self._write(f"\n\n\nVous avez trouvez un {cell.item.name}!\n")
            self._write("Appuyez sur ENTER pour ajouter au inventaire.\n")
            self._wait_enter()
            if self.player.add_item(cell.item):
                cell.remove_item()
        elif cell.gold:
            self._write(_TITLE)
            self._write(f"\n\n\nVous avez trouvez {cell.gold} coins!\n")
            self._write("Appuyez sur ENTER pour les prendre\n")
            self._wait_enter()
            self.player.earn(cell.gold)
            cell.gold = 0

    def _shop(self) -> None:
        while True:
            self._frame()
            self._write(self.merchant.menu_text())
            self._write(f"{_RULE} ACTIONS {_RULE}\n\n")
            self._write(
                "\t1. acheter Potion \t 2. acheter Bouclier \t 3. acheter Epee "
                "\t 4. acheter Parchemin \t 0. Revenir\n\n"
            )
            self._write(f"{_LONG_RULE}\n\t\tOption: ")
            choice = self._ask_int()
            if choice == 0:
                return
            kind = _SHOP_CHOICES.get(choice)
            if kind is None:
                continue
            if self.merchant.price(kind) > self.player.gold:
                self._write("Pas assez d'argent\n")
                continue
            self.merchant.sell(choice, self.player)

    def combat(self) -> None:
        """Fight the enemy on the player's cell until someone wins or flees."""
        enemy = self.board.cell(self.x, self.y).enemy
        boss = enemy.race == "DRAGON"
        while True:
            while not self.player_round(enemy):
                pass
            if not enemy.is_alive():
                reward = enemy.gold_reward
                self.state = GameState.EXPLORATION
                self.player.earn(reward)
                self.board.cell(self.x, self.y).remove_enemy()
                self._write("\n\tYou killed them all!\n")
                self._write(f"\t+{reward}{self._gold_icon()}\n\n")
                self._write("\tAppuyer ENTER pour continuer!\n")
                self._wait_enter()
            elif boss:
                self.dragon_round(enemy)
            else:
                self.enemy_round(enemy)
            if not self.player.is_alive():
                self._write("GAME OVER\nYou died.\n")
                self.state = GameState.GAME_OVER
            if self.state is not GameState.COMBAT:
                return

    @staticmethod
    def _gold_icon() -> str:
        from marais import icons

        return icons.GOLD

    def inventory_menu(self) -> None:
        """Show the inventory and use items until the player goes back."""
        while True:
            self._frame()
            self._write(self.player.inventory_text())
            self._write("0. Revenir\n")
            option = self._ask_int()
            if option == 0:
                return
            if option is not None and 1 <= option <= 4:
                self.player.use_item(option - 1)

    def player_round(self, enemy: Enemy) -> bool:
        """Ask for one combat action; return True once the turn is over."""
        self._frame(enemy)
        self._write(self.player.combat_actions_text())
        option = self._ask_int()
        if option == 1:
            return self._attack_turn(enemy, "\tAttaque Basique!\n",
                                     self.player.basic_attack)
        if option == 2:
            return self._attack_turn(enemy, "\tSPECIAL!\n",
                                     self.player.special_ability)
        if option == 3:
            self.inventory_menu()
            return False
        if option == 4:
            self._frame(enemy)
            self._write("\tTu essaie de Fuir!\n")
            self._write("\tAppuyer ENTER pour Lancer le Des 20\n")
            self._wait_enter()
            self._frame(enemy)
            self._write("\n")
            self._dice_animation()
            escaped, text = self.player.flee()
            self._write(text)
            if escaped:
                self.state = GameState.EXPLORATION
                self._write("\tAppuyer ENTER pour continuer\n")
                self._wait_enter()
                return True
        return False

    def _attack_turn(self, enemy: Enemy, banner: str, action) -> bool:
        self._frame(enemy)
        self._write(banner)
        self._write("\tAppuyer ENTER pour Lancer le Des 20\n")
        self._wait_enter()
        self._frame(enemy)
        self._write("\n")
        self._dice_animation()
        self._write(action(enemy))
        self._write("\n\t ENTER pour continuer\n")
        self._wait_enter()
        return True

    def enemy_round(self, enemy: Enemy) -> None:
        """Let an ordinary enemy hit the player."""
        self._frame(enemy)
        self._write("\n")
        self._write(f"{enemy.race} vous attaque\n")
        self._pause(100)
        self._write(enemy.attack(self.player))
        self._write(f"Degats: {enemy.strength}")
        self._write("\tAppuyer ENTER pour continuer\n")
        self._wait_enter()

    def dragon_round(self, enemy: Enemy) -> None:
        """The dragon attacks, or on a d10 above 7 uses its special."""
        self._frame(enemy)
        if dice.d10() <= 7:
            self._write(enemy.attack(self.player))
            self._pause(1000)
            self._write(f"Damage{enemy.strength}")
        else:
            self._write(enemy.special(self.player))
        self._write("\n")
        self._write("\tAppuyer ENTER pour continuer\n")
        self._wait_enter()


def main(argv=None) -> int:
    """Start a game on an 8 by 8 island."""
    Game(8, 8).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())