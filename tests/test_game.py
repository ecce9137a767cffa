import io
from unittest import mock

import pytest

from marais import dice, icons
from marais.enemies import Dragon, Goblin, Orc
from marais.game import Game, GameState, main
from marais.heroes import Mage, Warrior
from marais.items import HealingPotion


def scripted(lines):
    it = iter(lines)

    def read(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


def make_game(width=10, height=10, lines=(), hero=None):
    out = io.StringIO()
    game = Game(width, height, input_fn=scripted(lines), output=out,
                sleep=lambda s: None)
    if hero is not None:
        game.set_player(hero)
    return game, out


def rows(game):
    return [line.lstrip("\t").split("   ")[:-1]
            for line in game.render_board().splitlines()]


def test_moves_from_source_plateau_case():
    game, _ = make_game(10, 10, hero=Warrior())
    assert (game.x, game.y) == (0, 0)
    assert game.move_player(1, 0) is True
    assert (game.x, game.y) == (1, 0)
    assert game.move_player(15, 9) is False
    assert (game.x, game.y) == (1, 0)
    assert game.move_player(7, 8) is True
    assert (game.x, game.y) == (7, 8)


def test_negative_move_rejected():
    game, _ = make_game(hero=Warrior())
    assert game.move_player(-1, 0) is False
    assert (game.x, game.y) == (0, 0)


def test_visibility_is_neighbourhood():
    game, _ = make_game(hero=Warrior())
    game.move_player(5, 5)
    assert game.is_cell_visible(4, 4)
    assert game.is_cell_visible(6, 5)
    assert not game.is_cell_visible(7, 5)
    assert not game.is_cell_visible(5, 3)


def test_render_board_layout():
    game, _ = make_game(10, 10, hero=Warrior())
    grid = rows(game)
    assert len(grid) == 10
    assert all(len(row) == 10 for row in grid)
    assert grid[-1][0] == icons.WARRIOR
    assert grid[0][9] == icons.HIDDEN
    assert grid[4][5] == icons.HIDDEN


def test_visited_cell_is_shown():
    game, _ = make_game(10, 10, hero=Warrior())
    game.board.cell(9, 9).mark_visited()
    assert rows(game)[0][9] == icons.DRAGON


def test_run_creates_hero_then_quits():
    game, out = make_game(lines=["Ana", "1", "4"])
    game.run()
    assert isinstance(game.player, Warrior)
    assert game.player.name == "Ana"
    assert game.state is GameState.QUIT
    assert "Merci pour Jouer!" in out.getvalue()


def test_pre_game_asks_again_on_bad_class():
    game, out = make_game(lines=["Bob Smith", "7", "2"])
    game.pre_game()
    assert isinstance(game.player, Mage)
    assert game.player.name == "Bob"
    assert game.state is GameState.EXPLORATION
    assert "La magie est forte" in out.getvalue()


def test_run_quits_when_input_ends():
    game, out = make_game(lines=[])
    game.run()
    assert game.state is GameState.QUIT
    assert "Merci pour Jouer!" in out.getvalue()


def test_explore_quit_option():
    game, _ = make_game(lines=["4"], hero=Warrior())
    game.state = GameState.EXPLORATION
    game.explore()
    assert game.state is GameState.QUIT


def test_explore_shop_buys_potion():
    hero = Warrior()
    game, _ = make_game(lines=["3", "1", "0"], hero=hero)
    game.state = GameState.EXPLORATION
    game.explore()
    assert hero.gold == 1
    assert isinstance(hero.inventory[0], HealingPotion)
    assert game.state is GameState.EXPLORATION


def test_explore_shop_refuses_without_gold():
    hero = Warrior()
    game, out = make_game(lines=["3", "2", "0"], hero=hero)
    game.explore()
    assert hero.gold == 3
    assert hero.inventory == [None] * 4
    assert "Pas assez d'argent" in out.getvalue()


def test_explore_move_ends_on_visited_cell():
    dice.seed(3)
    game, _ = make_game(2, 1, lines=["1", "", "d", "a", "d", "a", "", "", ""],
                        hero=Warrior())
    game.state = GameState.EXPLORATION
    game.explore()
    assert game.board.cell(game.x, game.y).visited
    if game.x == 1:
        assert game.state is GameState.COMBAT
    else:
        assert game.state is GameState.EXPLORATION


def test_inventory_menu_uses_item():
    hero = Warrior()
    hero.add_item(HealingPotion())
    hero.take_damage(30)
    game, _ = make_game(lines=["1", "0"], hero=hero)
    game.inventory_menu()
    assert hero.health == 70
    assert hero.inventory[0] is None


def test_player_round_inventory_does_not_end_turn():
    game, _ = make_game(lines=["3", "0"], hero=Warrior())
    assert game.player_round(Goblin()) is False


def test_enemy_round_goblin_hits():
    hero = Warrior()
    game, out = make_game(lines=[""], hero=hero)
    game.enemy_round(Goblin())
    assert hero.health == 63
    assert "Goblin vous attaque" in out.getvalue()


def test_dragon_round_outcomes():
    dice.seed(11)
    hero = Warrior()
    game, _ = make_game(lines=[""], hero=hero)
    game.dragon_round(Dragon())
    assert hero.health in {80, 30, 10, 0}


def test_combat_kills_weak_goblin():
    dice.seed(0)
    hero = Warrior()
    game, out = make_game(lines=["1"] * 200, hero=hero)
    goblin = Goblin()
    goblin.health = 1
    game.board.cell(0, 0).enemy = goblin
    game.state = GameState.COMBAT
    game.combat()
    assert game.state is GameState.EXPLORATION
    assert game.board.cell(0, 0).enemy is None
    assert hero.gold == 8
    assert "You killed them all!" in out.getvalue()


def test_combat_death_ends_game():
    hero = Warrior()
    hero.health = 1
    game, out = make_game(lines=["1"] * 50, hero=hero)
    game.board.cell(0, 0).enemy = Orc()
    game.state = GameState.COMBAT
    game.combat()
    assert game.state is GameState.GAME_OVER
    assert not hero.is_alive()
    assert "You died." in out.getvalue()


def test_full_inventory_asks_through_game():
    hero = Warrior()
    game, _ = make_game(lines=["2"], hero=hero)
    for _ in range(4):
        hero.add_item(HealingPotion())
    new = HealingPotion()
    assert hero.add_item(new) is True
    assert hero.inventory[1] is new


@pytest.mark.parametrize("answer", ["0", "9"])
def test_full_inventory_discard(answer):
    hero = Warrior()
    game, _ = make_game(lines=[answer], hero=hero)
    for _ in range(4):
        hero.add_item(HealingPotion())
    new = HealingPotion()
    assert hero.add_item(new) is False
    assert new not in hero.inventory


def test_main_runs_and_quits(capsys):
    with mock.patch("builtins.input", side_effect=["Ana", "3", "4"]), \
            mock.patch("time.sleep"):
        assert main([]) == 0
    assert "Merci pour Jouer!" in capsys.readouterr().out