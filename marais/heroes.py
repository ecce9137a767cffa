"""Playable heroes: the warrior, the mage and the thief."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

from marais import dice, icons
from marais.items import HealingPotion, Item

ReplacementChooser = Callable[["Hero", Item], int]

_RULE = "=" * 50
_BANNER = "-" * 48


def _num(value: float) -> str:
    return f"{value:g}"


class _Tier(Enum):
    FAIL = "fail"
    CRITICAL = "critical"
    HIT = "hit"
    WEAK = "weak"


class Hero:
    """A player character with stats, gold and a fixed-size inventory.

    ``replacement_chooser`` is asked which slot to replace when an item is
    added to a full inventory. It receives the hero and the new item and
    returns a slot number from 1 or 0 to throw the new item away.
    """

    emoji = ""
    title = ""
    special_label = "Special"
    _shown_stats: tuple[tuple[str, str], ...] = ()

    def __init__(
        self,
        name: str,
        max_health: int,
        strength: int,
        power: int,
        dexterity: int,
        luck: int,
        gold: int,
        inventory_size: int,
        replacement_chooser: Optional[ReplacementChooser] = None,
    ) -> None:
        self.name = name
        self.max_health = max_health
        self.health = max_health
        self.strength = strength
        self.power = power
        self.dexterity = dexterity
        self.luck = luck
        self.gold = gold
        self.special_ready = True
        self.inventory: list[Optional[Item]] = [None] * inventory_size
        self.replacement_chooser = replacement_chooser

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, "
            f"health={self.health}/{self.max_health}, gold={self.gold})"
        )

    # --- dice helpers -------------------------------------------------

    def _luck_roll(self) -> tuple[int, Optional[int], str]:
        """Roll a d20 and add luck; the total is None on a natural 1."""
        roll = dice.d20()
        if roll == 1:
            return roll, None, f"{roll}\n"
        total = roll + roll * self.luck // 100
        return roll, total, f"{roll} + chance ({self.luck}%) = {total}\n"

    def _attack_roll(self, fail_message: str) -> tuple[_Tier, str]:
        _, total, text = self._luck_roll()
        if total is None:
            return _Tier.FAIL, f"{text}{fail_message}\n"
        if total >= 19:
            return _Tier.CRITICAL, text
        if total >= 10:
            return _Tier.HIT, text
        return _Tier.WEAK, text

    # --- combat -------------------------------------------------------

    def basic_attack(self, enemy) -> str:
        """Attack ``enemy``; a plain hero does nothing."""
        return ""

    def special_ability(self, enemy) -> str:
        """Use the class ability against ``enemy``; a plain hero has none."""
        return ""

    def flee(self) -> tuple[bool, str]:
        """Try to run from combat; return whether it worked and what to show."""
        _, total, text = self._luck_roll()
        if total is None:
            return False, text + "FAIL!, vous vous avez raté la fuite\n"
        if total >= 20:
            return True, text + (
                "Fuite parfait, t'as disparu et l'ennemi pense avoir mangé "
                "quelque champignon gâté.\n"
            )
        if total >= 15:
            return True, text + (
                "Fuite, l'ennemi the cherce encore mais t'as bien fuit.\n"
            )
        return False, text + "Tu ne vas nulle part. \n"

    def take_damage(self, amount) -> None:
        """Lose ``amount`` health, never dropping below zero."""
        amount = int(amount)
        if amount < self.health:
            self.health -= amount
        else:
            self.health = 0

    def heal(self, amount: int) -> None:
        """Regain ``amount`` health, never beyond the maximum."""
        if self.health + amount < self.max_health:
            self.health += amount
        else:
            self.health = self.max_health

    def earn(self, amount: int) -> None:
        self.gold += amount

    def spend(self, price: int) -> bool:
        """Pay ``price`` gold if there is enough; return whether it was paid."""
        if price > self.gold:
            return False
        self.gold -= price
        return True

    def is_alive(self) -> bool:
        return self.health > 0

    # --- inventory ----------------------------------------------------

    def inventory_full(self) -> bool:
        return all(slot is not None for slot in self.inventory)

    def add_item(
        self, item: Item, choose_replacement: Optional[ReplacementChooser] = None
    ) -> bool:
        """Put ``item`` in the first free slot, or replace one when full.

        Returns False when the item was thrown away.
        """
        if not self.inventory_full():
            free = self.inventory.index(None)
            self.inventory[free] = item
            return True
        chooser = choose_replacement or self.replacement_chooser
        if chooser is None:
            return False
        choice = chooser(self, item)
        if not 1 <= choice <= len(self.inventory):
            return False
        self.inventory[choice - 1] = item
        return True

    def use_item(self, index: int) -> bool:
        """Use and remove the item in slot ``index`` (from 0)."""
        if not 0 <= index < len(self.inventory):
            return False
        item = self.inventory[index]
        if item is None:
            return False
        item.use(self)
        self.inventory[index] = None
        return True

    # --- display ------------------------------------------------------

    def inventory_text(self) -> str:
        slots = "".join(
            (" " if item is None else item.emoji) + " | " for item in self.inventory
        )
        return (
            "\n"
            "======INVENTAIRE======\n"
            "\n"
            "    1   2   3   4 \n"
            f"  | {slots}\n\n"
            "======================\n"
        )

    def stats_text(self) -> str:
        shown = "".join(
            f"\t{label}{getattr(self, attr)}" for label, attr in self._shown_stats
        )
        return (
            "\n\n"
            f"{_BANNER} {self.name} {self.title} {_BANNER}\n\n"
            f"\tHP: {self.health}/{self.max_health}"
            f"{shown}"
            f"\tGold: {self.gold}{icons.COIN}"
            "\n\n"
        )

    def combat_actions_text(self) -> str:
        return (
            f"{_RULE} ACTIONS {_RULE}\n\n"
            f"\t1. Attaque \t 2. {self.special_label} \t 3. Inventaire \t 4. Fuir \n\n"
            f"{'=' * 109}\n"
            "\t\tOption: "
        )


class Warrior(Hero):
    """Strong melee fighter."""

    emoji = icons.WARRIOR
    title = "le Guerrier."
    special_label = "Attaque Special"
    _shown_stats = (("Force: ", "strength"), ("Chance:", "luck"))
    _FAIL = "FAIL!, vous vous avez trébuché et raté l'attaque"

    def __init__(
        self, name: str = "", replacement_chooser: Optional[ReplacementChooser] = None
    ) -> None:
        super().__init__(name, 80, 20, 7, 8, 30, 3, 4, replacement_chooser)

    def basic_attack(self, enemy) -> str:
        tier, text = self._attack_roll(self._FAIL)
        if tier is _Tier.FAIL:
            return text
        if tier is _Tier.CRITICAL:
            text += f"Attaque Critique! Dégats(x1.8) = {_num(self.strength * 1.8)}\n"
            enemy.take_damage(int(self.strength * 1.8))
        elif tier is _Tier.HIT:
            text += f"Attaque! Dégats = {self.strength}\n"
            enemy.take_damage(self.strength)
        else:
            text += f"Attaque faible! Dégats(x0.7) = {_num(self.strength * 0.7)}\n"
            enemy.take_damage(int(self.strength * 0.7))
        return text

    def special_ability(self, enemy) -> str:
        tier, text = self._attack_roll(self._FAIL)
        if tier is _Tier.FAIL:
            return text
        if tier is _Tier.CRITICAL:
            text += f"Saut avec l attaque! Dégats(x1.8) = {self.strength * 2}\n"
            enemy.take_damage(int(self.strength * 1.8))
        elif tier is _Tier.HIT:
            text += f"Attaque! Dégats = {_num(self.strength * 1.2)}\n"
            enemy.take_damage(int(self.strength * 1.2))
        else:
            text += f"Attaque faible! Dégats(x0.7) = {_num(self.strength * 0.7)}\n"
            enemy.take_damage(int(self.strength * 0.7))
        return text


class Mage(Hero):
    """Spell caster whose special ability heals."""

    emoji = icons.MAGE
    title = "le Mage."
    special_label = "Cure"
    _shown_stats = (("Pouvoir: ", "power"), ("Chance:", "luck"))

    def __init__(
        self, name: str = "", replacement_chooser: Optional[ReplacementChooser] = None
    ) -> None:
        super().__init__(name, 60, 10, 20, 25, 35, 5, 4, replacement_chooser)

    def basic_attack(self, enemy) -> str:
        tier, text = self._attack_roll(
            "FAIL!, vous vous avez oublié comment faire le sort d'attaque."
        )
        if tier is _Tier.FAIL:
            return text
        if tier is _Tier.CRITICAL:
            text += (
                f"Sort Critique! Dégats(x1.8) = {_num(self.power * 1.8)}"
                " et tu te cures un petit peu.\n"
            )
            enemy.take_damage(int(self.power * 1.8))
            self.heal(7)
        elif tier is _Tier.HIT:
            text += f"Sort! Dégats = {self.power}\n"
            enemy.take_damage(self.power)
        else:
            text += f"Sort faible! Dégats(x0.7) = {_num(self.power * 0.7)}\n"
            enemy.take_damage(int(self.power * 0.7))
        return text

    def special_ability(self, enemy) -> str:
        tier, text = self._attack_roll(
            "FAIL!, vous vous avez oublié comment faire le sort de cure"
        )
        if tier is _Tier.FAIL:
            return text
        if tier is _Tier.CRITICAL:
            text += (
                "Votre chant ressone fort (x1.8). "
                "Tu te cures et l'ennemi reçoit un dégats.\n"
            )
            self.heal(self.power)
        elif tier is _Tier.HIT:
            text += f"Cure! {self.power // 2} points de vie.\n"
            self.heal(self.power // 2)
        else:
            text += "voice crack, vos sorts sont pas si forts. -4 points de vie.\n"
            self.take_damage(4)
        return text


class Thief(Hero):
    """Lucky rogue whose special ability steals potions and gold."""

    emoji = icons.THIEF
    title = "le Vouleur."
    special_label = "Volert"
    _shown_stats = (
        ("Force: ", "strength"),
        ("Dexterite: ", "dexterity"),
        ("Chance:", "luck"),
    )
    _FAIL = "FAIL!, vous ne serts pas a rien."

    def __init__(
        self, name: str = "", replacement_chooser: Optional[ReplacementChooser] = None
    ) -> None:
        super().__init__(name, 70, 18, 3, 75, 100, 10, 5, replacement_chooser)

    def basic_attack(self, enemy) -> str:
        tier, text = self._attack_roll(self._FAIL)
        if tier is _Tier.FAIL:
            return text
        if tier is _Tier.CRITICAL:
            text += f"Attaque furtive! Dégats(x1.8) = {_num(self.strength * 1.8)}\n"
            enemy.take_damage(int(self.strength * 1.8))
        elif tier is _Tier.HIT:
            text += f"Attaque! Dégats = {self.strength}\n"
            enemy.take_damage(self.strength)
        else:
            text += f"Attaque faible! Dégats(x0.7) = {_num(self.strength * 0.7)}\n"
            enemy.take_damage(int(self.strength * 0.7))
        return text

    def special_ability(self, enemy) -> str:
        tier, text = self._attack_roll(self._FAIL)
        if tier is _Tier.FAIL:
            return text
        if tier is _Tier.CRITICAL:
            text += "T'as volé le mf \n"
            self.earn(5)
            self.add_item(HealingPotion())
            enemy.stealable = False
        elif tier is _Tier.HIT:
            text += "bien volé! \n"
            self.add_item(HealingPotion())
            enemy.stealable = False
        else:
            text += "c'est quoi que tu fait la? Pas reussi en voler\n"
        return text