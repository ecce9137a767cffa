"""The merchant who sells items for gold."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from marais import icons
from marais.heroes import Hero, ReplacementChooser
from marais.items import ItemKind, make_item

_CHOICES = {
    1: ItemKind.POTION,
    2: ItemKind.SHIELD,
    3: ItemKind.SWORD,
    4: ItemKind.SCROLL,
}


@dataclass
class Merchant:
    """Sells potions, shields, swords and scrolls at fixed prices."""

    potion_price: int = 2
    shield_price: int = 7
    sword_price: int = 6
    scroll_price: int = 6

    def price(self, kind: ItemKind) -> int:
        return {
            ItemKind.POTION: self.potion_price,
            ItemKind.SHIELD: self.shield_price,
            ItemKind.SWORD: self.sword_price,
            ItemKind.SCROLL: self.scroll_price,
        }[kind]

    def sell(
        self,
        choice: int,
        hero: Hero,
        choose_replacement: Optional[ReplacementChooser] = None,
    ) -> bool:
        """Sell the item for menu ``choice`` (1 to 4).

        The hero is refunded when the item cannot be placed in the inventory.
        """
        kind = _CHOICES.get(choice)
        if kind is None:
            return False
        price = self.price(kind)
        if not hero.spend(price):
            return False
        if not hero.add_item(make_item(kind), choose_replacement):
            hero.earn(price)
            return False
        return True

    def sell_kind(
        self,
        kind: ItemKind,
        hero: Hero,
        choose_replacement: Optional[ReplacementChooser] = None,
    ) -> bool:
        """Sell an item of ``kind``; the price is kept even if it is thrown away."""
        if not hero.spend(self.price(kind)):
            return False
        hero.add_item(make_item(kind), choose_replacement)
        return True

    def menu_text(self) -> str:
        pad = "\t\t\t\t"
        return (
            "\n"
            f"{pad}=======================\n"
            f"{pad}Bienvenue au Marchand!\n"
            "\n"
            f"{pad}\tmenu du jour:\n"
            f"{pad}  Potion de Soin {icons.COIN} {self.potion_price}\n"
            f"{pad}  Bouclier {icons.COIN} {self.shield_price}\n"
            f"{pad}  Epee long {icons.COIN} {self.sword_price}\n"
            f"{pad}  Parchemin {icons.COIN} {self.scroll_price}\n"
            "\n"
            f"{pad}passez votre commande!\n"
            f"{pad}=======================\n"
            "\n\n"
        )