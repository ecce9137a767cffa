"""Items a hero can find, buy and use."""

from __future__ import annotations

from enum import Enum

from marais import icons


class ItemKind(Enum):
    """The kinds of item sold by the merchant and found on the map."""

    POTION = "potion"
    SWORD = "sword"
    SHIELD = "shield"
    SCROLL = "scroll"


class Item:
    """Something that fits in an inventory slot and can be used once."""

    name = ""
    emoji = ""
    kind: ItemKind | None = None

    def use(self, hero) -> None:
        """Apply the item's effect to ``hero``; a plain item has none."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class HealingPotion(Item):
    """Restores 20 health, never beyond the maximum."""

    name = "Potion de Soin"
    emoji = icons.POTION
    kind = ItemKind.POTION

    def use(self, hero) -> None:
        hero.heal(20)


class Shield(Item):
    """Raises maximum health by 20 and heals 20."""

    name = "Bouclier"
    emoji = icons.SHIELD
    kind = ItemKind.SHIELD

    def use(self, hero) -> None:
        hero.max_health += 20
        hero.heal(20)


class Sword(Item):
    """Raises strength by 20."""

    name = "Epee"
    emoji = icons.SWORD
    kind = ItemKind.SWORD

    def use(self, hero) -> None:
        hero.strength += 20


class Scroll(Item):
    """Raises magic power by 20."""

    name = "Parchemin"
    emoji = icons.SCROLL
    kind = ItemKind.SCROLL

    def use(self, hero) -> None:
        hero.power += 20


_ITEM_CLASSES: dict[ItemKind, type[Item]] = {
    ItemKind.POTION: HealingPotion,
    ItemKind.SWORD: Sword,
    ItemKind.SHIELD: Shield,
    ItemKind.SCROLL: Scroll,
}


def make_item(kind: ItemKind) -> Item:
    """Create a new item of the given kind."""
    try:
        return _ITEM_CLASSES[kind]()
    except KeyError:
        raise ValueError(f"unknown item kind: {kind!r}") from None