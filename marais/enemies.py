"""Enemies met on the island: goblins, orcs and the dragon."""

from __future__ import annotations

from dataclasses import dataclass, field

from marais import dice, icons


def _num(value: float) -> str:
    return f"{value:g}"


@dataclass(eq=False)
class Enemy:
    """A foe with health, strength and a gold reward."""

    race: str
    max_health: int
    strength: int
    gold_reward: int
    stealable: bool
    health: int = field(init=False)

    icon = ""

    def __post_init__(self) -> None:
        self.health = self.max_health

    def take_damage(self, amount: int) -> None:
        """Lose ``amount`` health, never dropping below zero."""
        if amount < self.health:
            self.health -= amount
        else:
            self.health = 0

    def is_alive(self) -> bool:
        return self.health > 0

    def attack(self, hero) -> str:
        """Hit ``hero`` for this enemy's strength; return what to show."""
        hero.take_damage(self.strength)
        return ""

    def special(self, hero) -> str:
        """Perform a special attack; ordinary enemies have none."""
        return ""

    def stats_text(self) -> str:
        return (
            "\n\n"
            f"\t+------ {self.race} -----+\n\n"
            f"\t\tHP: {self.health}/{self.max_health}\n"
            f"\t\tForce: {self.strength}\n"
            f"\t\trecompense: {self.gold_reward}{icons.GOLD}"
            "\n\n"
            "\t+-------------------+\n\n"
        )


class Goblin(Enemy):
    """A weak, stealable enemy."""

    icon = icons.GOBLIN

    def __init__(self) -> None:
        super().__init__("Goblin", 45, 17, 5, True)


class Orc(Enemy):
    """A tougher, stealable enemy."""

    icon = icons.ORC

    def __init__(self) -> None:
        super().__init__("Orc", 60, 23, 12, True)


class Dragon(Enemy):
    """The boss guarding the far corner of the island."""

    icon = icons.DRAGON

    def __init__(self) -> None:
        super().__init__("DRAGON", 100, 50, 1000, False)

    def attack(self, hero) -> str:
        hero.take_damage(self.strength)
        return "Le dragon vous attaque avec s aile!\n"

    def special(self, hero) -> str:
        """Roll a d20 for a fire attack whose strength depends on the roll."""
        roll = dice.d20()
        lines = [
            f"{roll}Le dragon va réaliser un attaque special!",
            f"Lancement des dés... {roll}",
        ]
        if roll == 1:
            lines.append("")
            lines.append("FAIL!, le dragon est un bebe")
        elif roll >= 19:
            lines.append(
                "Crache du feu. C'est un attaque Critique! Dégats(x1.8) = "
                + _num(self.strength * 1.8)
            )
            max_health = hero.max_health
            hero.take_damage(self.strength * 2)
            hero.max_health = max_health - 10
            lines.append("Vous avez perdu 10 points de vie max.")
        elif roll >= 10:
            lines.append("Crache du feu! Dégats = " + _num(self.strength * 1.4))
            hero.take_damage(int(self.strength * 1.4))
        else:
            lines.append(f"Pas trop feu! Dégats(x0.7) = {self.strength}")
            hero.take_damage(self.strength)
        return "\n".join(lines) + "\n"