"""Emoji used to draw heroes, enemies, items and the map."""

WARRIOR = "🧝🏻"
MAGE = "🧙🏻"
THIEF = "🧑🏻‍🌾"
GOBLIN = "🧟"
ORC = "🧌\u200b"
DRAGON = "🐲\u200b"
GOLD = "💰"
POTION = "🧪"
SWORD = "🗡️"
SCROLL = "📜\u200b"
SHIELD = "🛡️\u200b"
ISLAND = "🏝️\u200b"
OCEAN = "🌊\u200b"
HIDDEN = "⬛"
WATER = "🟦"
COIN = "🪙"
CHEST = "📦"