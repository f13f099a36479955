from pathlib import Path

APP_TITLE = "Third Horizon Compendium"
FOOTER_TEXT = "Third Horizon Compendium - read-only character viewer"

# Data directory defaults to ./data beside the project root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[2] / "data"
COLLECTION_FILES = {
    "characters": "characters.json",
    "skills": "skills.json",
    "weapons": "weapons.json",
    "armor": "armor.json",
    "gear": "gear.json",
}
COLLECTION_NAMES = tuple(COLLECTION_FILES)
LORE_FILE = "lore.txt"

# Input sampling: tick interval and idle wait between key polls, in milliseconds.
TICK_RATE_MS = 200
KEY_POLL_MS = 10

DEFAULT_LOG_FILE = "compendium.log"

# Menu bar labels; the first letter of each is its hotkey.
MENU_TITLES = ("Home", "Character", "Skills", "Items", "Lore", "Quit")

KEY_QUIT = "q"
KEY_HOME = "h"
KEY_CHARACTER = "c"
KEY_SKILLS = "s"
KEY_ITEMS = "i"
KEY_LORE = "l"
# vi-style aliases for up/down.
KEY_UP_ALIAS = "k"
KEY_DOWN_ALIAS = "j"
