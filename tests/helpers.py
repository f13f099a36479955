from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Mapping

from compendium.constants import COLLECTION_FILES, LORE_FILE

# Load order deliberately differs from id order.
DEFAULT_TABLES = {
    "characters": [
        {
            "id": 7,
            "name": "Amira",
            "level": 3,
            "class": "Pilot",
            "background": "Freighter kid",
            "attributes": {"agility": 5},
            "skill_ratings": {"pilot": 3},
            "skill_ids": [2, 5],
            "weapon_ids": [20, 10],
            "armor_ids": [1],
            "gear_ids": [3, 3],
        },
        {
            "id": 3,
            "name": "Tarek",
            "class": "Soldier",
            "skill_ids": [1],
            "weapon_ids": [10],
            "armor_ids": [],
            "gear_ids": [],
        },
        {
            "id": 5,
            "name": "Sana",
            "class": "Data Spider",
            "skill_ids": [3, 999, 1],
        },
    ],
    "skills": [
        {"id": 1, "name": "Force", "description": "Raw power.", "cost": 0},
        {"id": 2, "name": "Pilot", "description": "Fly things.", "cost": 0},
        {"id": 3, "name": "Data Djinn", "description": "Hack things.", "cost": 1},
        {"id": 5, "name": "Ranged Combat", "description": "Shoot things.", "cost": 0},
    ],
    "weapons": [
        {"id": 10, "name": "Vulcan Pistol", "damage": 2, "crit": 2, "range": "short", "cost": 400},
        {"id": 20, "name": "Dura Knife", "damage": 2, "crit": 1, "range": "close", "cost": 50},
    ],
    "armor": [
        {"id": 1, "name": "Vacuum Suit", "rating": 3, "cost": 1500},
    ],
    "gear": [
        {"id": 3, "name": "Medkit", "bonus": "+2 medicurgy", "cost": 200},
        {"id": 4, "name": "Comm Unit", "cost": 100},
    ],
}

DEFAULT_LORE = "  TITLE\n  line one\n  line two\n  line three\n"


def tables(**overrides) -> dict:
    result = copy.deepcopy(DEFAULT_TABLES)
    result.update(overrides)
    return result


def write_collection(data_dir: Path, name: str, records) -> Path:
    path = Path(data_dir) / COLLECTION_FILES[name]
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


def write_tables(data_dir: Path, collections: Mapping[str, list], lore: str | None = DEFAULT_LORE) -> Path:
    for name, records in collections.items():
        write_collection(data_dir, name, records)
    if lore is not None:
        (Path(data_dir) / LORE_FILE).write_text(lore, encoding="utf-8")
    return Path(data_dir)
