"""Load compendium tables from JSON files."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, Tuple

from compendium.components.character import Character
from compendium.components.equipment import Armor, Gear, Weapon
from compendium.components.skill import Skill
from compendium.constants import COLLECTION_FILES, LORE_FILE
from compendium.data_access.errors import DataMalformed, DataUnavailable
from compendium.utils.logger import get_logger

logger = get_logger(__name__)


class _RecordError(ValueError):
    pass


def _require_int(entry: dict, key: str, default: int | None = None) -> int:
    value = entry.get(key, default)
    # bool is an int subclass but never a valid id or stat.
    if isinstance(value, bool) or not isinstance(value, int):
        raise _RecordError(f"field '{key}' must be an integer, got {value!r}")
    return value


def _require_str(entry: dict, key: str, default: str | None = None) -> str:
    value = entry.get(key, default)
    if not isinstance(value, str):
        raise _RecordError(f"field '{key}' must be a string, got {value!r}")
    return value


def _id_list(entry: dict, key: str) -> Tuple[int, ...]:
    values = entry.get(key, [])
    if not isinstance(values, list):
        raise _RecordError(f"field '{key}' must be a list of ids")
    for value in values:
        if isinstance(value, bool) or not isinstance(value, int):
            raise _RecordError(f"field '{key}' contains non-integer id {value!r}")
    return tuple(values)


def _int_block(entry: dict, key: str) -> Dict[str, int]:
    block = entry.get(key, {})
    if not isinstance(block, dict):
        raise _RecordError(f"field '{key}' must be an object")
    result: Dict[str, int] = {}
    for name, value in block.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise _RecordError(f"field '{key}.{name}' must be an integer")
        result[str(name)] = value
    return result


def _parse_character(entry: dict) -> Character:
    return Character(
        id=_require_int(entry, "id"),
        name=_require_str(entry, "name"),
        level=_require_int(entry, "level", 1),
        character_class=_require_str(entry, "class", ""),
        background=_require_str(entry, "background", ""),
        attributes=_int_block(entry, "attributes"),
        skill_ratings=_int_block(entry, "skill_ratings"),
        skill_ids=_id_list(entry, "skill_ids"),
        weapon_ids=_id_list(entry, "weapon_ids"),
        armor_ids=_id_list(entry, "armor_ids"),
        gear_ids=_id_list(entry, "gear_ids"),
    )


def _parse_skill(entry: dict) -> Skill:
    attribute = entry.get("attribute")
    if attribute is not None and not isinstance(attribute, str):
        raise _RecordError("field 'attribute' must be a string")
    return Skill(
        id=_require_int(entry, "id"),
        name=_require_str(entry, "name"),
        description=_require_str(entry, "description", ""),
        cost=_require_int(entry, "cost", 0),
        attribute=attribute,
    )


def _parse_weapon(entry: dict) -> Weapon:
    return Weapon(
        id=_require_int(entry, "id"),
        name=_require_str(entry, "name"),
        description=_require_str(entry, "description", ""),
        damage=_require_int(entry, "damage", 0),
        crit=_require_int(entry, "crit", 0),
        range=_require_str(entry, "range", ""),
        cost=_require_int(entry, "cost", 0),
    )


def _parse_armor(entry: dict) -> Armor:
    return Armor(
        id=_require_int(entry, "id"),
        name=_require_str(entry, "name"),
        description=_require_str(entry, "description", ""),
        rating=_require_int(entry, "rating", 0),
        cost=_require_int(entry, "cost", 0),
    )


def _parse_gear(entry: dict) -> Gear:
    return Gear(
        id=_require_int(entry, "id"),
        name=_require_str(entry, "name"),
        description=_require_str(entry, "description", ""),
        bonus=_require_str(entry, "bonus", ""),
        cost=_require_int(entry, "cost", 0),
    )


_PARSERS: Dict[str, Callable[[dict], Any]] = {
    "characters": _parse_character,
    "skills": _parse_skill,
    "weapons": _parse_weapon,
    "armor": _parse_armor,
    "gear": _parse_gear,
}


class EntityStore:
    """Read-only access to the collections in a data directory.

    Every call goes back to disk; nothing is cached between calls.
    """

    def __init__(self, data_dir: Path | str) -> None:
        self._data_dir = Path(data_dir)

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def path_for(self, collection: str) -> Path:
        try:
            filename = COLLECTION_FILES[collection]
        except KeyError:
            raise ValueError(f"Unknown collection: {collection}") from None
        return self._data_dir / filename

    def load(self, collection: str) -> tuple:
        """Return the records of ``collection`` in file order."""

        path = self.path_for(collection)
        payload = self._read_json(collection, path)
        if not isinstance(payload, list):
            raise DataMalformed(collection, path, "top level must be a list of records")

        parse = _PARSERS[collection]
        records = []
        seen_ids: set[int] = set()
        for position, entry in enumerate(payload):
            if not isinstance(entry, dict):
                raise DataMalformed(collection, path, f"record {position} is not an object")
            try:
                record = parse(entry)
            except _RecordError as exc:
                raise DataMalformed(collection, path, f"record {position}: {exc}") from exc
            if record.id in seen_ids:
                raise DataMalformed(collection, path, f"duplicate id {record.id}")
            seen_ids.add(record.id)
            records.append(record)
        logger.debug("Loaded %d %s from %s", len(records), collection, path)
        return tuple(records)

    def load_text(self, name: str = "lore") -> str:
        """Return a narrative text file; only ``lore`` is defined."""

        if name != "lore":
            raise ValueError(f"Unknown text resource: {name}")
        path = self._data_dir / LORE_FILE
        try:
            with path.open("r", encoding="utf-8") as handle:
                return handle.read()
        except FileNotFoundError as exc:
            raise DataUnavailable(name, path, "file not found") from exc
        except UnicodeDecodeError as exc:
            raise DataMalformed(name, path, "not valid UTF-8 text") from exc
        except OSError as exc:
            raise DataUnavailable(name, path, exc.strerror or str(exc)) from exc

    @staticmethod
    def _read_json(collection: str, path: Path) -> Any:
        try:
            with path.open("r", encoding="utf-8") as handle:
                return json.load(handle)
        except FileNotFoundError as exc:
            raise DataUnavailable(collection, path, "file not found") from exc
        except json.JSONDecodeError as exc:
            raise DataMalformed(collection, path, f"invalid JSON: {exc.msg} at line {exc.lineno}") from exc
        except UnicodeDecodeError as exc:
            raise DataMalformed(collection, path, "not valid UTF-8 text") from exc
        except OSError as exc:
            raise DataUnavailable(collection, path, exc.strerror or str(exc)) from exc
