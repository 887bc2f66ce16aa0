"""Named groups of tunable values that can be saved to and loaded from JSON."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Union

from .vector import Vector3

Item = Union[int, float, Vector3, bool]

DEFAULT_DIRECTORY = Path("Resources/GlobalVariables")
_EXTENSION = ".json"


def _normalise(value: object) -> Item:
    """Return ``value`` as one of the supported item types."""
    if isinstance(value, bool):
        return bool(value)
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        return float(value)
    if isinstance(value, Vector3):
        return value
    raise TypeError(f"unsupported item type {type(value).__name__}")


def _to_json(value: Item):
    if isinstance(value, Vector3):
        return [value.x, value.y, value.z]
    return value


def _from_json(value) -> Item | None:
    """Convert a JSON value to an item, or None if it is not one."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value
    if isinstance(value, list) and len(value) == 3:
        return Vector3(*(float(component) for component in value))
    return None


class GlobalVariables:
    """Groups of named int, float, Vector3 and bool values.

    Each group is stored in its own ``<group>.json`` file in ``directory``.
    """

    def __init__(self, directory: str | Path = DEFAULT_DIRECTORY) -> None:
        self.directory = Path(directory)
        self._groups: dict[str, dict[str, Item]] = {}

    @property
    def groups(self) -> dict[str, dict[str, Item]]:
        """A copy of all groups and their items."""
        return {name: dict(items) for name, items in self._groups.items()}

    def create_group(self, group_name: str) -> None:
        """Create an empty group unless it already exists."""
        self._groups.setdefault(group_name, {})

    def set_value(self, group_name: str, key: str, value: Item) -> None:
        """Store ``value`` under ``key``, creating the group if needed."""
        self._groups.setdefault(group_name, {})[key] = _normalise(value)

    def add_item(self, group_name: str, key: str, value: Item) -> None:
        """Store ``value`` only if ``key`` is not yet in the existing group."""
        group = self._group(group_name)
        if key not in group:
            self.set_value(group_name, key, value)

    def _path(self, group_name: str) -> Path:
        return self.directory / f"{group_name}{_EXTENSION}"

    def save_file(self, group_name: str) -> Path:
        """Write a group to its JSON file and return the file's path."""
        group = self._group(group_name)
        root = {
            group_name: {key: _to_json(value) for key, value in group.items()}
        }
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self._path(group_name)
        path.write_text(json.dumps(root, indent=4, sort_keys=True) + "\n", encoding="utf-8")
        return path

    def load_files(self) -> None:
        """Load every ``.json`` file in the directory; a missing directory is skipped."""
        if not self.directory.exists():
            return
        for path in sorted(self.directory.iterdir()):
            if path.suffix == _EXTENSION and path.is_file():
                self.load_file(path.stem)

    def load_file(self, group_name: str) -> None:
        """Load a group from its JSON file, overwriting values already set.

        Raises KeyError if the file holds no entry for the group.
        """
        with self._path(group_name).open(encoding="utf-8") as stream:
            root = json.load(stream)
        if not isinstance(root, dict) or not isinstance(root.get(group_name), dict):
            raise KeyError(f"file for {group_name!r} holds no such group")
        for key, raw in root[group_name].items():
            value = _from_json(raw)
            if value is not None:
                self.set_value(group_name, key, value)

    def _group(self, group_name: str) -> dict[str, Item]:
        try:
            return self._groups[group_name]
        except KeyError:
            raise KeyError(f"unknown group {group_name!r}") from None

    def _get(self, group_name: str, key: str, kind: type) -> Item:
        group = self._group(group_name)
        try:
            value = group[key]
        except KeyError:
            raise KeyError(f"unknown item {key!r} in group {group_name!r}") from None
        if type(value) is not kind:
            raise TypeError(
                f"item {key!r} holds {type(value).__name__}, not {kind.__name__}"
            )
        return value

    def get_int_value(self, group_name: str, key: str) -> int:
        return self._get(group_name, key, int)

    def get_float_value(self, group_name: str, key: str) -> float:
        return self._get(group_name, key, float)

    def get_vector3_value(self, group_name: str, key: str) -> Vector3:
        return self._get(group_name, key, Vector3)

    def get_bool_value(self, group_name: str, key: str) -> bool:
        return self._get(group_name, key, bool)