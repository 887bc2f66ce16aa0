"""Loading of level layouts exported as JSON scene files."""

from __future__ import annotations

import json
import math
import os

from .shapes import EulerTransform, LevelData, ObjectData
from .vector import Vector3


class LevelDataError(ValueError):
    """A level file is not a valid scene description."""


def _degrees_to_radians(value) -> float:
    return float(value) / 180 * math.pi


def _mesh_object(obj: dict) -> ObjectData:
    data = ObjectData()
    if "file_name" in obj:
        data.file_name = str(obj["file_name"])
    try:
        transform = obj["transform"]
        t = transform["translation"]
        r = transform["rotation"]
        s = transform["scaling"]
        # The exporter uses a Z-up, right-handed frame; swap to Y-up, left-handed.
        data.transform = EulerTransform(
            scale=Vector3(float(s[0]), float(s[2]), float(s[1])),
            rotation=Vector3(
                -_degrees_to_radians(r[0]),
                -_degrees_to_radians(r[2]),
                -_degrees_to_radians(r[1]),
            ),
            translation=Vector3(-float(t[0]), float(t[2]), -float(t[1])),
        )
    except (KeyError, IndexError, TypeError, ValueError) as error:
        raise LevelDataError(f"invalid transform: {error}") from error
    return data


def load_level_data(
    base_directory: str | os.PathLike, file_name: str, extension: str
) -> LevelData:
    """Read ``base_directory + file_name + extension`` into a LevelData.

    Only ``MESH`` objects are kept. Raises LevelDataError for a file that is
    not a scene description.
    """
    full_path = os.fspath(base_directory) + file_name + extension
    with open(full_path, encoding="utf-8") as stream:
        try:
            document = json.load(stream)
        except json.JSONDecodeError as error:
            raise LevelDataError(f"not valid JSON: {error}") from error

    if not isinstance(document, dict):
        raise LevelDataError("top level is not an object")
    name = document.get("name")
    if not isinstance(name, str):
        raise LevelDataError("missing string field 'name'")
    if name != "scene":
        raise LevelDataError(f"unexpected name {name!r}")

    objects = document.get("objects")
    if objects is None:
        objects = []
    if not isinstance(objects, list):
        raise LevelDataError("'objects' is not a list")

    level = LevelData()
    for obj in objects:
        if not isinstance(obj, dict) or "type" not in obj:
            raise LevelDataError("object without 'type'")
        if not isinstance(obj["type"], str):
            raise LevelDataError("object 'type' is not a string")
        if obj["type"] == "MESH":
            level.objects.append(_mesh_object(obj))
    return level