import json

import pytest

from ykengine.global_variables import GlobalVariables
from ykengine.vector import Vector3


@pytest.fixture
def gv(tmp_path):
    return GlobalVariables(tmp_path / "vars")


def test_set_and_get_each_type(gv):
    gv.set_value("Player", "hp", 10)
    gv.set_value("Player", "speed", 0.25)
    gv.set_value("Player", "offset", Vector3(1.0, 2.0, 3.0))
    gv.set_value("Player", "visible", True)
    assert gv.get_int_value("Player", "hp") == 10
    assert gv.get_float_value("Player", "speed") == 0.25
    assert gv.get_vector3_value("Player", "offset") == Vector3(1.0, 2.0, 3.0)
    assert gv.get_bool_value("Player", "visible") is True


def test_bool_is_not_int(gv):
    gv.set_value("G", "flag", False)
    with pytest.raises(TypeError):
        gv.get_int_value("G", "flag")


def test_wrong_type_raises(gv):
    gv.set_value("G", "hp", 3)
    with pytest.raises(TypeError):
        gv.get_float_value("G", "hp")


def test_unsupported_value_type(gv):
    with pytest.raises(TypeError):
        gv.set_value("G", "name", "text")


def test_missing_group_and_key(gv):
    with pytest.raises(KeyError):
        gv.get_int_value("Nope", "x")
    gv.create_group("G")
    with pytest.raises(KeyError):
        gv.get_int_value("G", "x")


def test_create_group_keeps_existing(gv):
    gv.set_value("G", "a", 1)
    gv.create_group("G")
    assert gv.groups == {"G": {"a": 1}}


def test_add_item_does_not_overwrite(gv):
    gv.create_group("G")
    gv.add_item("G", "a", 1)
    gv.add_item("G", "a", 2)
    assert gv.get_int_value("G", "a") == 1


def test_add_item_requires_group(gv):
    with pytest.raises(KeyError):
        gv.add_item("Missing", "a", 1)


def test_save_file_writes_group_object(gv):
    gv.set_value("Colliders", "isDrawCollider", True)
    gv.set_value("Colliders", "pos", Vector3(1.5, 0.0, -2.0))
    path = gv.save_file("Colliders")
    assert path == gv.directory / "Colliders.json"
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data == {"Colliders": {"isDrawCollider": True, "pos": [1.5, 0.0, -2.0]}}
    assert path.read_text(encoding="utf-8").endswith("\n")


def test_save_missing_group_raises(gv):
    with pytest.raises(KeyError):
        gv.save_file("Missing")


def test_round_trip_through_files(gv):
    gv.set_value("G", "i", 7)
    gv.set_value("G", "f", 2.0)
    gv.set_value("G", "v", Vector3(0.5, -1.0, 4.0))
    gv.set_value("G", "b", False)
    gv.save_file("G")

    other = GlobalVariables(gv.directory)
    other.load_files()
    assert other.groups == gv.groups
    assert other.get_float_value("G", "f") == 2.0
    assert other.get_int_value("G", "i") == 7


def test_load_overwrites_existing_value(gv):
    gv.set_value("G", "i", 7)
    gv.save_file("G")
    gv.set_value("G", "i", 8)
    gv.load_file("G")
    assert gv.get_int_value("G", "i") == 7


def test_load_files_skips_other_extensions(gv):
    gv.directory.mkdir(parents=True)
    (gv.directory / "notes.txt").write_text("{}", encoding="utf-8")
    (gv.directory / "A.json").write_text(json.dumps({"A": {"x": 1}}), encoding="utf-8")
    gv.load_files()
    assert gv.groups == {"A": {"x": 1}}


def test_load_files_without_directory_is_noop(gv):
    gv.load_files()
    assert gv.groups == {}


def test_load_file_without_group_entry(gv):
    gv.directory.mkdir(parents=True)
    (gv.directory / "A.json").write_text(json.dumps({"B": {}}), encoding="utf-8")
    with pytest.raises(KeyError):
        gv.load_file("A")


def test_load_file_ignores_unsupported_items(gv):
    gv.directory.mkdir(parents=True)
    content = {"A": {"s": "text", "pair": [1, 2], "n": 3}}
    (gv.directory / "A.json").write_text(json.dumps(content), encoding="utf-8")
    gv.load_file("A")
    assert gv.groups == {"A": {"n": 3}}


def test_load_missing_file_raises(gv):
    with pytest.raises(FileNotFoundError):
        gv.load_file("Absent")