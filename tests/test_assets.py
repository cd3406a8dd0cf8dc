import json
from concurrent.futures import Future

import pytest

from game.assets import AssetBarrier, AssetLoadError, AssetLoader, parse_node, read_asset
from game.bounds import bounding_volume_of
from game.config import AVATAR_ASSET, HOUSE_ASSET
from game.scene import SceneNode, build_name_index


def _write(tmp_path, name, data):
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_parse_node_builds_tree_with_meshes():
    node = parse_node(
        {
            "name": "Hut",
            "position": [1, 0, 0],
            "children": [
                {"name": "Door", "mesh": {"type": "box", "size": [1, 2, 0.1]}},
                {"name": "Ray", "mesh": {"type": "line", "length": 5}},
            ],
        }
    )
    assert node.name == "Hut"
    assert [child.name for child in node.children] == ["Door", "Ray"]
    assert node.children[0].parent is node
    assert node.children[1].mesh.vertices[1] == (0.0, 0.0, -5.0)
    assert node.transform.position.tolist() == [1.0, 0.0, 0.0]


def test_parse_node_rejects_unknown_mesh_type():
    with pytest.raises(ValueError):
        parse_node({"mesh": {"type": "teapot"}})


def test_parse_node_rejects_short_vectors():
    with pytest.raises(ValueError):
        parse_node({"position": [1, 2]})


def test_loader_returns_future_of_scene(tmp_path):
    path = _write(tmp_path, "hut.json", {"name": "Hut", "mesh": {"type": "box", "size": [2, 2, 2]}})
    loader = AssetLoader()
    try:
        node = loader.load(path).result(timeout=5)
    finally:
        loader.shutdown()
    assert isinstance(node, SceneNode)
    assert bounding_volume_of(node).size.tolist() == [2.0, 2.0, 2.0]


def test_missing_asset_raises_from_future(tmp_path):
    loader = AssetLoader()
    try:
        future = loader.load(str(tmp_path / "nope.json"))
        with pytest.raises(AssetLoadError):
            future.result(timeout=5)
    finally:
        loader.shutdown()


def test_malformed_asset_raises(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(AssetLoadError):
        read_asset(str(path))


def test_barrier_waits_for_both_loads_in_any_order():
    house_future, avatar_future = Future(), Future()
    barrier = AssetBarrier(house_future, avatar_future)
    house, avatar = SceneNode(name="House"), SceneNode(name="Walker")

    assert not barrier.ready()
    avatar_future.set_result(avatar)
    assert not barrier.ready()
    house_future.set_result(house)
    assert barrier.ready()
    assert barrier.result() == (house, avatar)


def test_barrier_propagates_load_failure():
    house_future, avatar_future = Future(), Future()
    house_future.set_exception(AssetLoadError("Asset not found: old_house.json"))
    avatar_future.set_result(SceneNode(name="Walker"))
    barrier = AssetBarrier(house_future, avatar_future)
    assert barrier.ready()
    with pytest.raises(AssetLoadError):
        barrier.result()


def test_default_assets_have_a_door():
    house = read_asset(HOUSE_ASSET)
    avatar = read_asset(AVATAR_ASSET)
    assert "Door" in build_name_index(house)
    assert avatar.mesh is not None


def test_name_index_last_duplicate_wins():
    root = SceneNode(name="root")
    first = root.add(SceneNode(name="Door"))
    second = root.add(SceneNode(name="Door"))
    root.add(SceneNode())
    index = build_name_index(root)
    assert index["Door"] is second
    assert index["Door"] is not first
    assert "" not in index


def test_unreadable_asset_path_raises_asset_error(tmp_path):
    with pytest.raises(AssetLoadError, match="Cannot read asset"):
        read_asset(str(tmp_path))


def test_missing_asset_names_the_path(tmp_path):
    missing = str(tmp_path / "nope.json")
    with pytest.raises(AssetLoadError, match="Asset not found") as excinfo:
        read_asset(missing)
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_default_door_world_position_includes_house_offset():
    house = read_asset(HOUSE_ASSET)
    door = build_name_index(house)["Door"]
    assert door.transform.position.tolist() == [0.5, 0.0, -4.0]
    assert door.world_position().tolist() == pytest.approx([0.5, 0.0, -2.0])
