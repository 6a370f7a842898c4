"""Tests for the in-memory scene graph."""
import pytest

from maploader.scene_graph.models import NodeKind, SceneInstance


def _model_with_parts():
    model = SceneInstance(class_name="Model", name="Tree")
    trunk = model.add_child(SceneInstance(class_name="Part", name="Trunk"))
    trunk.add_child(SceneInstance(class_name="Attachment", name="Root"))
    leaves = model.add_child(SceneInstance(class_name="Part", name="Leaves"))
    model.primary = trunk
    return model, trunk, leaves


def test_default_name_is_class_name():
    node = SceneInstance(class_name=NodeKind.FOLDER)
    assert node.class_name == "Folder"
    assert node.name == "Folder"


def test_descendants_are_pre_order():
    model, trunk, leaves = _model_with_parts()
    names = [d.name for d in model.get_descendants()]
    assert names == ["Trunk", "Root", "Leaves"]
    assert model.descendant_count() == 3


def test_set_parent_moves_between_parents():
    a = SceneInstance(class_name="Folder", name="A")
    b = SceneInstance(class_name="Folder", name="B")
    child = a.add_child(SceneInstance(class_name="Part"))

    child.set_parent(b)

    assert a.get_children() == []
    assert b.get_children() == [child]
    assert child.parent is b


def test_set_parent_rejects_cycles():
    model, trunk, _ = _model_with_parts()
    with pytest.raises(ValueError):
        model.set_parent(trunk)


def test_is_a_walks_ancestry():
    part = SceneInstance(class_name="MeshPart")
    assert part.is_a("MeshPart")
    assert part.is_a(NodeKind.BASE_PART)
    assert part.is_a("Instance")
    assert not part.is_a("Model")

    custom = SceneInstance(class_name="SpawnLocation")
    assert custom.is_a("Instance")
    assert not custom.is_a("BasePart")


def test_clone_copies_subtree_and_remaps_primary():
    model, trunk, _ = _model_with_parts()
    model.properties["LevelOfDetail"] = {"mode": "auto"}

    dup = model.clone()

    assert dup is not model
    assert dup.parent is None
    assert dup.id != model.id
    assert [d.name for d in dup.get_descendants()] == ["Trunk", "Root", "Leaves"]
    assert dup.primary is dup.find_first_child("Trunk")
    assert dup.primary is not trunk
    dup.properties["LevelOfDetail"]["mode"] = "off"
    assert model.properties["LevelOfDetail"]["mode"] == "auto"


def test_clone_keeps_primary_outside_subtree():
    model, trunk, _ = _model_with_parts()
    trunk.primary = model  # points outside the trunk subtree
    dup = trunk.clone()
    assert dup.primary is model


def test_destroy_releases_subtree():
    parent = SceneInstance(class_name="Folder", name="Workspace")
    model, trunk, _ = _model_with_parts()
    model.set_parent(parent)

    model.destroy()

    assert parent.get_children() == []
    assert model.destroyed
    assert trunk.destroyed
    assert model.primary is None
    with pytest.raises(RuntimeError):
        model.set_parent(parent)


def test_clone_and_destroy_handle_deep_chains():
    root = SceneInstance(class_name="Folder", name="Level0")
    node = root
    for level in range(1, 1500):
        node = node.add_child(SceneInstance(class_name="Folder", name=f"Level{level}"))
    root.primary = node

    dup = root.clone()

    assert dup.descendant_count() == 1499
    assert dup.primary is dup.get_descendants()[-1]
    assert dup.primary.name == "Level1499"

    dup.destroy()

    assert dup.destroyed
    assert dup.get_children() == []
    assert root.descendant_count() == 1499
