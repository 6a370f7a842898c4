"""Tests for the shared atomic/composite classifier."""
from maploader.incremental_clone.classifier import has_primary, is_atomic, is_grouping
from maploader.incremental_clone.models import AtomicityPolicy, LoaderConfig
from maploader.scene_graph.models import SceneInstance

GROUPING = LoaderConfig(policy=AtomicityPolicy.GROUPING_AWARE)


def _node(class_name, *children, name=""):
    node = SceneInstance(class_name=class_name, name=name)
    for child in children:
        node.add_child(child)
    return node


def test_leaves_are_atomic_under_both_policies():
    leaf = _node("Part")
    assert is_atomic(leaf, GROUPING)
    assert is_atomic(leaf, LoaderConfig(policy=AtomicityPolicy.THRESHOLD, descendant_threshold=0))


def test_model_with_primary_is_atomic():
    trunk = _node("Part", name="Trunk")
    model = _node("Model", trunk, _node("Part"))
    assert not is_atomic(model, GROUPING)

    model.primary = trunk
    assert has_primary(model)
    assert is_atomic(model, GROUPING)


def test_folder_with_children_is_composite():
    folder = _node("Folder", _node("Part"))
    assert is_grouping(folder) is False
    assert not is_atomic(folder, GROUPING)


def test_primary_on_non_grouping_kind_is_ignored():
    child = _node("Part")
    folder = _node("Folder", child)
    folder.primary = child
    assert not has_primary(folder)
    assert not is_atomic(folder, GROUPING)


def test_base_parts_with_children_follow_flag():
    part = _node("MeshPart", _node("Attachment"), _node("Decal"))
    assert not is_atomic(part, GROUPING)
    assert is_atomic(part, LoaderConfig(policy=AtomicityPolicy.GROUPING_AWARE, atomic_base_parts=True))


def test_threshold_policy_uses_descendant_count():
    folder = _node("Folder", _node("Part"), _node("Part", _node("Attachment")))
    assert folder.descendant_count() == 3

    assert is_atomic(folder, LoaderConfig(descendant_threshold=3))
    assert not is_atomic(folder, LoaderConfig(descendant_threshold=2))


def test_threshold_policy_ignores_primary():
    trunk = _node("Part")
    model = _node("Model", trunk, _node("Part"), _node("Part"))
    model.primary = trunk
    assert not is_atomic(model, LoaderConfig(descendant_threshold=1))
