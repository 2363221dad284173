import pytest

from evilpikmin.component_array import ComponentArray
from evilpikmin.component_manager import ComponentManager
from evilpikmin.components import CompSig, Position, Transform
from evilpikmin.config import MAX_COMPONENTS


@pytest.fixture
def manager():
    cm = ComponentManager()
    cm.add_component(Position, CompSig.POSITION)
    cm.add_component(Transform, CompSig.TRANSFORM)
    return cm


def test_registered_type_has_array(manager):
    array = manager.component_array(Position)
    assert isinstance(array, ComponentArray)
    assert len(array) == 0
    assert manager.component_array(Position) is array


def test_signature_index_round_trip(manager):
    assert manager.signature_index(Transform) == CompSig.TRANSFORM
    assert manager.type_from_index(CompSig.POSITION) is Position


def test_component_data(manager):
    pos = Position(1.0, 2.0)
    manager.component_array(Position).add_entity(4, pos)
    assert manager.component_data(Position, 4) is pos


def test_duplicate_index_rejected(manager):
    class Other:
        pass

    with pytest.raises(ValueError):
        manager.add_component(Other, CompSig.POSITION)


def test_duplicate_type_rejected(manager):
    with pytest.raises(ValueError):
        manager.add_component(Position, CompSig.VISIBLE)


def test_index_out_of_range():
    with pytest.raises(ValueError):
        ComponentManager().add_component(Position, MAX_COMPONENTS)


def test_unregistered_lookups_fail(manager):
    class Unknown:
        pass

    with pytest.raises(KeyError):
        manager.component_array(Unknown)
    with pytest.raises(KeyError):
        manager.type_from_index(CompSig.VISIBLE)


def test_entity_removed_follows_signature(manager):
    manager.component_array(Position).add_entity(1, Position(0, 0))
    manager.component_array(Transform).add_entity(1, Transform())
    manager.entity_removed(1, 1 << CompSig.POSITION)
    assert 1 not in manager.component_array(Position)
    assert 1 in manager.component_array(Transform)