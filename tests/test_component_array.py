import pytest

from evilpikmin.component_array import ComponentArray


def make_array(*entities):
    array = ComponentArray()
    for entity in entities:
        array.add_entity(entity, f"data-{entity}")
    return array


def test_add_and_get():
    array = make_array(5, 9)
    assert len(array) == 2
    assert array.get(5) == "data-5"
    assert array.get(9) == "data-9"
    assert 5 in array and 7 not in array


def test_index_access_matches_insertion_order():
    array = make_array(3, 4, 8)
    assert [array.entity_at(i) for i in range(len(array))] == [3, 4, 8]
    assert array.get_from_index(2) == "data-8"


def test_remove_moves_last_into_hole():
    array = make_array(1, 2, 3)
    array.remove_entity(1)
    assert len(array) == 2
    assert array.entity_at(0) == 3
    assert array.get_from_index(0) == "data-3"
    assert array.get(2) == "data-2"
    assert 1 not in array


def test_remove_last_entity():
    array = make_array(1, 2)
    array.remove_entity(2)
    assert list(array) == [(1, "data-1")]


def test_entity_destroyed_removes():
    array = make_array(4)
    array.entity_destroyed(4)
    assert len(array) == 0


def test_missing_entity_errors():
    array = make_array(1)
    with pytest.raises(KeyError):
        array.get(2)
    with pytest.raises(KeyError):
        array.remove_entity(2)


def test_duplicate_add_rejected():
    array = make_array(1)
    with pytest.raises(ValueError):
        array.add_entity(1, "again")


def test_index_out_of_range():
    array = make_array(1)
    with pytest.raises(IndexError):
        array.get_from_index(1)
    with pytest.raises(IndexError):
        array.entity_at(-1)


def test_swap_updates_mapping():
    array = make_array(10, 20)
    array.swap(0, 1)
    assert array.entity_at(0) == 20
    assert array.get(10) == "data-10"
    assert array.get_from_index(1) == "data-10"


def test_data_is_shared_not_copied():
    array = ComponentArray()
    payload = {"hp": 3}
    array.add_entity(1, payload)
    array.get(1)["hp"] = 1
    assert array.get_from_index(0)["hp"] == 1


def test_sort_with_no_swaps_keeps_order():
    array = make_array(7, 3, 9, 1)
    array.insertion_sort(lambda a, b, e1, e2, ecs: 0, None)
    assert list(array) == [(7, "data-7"), (3, "data-3"), (9, "data-9"), (1, "data-1")]


def test_sort_keeps_entities_and_mapping_consistent():
    array = make_array(7, 3, 9, 1, 4)
    array.insertion_sort(lambda a, b, e1, e2, ecs: 1, None)
    assert sorted(e for e, _ in array) == [1, 3, 4, 7, 9]
    for entity, data in array:
        assert array.get(entity) == data == f"data-{entity}"


def test_sort_of_two_never_compares():
    calls = []
    array = make_array(2, 1)

    def compare(a, b, e1, e2, ecs):
        calls.append((e1, e2))
        return 1

    array.insertion_sort(compare, None)
    assert calls == []
    assert [e for e, _ in array] == [2, 1]


def test_sort_passes_anchor_entity_and_ecs():
    seen = []
    array = make_array(1, 2, 3)
    marker = object()

    def compare(a, b, e1, e2, ecs):
        seen.append((e1, e2, ecs is marker))
        return 0

    array.insertion_sort(compare, marker)
    assert seen == [(1, 3, True)]
    assert [array.entity_at(i) for i in range(len(array))] == [1, 2, 3]


def test_describe_lists_slots():
    text = make_array(4, 6).describe()
    lines = text.splitlines()
    assert lines[0] == "Num of components: 2"
    assert lines[1] == "Component 0 (entity 4)"
    assert lines[2] == "Component 1 (entity 6)"