import pytest

from stlkit.dynarray import DynamicArray, SharedValue


def test_default_is_empty():
    array = DynamicArray()
    assert len(array) == 0
    assert list(array) == []
    assert array.render() == ""


def test_sized_array_holds_zeros():
    array = DynamicArray(5)
    assert len(array) == 5
    assert all(item == 0 for item in array)
    assert array.render() == "0 0 0 0 0"


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        DynamicArray(-1)


def test_non_integer_size_rejected():
    with pytest.raises(TypeError):
        DynamicArray(2.5)


def test_filled_sets_every_element():
    array = DynamicArray.filled(42, 5)
    assert len(array) == 5
    assert set(array) == {42}
    assert array[0] == 42
    assert array[4] == 42


def test_filled_rejects_negative_size():
    with pytest.raises(ValueError):
        DynamicArray.filled(42, -3)


def test_copy_is_independent_object_with_same_contents():
    original = DynamicArray.filled(42, 5)
    duplicate = original.copy()
    assert duplicate is not original
    assert list(duplicate) == list(original)
    original.assign(DynamicArray(2))
    assert list(duplicate) == [42] * 5
    assert len(original) == 2


def test_moved_from_transfers_and_empties_source():
    source = DynamicArray.filled(42, 5)
    expected = list(source)
    target = DynamicArray.moved_from(source)
    assert list(target) == expected
    assert len(source) == 0
    assert source.render() == ""


def test_assign_copies_contents():
    target = DynamicArray()
    source = DynamicArray.filled(42, 5)
    result = target.assign(source)
    assert result is target
    assert list(target) == list(source)
    assert target.render() == source.render()


def test_assign_to_self_keeps_contents():
    array = DynamicArray.filled(42, 5)
    before = list(array)
    assert array.assign(array) is array
    assert list(array) == before


def test_index_out_of_range():
    array = DynamicArray(5)
    assert array[4] == 0
    with pytest.raises(IndexError):
        array[5]
    assert len(array) == 5


def test_render_matches_elements():
    array = DynamicArray.filled(7, 3)
    assert array.render().split() == [str(item) for item in array]


def test_shallow_copy_shares_value():
    original = SharedValue(42)
    copy = original.shallow_copy()
    assert copy.value == 42
    original.value = 10
    assert copy.value == 10
    assert copy.shares_storage_with(original)


def test_deep_copy_is_independent():
    original = SharedValue(42)
    copy = original.deep_copy()
    assert copy.value == 42
    original.value = 10
    assert copy.value == 42
    assert not copy.shares_storage_with(original)


def test_deep_copy_of_shallow_copy_is_independent():
    original = SharedValue([1, 2])
    shallow = original.shallow_copy()
    deep = shallow.deep_copy()
    shallow.value = [3]
    assert original.value == [3]
    assert deep.value == [1, 2]


def test_shares_storage_with_other_types_is_false():
    assert SharedValue(1).shares_storage_with(1) is False