import pytest

from patternkit.typemap import DataA, DataB, TypeMap, main


@pytest.fixture
def filled():
    tm = TypeMap(int, DataA, float, DataB)
    tm.add_value(int, 42)
    tm.add_value(float, 3.14)
    tm.add_value(DataA, DataA("Hello, TypeMap!"))
    tm.add_value(DataB, DataB(10))
    return tm


def test_get_values(filled):
    assert filled.get_value(int) == 42
    assert filled.get_value(float) == 3.14
    assert filled.get_value(DataA).value == "Hello, TypeMap!"
    assert filled.get_value(DataB).value == 10


def test_contains(filled):
    assert filled.contains(int)
    assert not filled.contains(str)


def test_remove_then_get_raises(filled):
    count = filled.value_count
    filled.remove_value(float)
    assert filled.value_count == count - 1
    assert not filled.contains(float)
    with pytest.raises(KeyError, match="Value not found for this type"):
        filled.get_value(float)


def test_remove_keeps_other_values(filled):
    filled.remove_value(DataA)
    assert filled.get_value(int) == 42
    assert filled.get_value(float) == 3.14
    assert filled.get_value(DataB).value == 10


def test_replace_keeps_count(filled):
    count = filled.value_count
    filled.add_value(int, 7)
    assert filled.value_count == count
    assert filled.get_value(int) == 7


def test_add_unknown_type_raises(filled):
    with pytest.raises(ValueError, match="Type not in TypeList"):
        filled.add_value(str, "x")


def test_get_unknown_type_raises(filled):
    with pytest.raises(ValueError, match="Type not in TypeList"):
        filled.get_value(str)


def test_remove_unknown_type_is_ignored(filled):
    count = filled.value_count
    filled.remove_value(str)
    assert filled.value_count == count


def test_empty_map_get_raises():
    tm = TypeMap(int)
    assert tm.value_count == 0
    with pytest.raises(KeyError):
        tm.get_value(int)


def test_get_returns_same_object(filled):
    filled.get_value(DataB).value = 11
    assert filled.get_value(DataB).value == 11


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Value for int: 42"
    assert lines[1] == "Value for double: 3.14"
    assert lines[2] == "Value for DataA: Hello, TypeMap!"
    assert lines[3] == "Value for DataB: 10"
    assert lines[4] == "Contains int? Yes"
    assert lines[5] == "Size of values after removal: 3"
    assert lines[6] == "Caught exception: Value not found for this type"