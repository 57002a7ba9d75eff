import gc

import pytest

from registrar import BaseChild, ChildClosed, InvalidArgument, Registry


def test_child_knows_its_key_and_parent(registry):
    child = registry.create("c", "mock.child")

    assert child.get_key() == "c"
    assert child.key == "c"
    assert child.get_parent() is registry
    assert not child.closed


# -------------------------------------------------
# Child-initiated close
# -------------------------------------------------

def test_child_close_removes_it_from_registry(registry):
    registry.create("a", "mock.child")
    child = registry.create("b", "mock.child")

    child.close()

    assert child.closed
    assert not registry.contains_child("b")
    assert registry.get_child_count() == 1


def test_child_close_twice_raises(registry):
    child = registry.create("c", "mock.child")
    child.close()

    with pytest.raises(ChildClosed):
        child.close()


def test_closed_child_hides_parent_but_keeps_key(registry):
    child = registry.create("c", "mock.child")
    child.close()

    with pytest.raises(ChildClosed):
        child.get_parent()
    assert child.get_key() == "c"


# -------------------------------------------------
# Registry-initiated close
# -------------------------------------------------

def test_child_closed_by_registry_cannot_close_again(registry):
    child = registry.create("c", "mock.child")
    registry.close_child("c")

    with pytest.raises(ChildClosed):
        child.close()
    with pytest.raises(ChildClosed):
        child.close_without_remove()


def test_close_without_remove_never_calls_back_into_registry(registry):
    child = registry.create("c", "mock.child")

    child.close_without_remove()

    assert child.closed
    assert registry.contains_child("c")


def test_child_outliving_its_registry_closes_quietly(types):
    registry = Registry(types=types)
    child = registry.create("c", "mock.child")

    del registry
    gc.collect()

    with pytest.raises(ChildClosed):
        child.get_parent()

    child.close()
    assert child.closed


# -------------------------------------------------
# initialize
# -------------------------------------------------

def test_initialize_rejects_missing_parent(mock_child_cls):
    with pytest.raises(InvalidArgument):
        mock_child_cls().initialize(None, "k")


@pytest.mark.parametrize("key", [None, "", "  "])
def test_initialize_rejects_invalid_key(registry, mock_child_cls, key):
    with pytest.raises(InvalidArgument):
        mock_child_cls().initialize(registry, key)


def test_initialize_only_once(registry):
    child = registry.create("c", "mock.child")

    with pytest.raises(AssertionError):
        child.initialize(registry, "again")


# -------------------------------------------------
# Identity
# -------------------------------------------------

def test_children_with_same_key_and_type_are_equal(types):
    first = Registry(types=types).create("same", "mock.child")
    second = Registry(types=types).create("same", "mock.child")

    assert first is not second
    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1


def test_equality_survives_close(types):
    registry = Registry(types=types)
    first = registry.create("same", "mock.child")
    second = Registry(types=types).create("same", "mock.child")

    first.close()

    assert first == second


def test_children_of_different_types_are_not_equal(types):
    first = Registry(types=types).create("same", "mock.child")
    second = Registry(types=types).create("same", "mock.other_child")

    assert first != second


def test_children_with_different_keys_are_not_equal(registry):
    assert registry.create("a", "mock.child") != registry.create("b", "mock.child")


def test_repr_reports_key_and_state(registry):
    child = registry.create("c", "mock.child")

    assert repr(child) == "MockChild(key='c', closed=False)"


def test_base_child_is_usable_directly(registry):
    registry.register_type("base", BaseChild)

    child = registry.create("b", "base")

    assert type(child) is BaseChild


def test_is_initialized_tracks_binding(registry, mock_child_cls):
    fresh = mock_child_cls()
    assert not fresh.is_initialized()

    child = registry.create("c", "mock.child")
    child.close()

    # Stays bound to its key after close
    assert child.is_initialized()
