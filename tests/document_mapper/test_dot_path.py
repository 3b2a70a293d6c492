"""Tests for dotted-path access."""

from bson import ObjectId

from document_mapper import dot_path
from document_mapper.dot_path import MISSING


class TestGet:
    """Test cases for dot_path.get."""

    def test_get_top_level(self):
        """Should read a top-level key."""
        assert dot_path.get("name", {"name": "Tom"}) == "Tom"

    def test_get_nested(self):
        """Should walk nested mappings."""
        obj = {"profile": {"address": {"city": "Paris"}}}
        assert dot_path.get("profile.address.city", obj) == "Paris"

    def test_get_missing_path(self):
        """Should return MISSING instead of raising."""
        obj = {"profile": {"age": 3}}
        assert dot_path.get("profile.name", obj) is MISSING
        assert dot_path.get("other.name", obj) is MISSING

    def test_get_through_non_mapping(self):
        """Should return MISSING when an intermediate value is not a mapping."""
        assert dot_path.get("profile.age", {"profile": "flat"}) is MISSING

    def test_get_none_is_not_missing(self):
        """Should distinguish explicit None from an absent key."""
        assert dot_path.get("name", {"name": None}) is None


class TestSet:
    """Test cases for dot_path.set."""

    def test_set_creates_intermediates(self):
        """Should create intermediate dicts."""
        obj = {}
        dot_path.set("profile.address.city", "Rome", obj)
        assert obj == {"profile": {"address": {"city": "Rome"}}}

    def test_set_keeps_siblings(self):
        """Should not touch sibling keys."""
        obj = {"profile": {"age": 3}}
        dot_path.set("profile.name", "Tom", obj)
        assert obj == {"profile": {"age": 3, "name": "Tom"}}

    def test_set_overwrites_non_mapping_intermediate(self):
        """Should overwrite scalar intermediates silently."""
        obj = {"profile": 7}
        dot_path.set("profile.age", 3, obj)
        assert obj == {"profile": {"age": 3}}


class TestRemove:
    """Test cases for dot_path.remove."""

    def test_remove_leaf(self):
        """Should delete the leaf and return it."""
        obj = {"profile": {"age": 3, "name": "Tom"}}
        assert dot_path.remove("profile.age", obj) == 3
        assert obj == {"profile": {"name": "Tom"}}

    def test_remove_keeps_empty_parent(self):
        """Should leave emptied containers in place."""
        obj = {"profile": {"age": 3}}
        dot_path.remove("profile.age", obj)
        assert obj == {"profile": {}}

    def test_remove_missing(self):
        """Should return MISSING and change nothing for absent paths."""
        obj = {"profile": {"age": 3}}
        assert dot_path.remove("profile.name", obj) is MISSING
        assert dot_path.remove("other.name", obj) is MISSING
        assert obj == {"profile": {"age": 3}}


class TestFlatten:
    """Test cases for dot_path.flatten."""

    def test_flatten_nested(self):
        """Should map leaves to dotted paths."""
        obj = {"name": "Tom", "profile": {"age": 3, "address": {"city": "Oslo"}}}
        assert dot_path.flatten(obj) == {"name": "Tom", "profile.age": 3, "profile.address.city": "Oslo"}

    def test_flatten_leaves(self):
        """Should keep lists, empty dicts and scalars as leaves."""
        oid = ObjectId()
        obj = {"tags": ["a", "b"], "meta": {}, "_id": oid, "nothing": None}
        assert dot_path.flatten(obj) == {"tags": ["a", "b"], "meta": {}, "_id": oid, "nothing": None}

    def test_flatten_then_set_round_trip(self):
        """Setting every flattened leaf should rebuild the structure."""
        obj = {"a": {"b": {"c": 1}, "d": 2}, "e": 3}
        rebuilt = {}
        for path, value in dot_path.flatten(obj).items():
            dot_path.set(path, value, rebuilt)
        assert rebuilt == obj


def test_missing_is_falsy_singleton():
    """MISSING should be a falsy singleton that survives copying."""
    import copy

    assert not MISSING
    assert copy.deepcopy(MISSING) is MISSING
    assert repr(MISSING) == "MISSING"
