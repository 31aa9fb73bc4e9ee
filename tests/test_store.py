"""Tests for the value model and fact store merge."""

import pytest

from shadow_build.consts import BRANCH, COMMIT_HASH, PKG_VERSION
from shadow_build.models import ConstType, ConstVal
from shadow_build.store import FactStore, merge


class TestConstVal:
    """Test ConstVal and ConstType."""

    def test_new_is_plain_string(self):
        val = ConstVal.new("display current branch", "main")
        assert val.t is ConstType.STR
        assert val.rendered == "main"

    def test_new_opt_renders_empty(self):
        val = ConstVal.new_opt("lock file", "[[package]]\nname = \"x\"")
        assert val.t is ConstType.OPT_STR
        assert val.v.startswith("[[package]]")
        assert val.rendered == ""

    def test_frozen(self):
        val = ConstVal.new("desc", "v")
        with pytest.raises(AttributeError):
            val.v = "other"

    @pytest.mark.parametrize("value", ["", "x", "multi\nline"])
    def test_opt_str_always_empty(self, value):
        assert ConstType.OPT_STR.render_value(value) == ""


class TestMerge:
    """Test merge function."""

    def test_later_fragment_wins(self):
        store = merge([
            {"BRANCH": ConstVal.new("branch", "main")},
            {"BRANCH": ConstVal.new("branch", "release")},
        ])
        assert store["BRANCH"].v == "release"
        assert len(store) == 1

    def test_disjoint_fragments(self):
        store = merge([
            {BRANCH: ConstVal.new("b", "main")},
            {PKG_VERSION: ConstVal.new("v", "1.0.0")},
        ])
        assert list(store) == [BRANCH, PKG_VERSION]

    def test_idempotent(self):
        fragment = {
            BRANCH: ConstVal.new("b", "main"),
            COMMIT_HASH: ConstVal.new("c", "abc"),
        }
        once = merge([fragment])
        twice = merge([fragment, fragment])
        assert dict(once) == dict(twice)

    def test_empty(self):
        store = merge([])
        assert len(store) == 0

    def test_fragments_not_mutated(self):
        first = {BRANCH: ConstVal.new("b", "main")}
        merge([first, {BRANCH: ConstVal.new("b", "dev")}])
        assert first[BRANCH].v == "main"


class TestFactStore:
    """Test FactStore mapping."""

    def test_value(self):
        store = FactStore({BRANCH: ConstVal.new("b", "main")})
        assert store.value(BRANCH) == "main"
        assert store.value(COMMIT_HASH) == ""

    def test_without(self):
        store = FactStore({
            BRANCH: ConstVal.new("b", "main"),
            COMMIT_HASH: ConstVal.new("c", "abc"),
        })
        trimmed = store.without(["BRANCH"])
        assert list(trimmed) == [COMMIT_HASH]
        assert BRANCH in store

    def test_read_only(self):
        store = FactStore({BRANCH: ConstVal.new("b", "main")})
        with pytest.raises(TypeError):
            store[BRANCH] = ConstVal.new("b", "dev")
