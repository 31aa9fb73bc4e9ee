"""Tests for the environment snapshot."""

import pytest

from shadow_build.env import EnvironmentSnapshot


class TestEnvironmentSnapshot:
    """Test EnvironmentSnapshot mapping."""

    def test_mapping_access(self):
        env = EnvironmentSnapshot({"A": "1", "B": "2"})
        assert env["A"] == "1"
        assert env.get("C") is None
        assert len(env) == 2
        assert set(env) == {"A", "B"}

    def test_copies_source(self):
        source = {"A": "1"}
        env = EnvironmentSnapshot(source)
        source["A"] = "changed"
        source["B"] = "new"
        assert env["A"] == "1"
        assert "B" not in env

    def test_immutable(self):
        env = EnvironmentSnapshot({"A": "1"})
        with pytest.raises(TypeError):
            env["A"] = "2"

    def test_capture_process_environment(self, monkeypatch):
        monkeypatch.setenv("SHADOW_BUILD_TEST_VAR", "present")
        env = EnvironmentSnapshot.capture()
        monkeypatch.setenv("SHADOW_BUILD_TEST_VAR", "later")
        assert env["SHADOW_BUILD_TEST_VAR"] == "present"

    def test_capture_explicit_mapping(self):
        env = EnvironmentSnapshot.capture({"X": "y"})
        assert dict(env) == {"X": "y"}
