"""Tests for the Differences recorder."""

from __future__ import annotations

from json_unit_diff.differences import Differences


class TestDifferences:
    def test_new_recorder_is_empty(self) -> None:
        differences = Differences()
        assert differences.is_empty()
        assert len(differences) == 0
        assert differences.render() == ""

    def test_add_keeps_order(self) -> None:
        differences = Differences()
        differences.add("second")
        differences.add("first")
        assert list(differences) == ["second", "first"]

    def test_render_terminates_every_message(self) -> None:
        differences = Differences()
        differences.add("a")
        differences.add("b")
        assert differences.render() == "a\nb\n"

    def test_not_empty_after_add(self) -> None:
        differences = Differences()
        differences.add("a")
        assert not differences.is_empty()
        assert len(differences) == 1

    def test_repr(self) -> None:
        differences = Differences()
        differences.add("a")
        assert repr(differences) == "Differences(['a'])"
