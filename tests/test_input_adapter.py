"""Tests for featuretree.input_adapter module."""

import pytest

from featuretree.config import KeyConfig, SwipeConfig
from featuretree.input_adapter import InputAdapter, KeyPolicy, SwipeTracker


@pytest.fixture
def adapter(engine):
    return InputAdapter(engine, swipe=SwipeConfig(threshold=5, max_vertical=2))


class TestKeyPolicy:
    def test_defaults(self):
        policy = KeyPolicy()
        assert policy.action_for("escape") == "back"
        assert policy.action_for("backspace") == "back"
        assert policy.action_for("left") == "back"
        assert policy.action_for("home") == "root"
        assert policy.action_for("x") is None

    def test_custom(self):
        policy = KeyPolicy(KeyConfig(back=["h"], root=[]))
        assert policy.action_for("h") == "back"
        assert policy.action_for("escape") is None


class TestSwipeTracker:
    def test_right_swipe(self):
        tracker = SwipeTracker(threshold=5, max_vertical=2)
        tracker.start(10, 4)
        assert tracker.finish(20, 5) == "right"

    def test_left_swipe(self):
        tracker = SwipeTracker(threshold=5, max_vertical=2)
        tracker.start(20, 4)
        assert tracker.finish(10, 4) == "left"

    def test_short_drag(self):
        tracker = SwipeTracker(threshold=5, max_vertical=2)
        tracker.start(10, 4)
        assert tracker.finish(15, 4) is None

    def test_too_vertical(self):
        tracker = SwipeTracker(threshold=5, max_vertical=2)
        tracker.start(10, 4)
        assert tracker.finish(30, 6) is None

    def test_finish_without_start(self):
        assert SwipeTracker(threshold=5, max_vertical=2).finish(30, 0) is None

    def test_finish_consumes_start(self):
        tracker = SwipeTracker(threshold=5, max_vertical=2)
        tracker.start(0, 0)
        tracker.finish(1, 0)
        assert tracker.finish(30, 0) is None


class TestInputAdapter:
    def test_click_branch_descends(self, adapter):
        assert adapter.handle_click("A").current_level_index == 1

    def test_click_leaf_selects(self, adapter, engine):
        selections = []
        engine.on_leaf_selected = selections.append
        snap = adapter.handle_click("B")
        assert snap.current_level_index == 0
        assert selections[0].node.id == "B"

    def test_hover(self, adapter):
        assert adapter.handle_hover("A").preview_child_index == 1
        assert adapter.handle_hover_end().preview_child_index is None

    def test_back_and_root_keys(self, adapter):
        adapter.handle_click("A")
        adapter.handle_click("C")
        assert adapter.handle_key("escape").current_level_index == 1
        assert adapter.handle_key("home").current_level_index == 0

    def test_unbound_key(self, adapter):
        assert adapter.handle_key("z") is None

    def test_swipe_right_goes_back(self, adapter):
        adapter.handle_click("A")
        adapter.handle_swipe_start(2, 3)
        assert adapter.handle_swipe_end(12, 3).current_level_index == 0

    def test_swipe_left_ignored(self, adapter, engine):
        adapter.handle_click("A")
        adapter.handle_swipe_start(12, 3)
        assert adapter.handle_swipe_end(2, 3) is None
        assert engine.snapshot().current_level_index == 1
