"""Translate raw gestures into navigation engine calls."""

from __future__ import annotations

import logging
from typing import Literal

from .config import KeyConfig, SwipeConfig
from .navigation import NavigationEngine, Snapshot

logger = logging.getLogger(__name__)

KeyAction = Literal["back", "root"]
SwipeDirection = Literal["left", "right"]


class KeyPolicy:
    """Key name to navigation action mapping."""

    def __init__(self, keys: KeyConfig | None = None) -> None:
        keys = keys or KeyConfig()
        self._actions: dict[str, KeyAction] = {}
        for key in keys.back:
            self._actions[key] = "back"
        for key in keys.root:
            self._actions[key] = "root"

    def action_for(self, key: str) -> KeyAction | None:
        return self._actions.get(key)


class SwipeTracker:
    """Recognizes horizontal swipes from a press and release position."""

    def __init__(self, threshold: int, max_vertical: int) -> None:
        self.threshold = threshold
        self.max_vertical = max_vertical
        self._start: tuple[int, int] | None = None

    def start(self, x: int, y: int) -> None:
        self._start = (x, y)

    def cancel(self) -> None:
        self._start = None

    def finish(self, x: int, y: int) -> SwipeDirection | None:
        """Return the swipe direction, or None if the gesture was not a swipe."""
        if self._start is None:
            return None
        start_x, start_y = self._start
        self._start = None

        dx = x - start_x
        dy = abs(y - start_y)
        if abs(dx) <= self.threshold or dy >= self.max_vertical:
            return None
        return "right" if dx > 0 else "left"


class InputAdapter:
    """Maps clicks, hovers, keys and swipes onto a NavigationEngine.

    Handlers return the engine snapshot when a navigation call was made,
    or None when the gesture is not bound to anything.
    """

    def __init__(
        self,
        engine: NavigationEngine,
        keys: KeyConfig | None = None,
        swipe: SwipeConfig | None = None,
    ) -> None:
        swipe = swipe or SwipeConfig()
        self.engine = engine
        self.key_policy = KeyPolicy(keys)
        self.swipe_tracker = SwipeTracker(swipe.threshold, swipe.max_vertical)

    def handle_click(self, node_id: str) -> Snapshot:
        """Descend into a branch or announce a leaf."""
        node = self.engine.model.node(node_id)
        if node is not None and node.is_leaf:
            return self.engine.select_leaf(node_id)
        return self.engine.descend(node_id)

    def handle_hover(self, node_id: str) -> Snapshot:
        return self.engine.begin_preview(node_id)

    def handle_hover_end(self) -> Snapshot:
        return self.engine.end_preview()

    def handle_key(self, key: str) -> Snapshot | None:
        action = self.key_policy.action_for(key)
        if action == "back":
            return self.engine.ascend()
        if action == "root":
            return self.engine.reset_to_root()
        return None

    def handle_swipe_start(self, x: int, y: int) -> None:
        self.swipe_tracker.start(x, y)

    def handle_swipe_end(self, x: int, y: int) -> Snapshot | None:
        """Swiping right goes back; other drags are ignored."""
        direction = self.swipe_tracker.finish(x, y)
        if direction is None:
            return None
        logger.debug("Swipe %s", direction)
        if direction == "right":
            return self.engine.ascend()
        return None
