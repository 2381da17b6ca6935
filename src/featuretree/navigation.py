"""Navigation state machine for drilling through a feature tree."""

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterator, Literal

from .tree_model import Node, TreeModel

logger = logging.getLogger(__name__)

LevelRole = Literal["active", "peek-left", "peek-right", "hidden"]


@dataclass(frozen=True)
class HistoryEntry:
    """The level that was active before a descend and the node drilled into."""

    level_index: int
    node_id: str
    label: str


class HistoryStack:
    """Stack-based history of descends, one entry per breadcrumb after root."""

    def __init__(self) -> None:
        self._stack: list[HistoryEntry] = []

    def push(self, entry: HistoryEntry) -> None:
        """Push an entry onto the history stack."""
        self._stack.append(entry)

    def pop(self) -> HistoryEntry | None:
        """Pop and return the most recent entry, or None if empty."""
        if self._stack:
            return self._stack.pop()
        return None

    def peek(self) -> HistoryEntry | None:
        """Return the most recent entry without removing it."""
        if self._stack:
            return self._stack[-1]
        return None

    def truncate(self, length: int) -> None:
        """Keep only the first ``length`` entries."""
        del self._stack[length:]

    def clear(self) -> None:
        """Clear all history."""
        self._stack.clear()

    def is_empty(self) -> bool:
        """Check if the history stack is empty."""
        return len(self._stack) == 0

    def entries(self) -> tuple[HistoryEntry, ...]:
        return tuple(self._stack)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(self._stack)

    def __len__(self) -> int:
        return len(self._stack)


@dataclass
class NavigationState:
    """Mutable navigation state owned by a single engine."""

    current_level_index: int = 0
    history: HistoryStack = field(default_factory=HistoryStack)
    preview_child_index: int | None = None
    selected_node_id: str | None = None
    # Selection in effect before each history entry was pushed
    prior_selections: list[str | None] = field(default_factory=list)


@dataclass(frozen=True)
class VisibleLevels:
    """Level slots the renderer should show; every other slot is hidden."""

    active: int
    peek_left: int | None = None
    peek_right: int | None = None

    def role_of(self, index: int) -> LevelRole:
        """Return the display role of the level at ``index``."""
        if index == self.active:
            return "active"
        if index == self.peek_left:
            return "peek-left"
        if index == self.peek_right:
            return "peek-right"
        return "hidden"


@dataclass(frozen=True)
class Snapshot:
    """Immutable view of the navigation state handed to renderers."""

    current_level_index: int
    visible_levels: VisibleLevels
    history: tuple[HistoryEntry, ...]
    selected_node_id: str | None
    preview_child_index: int | None

    @property
    def depth(self) -> int:
        return len(self.history)

    @property
    def can_go_back(self) -> bool:
        return bool(self.history)


@dataclass(frozen=True)
class LeafSelection:
    """Notification payload for a selected leaf."""

    node: Node
    path: tuple[str, ...]

    @property
    def path_text(self) -> str:
        return " → ".join(self.path)


class NavigationEngine:
    """Owns one NavigationState and the transitions over it.

    Every operation returns the resulting snapshot. Calls that do not apply
    to the current state (stale clicks, going back at root, out-of-range
    breadcrumbs) leave the state untouched and return the unchanged snapshot.
    """

    def __init__(
        self,
        model: TreeModel,
        *,
        root_label: str = "Start",
        on_change: Callable[[Snapshot], None] | None = None,
        on_leaf_selected: Callable[[LeafSelection], None] | None = None,
    ) -> None:
        self._model = model
        self._state = NavigationState()
        self.root_label = root_label
        self.on_change = on_change
        self.on_leaf_selected = on_leaf_selected

    @property
    def model(self) -> TreeModel:
        return self._model

    @property
    def state(self) -> NavigationState:
        return self._state

    def visible_levels(self) -> VisibleLevels:
        """Return the active level and its left/right peek neighbours."""
        top = self._state.history.peek()
        return VisibleLevels(
            active=self._state.current_level_index,
            peek_left=top.level_index if top is not None else None,
            peek_right=self._state.preview_child_index,
        )

    def snapshot(self) -> Snapshot:
        state = self._state
        return Snapshot(
            current_level_index=state.current_level_index,
            visible_levels=self.visible_levels(),
            history=state.history.entries(),
            selected_node_id=state.selected_node_id,
            preview_child_index=state.preview_child_index,
        )

    def breadcrumb(self) -> list[str]:
        """Labels of the breadcrumb trail, starting with the root crumb."""
        return [self.root_label] + [entry.label for entry in self._state.history]

    def _branch_child_index(self, node_id: str) -> int | None:
        """Resolve a branch node on the active level to its child slot."""
        if not self._model.is_on_level(node_id, self._state.current_level_index):
            return None
        node = self._model.node(node_id)
        if node is None or node.is_leaf:
            return None
        child = self._model.child_level_of(node_id)
        if child is None:
            return None
        return self._model.level_index(child)

    def _commit(self, level_index: int, selected_node_id: str | None = None) -> Snapshot:
        self._state.current_level_index = level_index
        self._state.selected_node_id = selected_node_id
        self._state.preview_child_index = None
        return self._notify()

    def _notify(self) -> Snapshot:
        snapshot = self.snapshot()
        if self.on_change is not None:
            self.on_change(snapshot)
        return snapshot

    def descend(self, node_id: str) -> Snapshot:
        """Drill into the child level of a branch node on the active level."""
        child_index = self._branch_child_index(node_id)
        if child_index is None:
            logger.debug("Ignoring descend into %r", node_id)
            return self.snapshot()

        node = self._model.node(node_id)
        self._state.prior_selections.append(self._state.selected_node_id)
        self._state.history.push(
            HistoryEntry(
                level_index=self._state.current_level_index,
                node_id=node_id,
                label=node.label,
            )
        )
        logger.debug("Descend %r -> level %d", node_id, child_index)
        return self._commit(child_index, selected_node_id=node_id)

    def select_leaf(self, node_id: str) -> Snapshot:
        """Announce a leaf on the active level without navigating."""
        node = self._model.node(node_id)
        if (
            node is None
            or not node.is_leaf
            or not self._model.is_on_level(node_id, self._state.current_level_index)
        ):
            logger.debug("Ignoring leaf selection of %r", node_id)
            return self.snapshot()

        selection = LeafSelection(
            node=node,
            path=tuple(entry.label for entry in self._state.history) + (node.label,),
        )
        logger.debug("Leaf selected: %s", selection.path_text)
        if self.on_leaf_selected is not None:
            self.on_leaf_selected(selection)
        return self.snapshot()

    def ascend(self) -> Snapshot:
        """Undo the most recent descend."""
        previous = self._state.history.pop()
        if previous is None:
            return self.snapshot()
        # Restores rather than clears the selection: a descend/ascend round trip
        # must reproduce the prior snapshot exactly, which a plain clear breaks
        # once the previous level was itself reached by a descend.
        restored = self._state.prior_selections.pop()
        logger.debug("Ascend to level %d", previous.level_index)
        return self._commit(previous.level_index, selected_node_id=restored)

    def jump_to_breadcrumb(self, depth: int) -> Snapshot:
        """Truncate history to ``depth + 1`` entries and show that entry's child level.

        ``depth`` 0 is the entry created by the first descend from root.
        Jumping to the last entry or beyond is a no-op.
        """
        history = self._state.history
        if depth < 0 or depth >= len(history) - 1:
            logger.debug("Ignoring breadcrumb jump to depth %d", depth)
            return self.snapshot()

        history.truncate(depth + 1)
        del self._state.prior_selections[depth + 1 :]
        target = history.peek()
        child = self._model.child_level_of(target.node_id)
        level_index = self._model.level_index(child) if child is not None else 0
        logger.debug("Jump to depth %d -> level %d", depth, level_index)
        return self._commit(level_index)

    def reset_to_root(self) -> Snapshot:
        """Clear history and return to the root level."""
        if self._state.history.is_empty():
            return self.snapshot()
        self._state.history.clear()
        self._state.prior_selections.clear()
        logger.debug("Reset to root")
        return self._commit(0)

    def activate_crumb(self, index: int) -> Snapshot:
        """Handle a click on breadcrumb ``index`` (0 is the root crumb)."""
        if index == 0:
            return self.reset_to_root()
        return self.jump_to_breadcrumb(index - 1)

    def begin_preview(self, node_id: str) -> Snapshot:
        """Peek at the child level of a hovered branch node."""
        child_index = self._branch_child_index(node_id)
        if child_index is None or child_index == self._state.preview_child_index:
            return self.snapshot()
        self._state.preview_child_index = child_index
        return self._notify()

    def end_preview(self) -> Snapshot:
        """Clear any peek preview."""
        if self._state.preview_child_index is None:
            return self.snapshot()
        self._state.preview_child_index = None
        return self._notify()
