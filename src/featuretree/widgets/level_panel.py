"""Level panels: one column per hierarchy level, laid out side by side."""

from rich.text import Text

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.events import Click, Enter, Leave, MouseDown, MouseUp
from textual.message import Message
from textual.widgets import ListItem, ListView, Static

from ..navigation import LevelRole, Snapshot
from ..tree_model import Level, Node, TreeModel

ROLE_CLASSES = ("active", "peek-left", "peek-right", "hidden")


class NodeItem(ListItem):
    """A list item representing a node.

    Renders its own text instead of composing a Label so that hover
    enter/leave events come from this widget only.
    """

    DEFAULT_CSS = """
    NodeItem {
        height: auto;
        padding: 0 1;
    }
    """

    def __init__(self, node: Node) -> None:
        super().__init__(classes="leaf" if node.is_leaf else "branch")
        self.node = node

    def render(self) -> Text:
        text = Text()
        text.append(self.node.label, style="bold")
        text.append("  •" if self.node.is_leaf else "  ›", style="dim")
        if self.node.description:
            text.append("\n")
            text.append(self.node.description, style="italic dim")
        return text

    def on_enter(self, event: Enter) -> None:
        self.post_message(LevelPanel.NodeHovered(self.node.id))

    def on_leave(self, event: Leave) -> None:
        self.post_message(LevelPanel.HoverEnded())


class LevelPanel(Vertical):
    """Widget displaying the nodes of one level."""

    DEFAULT_CSS = """
    LevelPanel {
        height: 1fr;
        border: solid $primary;
    }

    LevelPanel.active {
        width: 2fr;
        border: solid $accent;
    }

    LevelPanel.peek-left, LevelPanel.peek-right {
        width: 1fr;
        opacity: 60%;
    }

    LevelPanel.hidden {
        display: none;
    }

    LevelPanel > .level-header {
        background: $primary-background;
        color: $accent;
        text-style: bold;
        padding: 0 1;
        height: 1;
    }

    LevelPanel > ListView {
        height: 1fr;
    }

    LevelPanel NodeItem:hover {
        background: $boost;
    }

    LevelPanel NodeItem.selected {
        background: $accent 40%;
    }
    """

    class NodeSelected(Message):
        """Message emitted when a node is clicked or chosen with Enter."""

        def __init__(self, node_id: str) -> None:
            super().__init__()
            self.node_id = node_id

    class NodeHovered(Message):
        """Message emitted when the pointer enters a node."""

        def __init__(self, node_id: str) -> None:
            super().__init__()
            self.node_id = node_id

    class HoverEnded(Message):
        """Message emitted when the pointer leaves a node."""

        pass

    class PeekClicked(Message):
        """Message emitted when the left peek panel is clicked."""

        pass

    def __init__(self, level: Level, level_index: int, **kwargs) -> None:
        super().__init__(**kwargs)
        self.level = level
        self.level_index = level_index

    def compose(self) -> ComposeResult:
        yield Static(self.level.label or self.level.id, classes="level-header")
        yield ListView(*(NodeItem(node) for node in self.level.nodes))

    @property
    def list_view(self) -> ListView:
        return self.query_one(ListView)

    def apply_role(self, role: LevelRole) -> None:
        """Switch the panel's role class."""
        for name in ROLE_CLASSES:
            self.set_class(name == role, name)

    def mark_selected(self, node_id: str | None) -> None:
        """Highlight ``node_id`` if it is on this level, clear others."""
        for item in self.query(NodeItem):
            item.set_class(item.node.id == node_id, "selected")

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        if event.item is not None and isinstance(event.item, NodeItem):
            event.stop()
            self.post_message(self.NodeSelected(event.item.node.id))

    def on_click(self, event: Click) -> None:
        if self.has_class("peek-left"):
            event.stop()
            self.post_message(self.PeekClicked())


class LevelStrip(Horizontal):
    """Row of level panels; also reports pointer drags for swipe detection."""

    DEFAULT_CSS = """
    LevelStrip {
        width: 100%;
        height: 1fr;
    }
    """

    class PointerPressed(Message):
        def __init__(self, x: int, y: int) -> None:
            super().__init__()
            self.x = x
            self.y = y

    class PointerReleased(Message):
        def __init__(self, x: int, y: int) -> None:
            super().__init__()
            self.x = x
            self.y = y

    def __init__(self, model: TreeModel, **kwargs) -> None:
        super().__init__(**kwargs)
        self._model = model

    def _make_panels(self) -> list[LevelPanel]:
        return [
            LevelPanel(level, index, classes="hidden")
            for index, level in enumerate(self._model.levels)
        ]

    def compose(self) -> ComposeResult:
        yield from self._make_panels()

    async def load(self, model: TreeModel) -> None:
        """Replace all panels with those of a new model."""
        self._model = model
        await self.remove_children()
        await self.mount_all(self._make_panels())

    @property
    def panels(self) -> list[LevelPanel]:
        return list(self.query(LevelPanel))

    def active_panel(self) -> LevelPanel | None:
        for panel in self.query(LevelPanel):
            if panel.has_class("active"):
                return panel
        return None

    def show(self, snapshot: Snapshot) -> None:
        """Apply a navigation snapshot to every panel."""
        for panel in self.query(LevelPanel):
            panel.apply_role(snapshot.visible_levels.role_of(panel.level_index))
            panel.mark_selected(snapshot.selected_node_id)

    def on_mouse_down(self, event: MouseDown) -> None:
        self.post_message(self.PointerPressed(event.screen_x, event.screen_y))

    def on_mouse_up(self, event: MouseUp) -> None:
        self.post_message(self.PointerReleased(event.screen_x, event.screen_y))
