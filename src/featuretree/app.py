"""Main Textual application for featuretree."""

import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer

from .actions import NavigationActionsMixin
from .config import Config
from .hierarchy import load_hierarchy
from .input_adapter import InputAdapter
from .navigation import LeafSelection, NavigationEngine, Snapshot
from .tree_model import ConfigError, TreeModel
from .watcher import HierarchyWatcher
from .widgets import Breadcrumb, LeafDetail, LevelStrip

logger = logging.getLogger(__name__)


class FeatureTreeApp(NavigationActionsMixin, App):
    """featuretree - drill-down hierarchy browser TUI."""

    TITLE = "Feature Tree"

    CSS = """
    #breadcrumb {
        dock: top;
    }

    #level-strip {
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("?", "help", "Help"),
    ]

    def __init__(self, config: Config, model: TreeModel) -> None:
        super().__init__()
        self.config = config
        self.model = model
        self._watcher: HierarchyWatcher | None = None
        self._build_engine(model)

    def _build_engine(self, model: TreeModel) -> None:
        """Create a fresh engine (at the root) and its input adapter."""
        self.engine = NavigationEngine(
            model,
            root_label=self.config.root_label,
            on_change=self.render_snapshot,
            on_leaf_selected=self._on_leaf_selected,
        )
        self.input_adapter = InputAdapter(
            self.engine,
            keys=self.config.keys,
            swipe=self.config.swipe,
        )

    def compose(self) -> ComposeResult:
        yield Breadcrumb(id="breadcrumb")
        yield LevelStrip(self.model, id="level-strip")
        yield LeafDetail(id="leaf-detail")
        yield Footer()

    def on_mount(self) -> None:
        """Render the initial state and start watching the hierarchy file."""
        self.render_snapshot(self.engine.snapshot())

        if self.config.watch:
            self._watcher = HierarchyWatcher(
                self.config.hierarchy_file, self._on_hierarchy_change
            )
            self._watcher.start()

    async def on_unmount(self) -> None:
        """Clean up when app closes."""
        if self._watcher:
            self._watcher.stop()

    def render_snapshot(self, snapshot: Snapshot) -> None:
        """Draw a navigation snapshot."""
        strip = self.query_one("#level-strip", LevelStrip)
        strip.show(snapshot)

        breadcrumb = self.query_one("#breadcrumb", Breadcrumb)
        breadcrumb.update_trail(self.engine.breadcrumb(), snapshot.can_go_back)

        # A leaf detail only stays while its level is active
        detail = self.query_one("#leaf-detail", LeafDetail)
        node_id = detail.current_node_id
        if node_id is not None and not self.model.is_on_level(
            node_id, snapshot.current_level_index
        ):
            self.call_later(detail.show_selection, None)

        panel = strip.active_panel()
        if panel is not None:
            self.call_after_refresh(panel.list_view.focus)

    def _on_leaf_selected(self, selection: LeafSelection) -> None:
        detail = self.query_one("#leaf-detail", LeafDetail)
        self.call_later(detail.show_selection, selection)
        self.notify(f"Selected: {selection.path_text}")

    def _on_hierarchy_change(self) -> None:
        """Handle hierarchy file changes (called from watcher thread)."""
        self.call_from_thread(self._reload_hierarchy)

    async def _reload_hierarchy(self) -> None:
        """Reload the hierarchy on the main thread, keeping the old one on errors."""
        try:
            model = load_hierarchy(self.config.hierarchy_file)
        except ConfigError as e:
            logger.warning("Hierarchy reload failed: %s", e)
            self.notify(f"Hierarchy not reloaded: {e}", severity="error")
            return

        self.model = model
        self._build_engine(model)

        strip = self.query_one("#level-strip", LevelStrip)
        await strip.load(model)
        detail = self.query_one("#leaf-detail", LeafDetail)
        await detail.show_selection(None)

        self.render_snapshot(self.engine.snapshot())
        self.notify("Hierarchy reloaded")


def run_app(config: Config, model: TreeModel) -> None:
    """Run the featuretree application."""
    app = FeatureTreeApp(config, model)
    app.run()
