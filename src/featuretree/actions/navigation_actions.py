"""Navigation action handlers for FeatureTreeApp."""

from __future__ import annotations

from textual.events import Key

from ..widgets import LevelPanel, LevelStrip


class NavigationActionsMixin:
    """Mixin forwarding panel, breadcrumb, key and swipe input to the engine.

    Rendering happens in the engine's change callback, so handlers only
    make the engine call.
    """

    def on_level_panel_node_selected(self, event: LevelPanel.NodeSelected) -> None:
        """Handle a click or Enter on a node."""
        self.input_adapter.handle_click(event.node_id)

    def on_level_panel_node_hovered(self, event: LevelPanel.NodeHovered) -> None:
        """Peek at the hovered node's child level."""
        self.input_adapter.handle_hover(event.node_id)

    def on_level_panel_hover_ended(self, event: LevelPanel.HoverEnded) -> None:
        self.input_adapter.handle_hover_end()

    def on_level_panel_peek_clicked(self, event: LevelPanel.PeekClicked) -> None:
        """Clicking the left peek panel goes back one level."""
        self.engine.ascend()

    def on_level_strip_pointer_pressed(self, event: LevelStrip.PointerPressed) -> None:
        self.input_adapter.handle_swipe_start(event.x, event.y)

    def on_level_strip_pointer_released(self, event: LevelStrip.PointerReleased) -> None:
        self.input_adapter.handle_swipe_end(event.x, event.y)

    def on_key(self, event: Key) -> None:
        """Apply the configured key policy (back / root)."""
        if self.input_adapter.key_policy.action_for(event.key) is None:
            return
        event.prevent_default()
        event.stop()
        self.input_adapter.handle_key(event.key)

    def action_go_back(self) -> None:
        """Go back one level."""
        self.engine.ascend()

    def action_go_root(self) -> None:
        """Return to the root level."""
        self.engine.reset_to_root()

    def action_activate_crumb(self, index: int) -> None:
        """Jump to a breadcrumb (0 is the root crumb)."""
        self.engine.activate_crumb(index)

    def action_help(self) -> None:
        """Show help information."""
        keys = self.config.keys
        self.notify(
            f"Click/Enter=Open, Hover=Peek, {'/'.join(keys.back)}=Back, "
            f"{'/'.join(keys.root)}=Root, Drag right=Back, q=Quit",
            timeout=5,
        )
