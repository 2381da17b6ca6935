"""Detail view for the most recently selected leaf."""

from textual.app import ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.widgets import Markdown, Static

from ..navigation import LeafSelection


class LeafDetail(Vertical):
    """Widget showing a selected leaf's path and Markdown description."""

    DEFAULT_CSS = """
    LeafDetail {
        width: 100%;
        height: 30%;
        border: solid $success;
    }

    LeafDetail > #detail-header {
        background: $primary-background;
        color: $success;
        text-style: bold;
        padding: 0 1;
        height: 1;
    }

    LeafDetail > VerticalScroll {
        height: 1fr;
    }

    LeafDetail Markdown {
        padding: 0 1;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._current: LeafSelection | None = None

    def compose(self) -> ComposeResult:
        yield Static("DETAILS", id="detail-header")
        with VerticalScroll(id="detail-scroll"):
            yield Markdown(id="detail-content", open_links=False)

    @property
    def current_node_id(self) -> str | None:
        if self._current is None:
            return None
        return self._current.node.id

    async def show_selection(self, selection: LeafSelection | None) -> None:
        """Display a leaf selection, or clear the view when None."""
        self._current = selection

        header = self.query_one("#detail-header", Static)
        markdown = self.query_one("#detail-content", Markdown)

        if selection is None:
            header.update("DETAILS")
            await markdown.update("")
            return

        header.update(f"DETAILS - {selection.path_text}")
        await markdown.update(selection.node.description or f"*{selection.node.label}*")
