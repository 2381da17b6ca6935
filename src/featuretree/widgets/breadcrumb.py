"""Breadcrumb bar with a back link and clickable crumbs."""

from rich.markup import escape

from textual.widgets import Static

CRUMB_SEPARATOR = " › "


def build_trail_markup(labels: list[str], can_go_back: bool) -> str:
    """Build console markup for the trail; every crumb but the last is a link."""
    if can_go_back:
        parts = ["[@click=app.go_back]‹ Back[/]  "]
    else:
        parts = ["[dim]‹ Back[/dim]  "]

    crumbs = []
    last = len(labels) - 1
    for index, label in enumerate(labels):
        if index == last:
            crumbs.append(f"[b reverse] {escape(label)} [/]")
        else:
            crumbs.append(f"[@click=app.activate_crumb({index})]{escape(label)}[/]")
    parts.append(CRUMB_SEPARATOR.join(crumbs))
    return "".join(parts)


class Breadcrumb(Static):
    """Single-line trail from the root crumb to the active level."""

    DEFAULT_CSS = """
    Breadcrumb {
        width: 100%;
        height: 1;
        background: $primary-background;
        padding: 0 1;
    }
    """

    def update_trail(self, labels: list[str], can_go_back: bool) -> None:
        self.update(build_trail_markup(labels, can_go_back))
