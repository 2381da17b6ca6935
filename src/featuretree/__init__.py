"""featuretree - drill-down hierarchy navigation."""

from .navigation import (
    HistoryEntry,
    LeafSelection,
    NavigationEngine,
    Snapshot,
    VisibleLevels,
)
from .tree_model import ConfigError, Level, Node, TreeModel

__all__ = [
    "ConfigError",
    "HistoryEntry",
    "LeafSelection",
    "Level",
    "NavigationEngine",
    "Node",
    "Snapshot",
    "TreeModel",
    "VisibleLevels",
]
