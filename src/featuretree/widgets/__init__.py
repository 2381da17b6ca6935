"""featuretree widgets."""

from .breadcrumb import Breadcrumb
from .detail import LeafDetail
from .level_panel import LevelPanel, LevelStrip, NodeItem

__all__ = [
    "Breadcrumb",
    "LeafDetail",
    "LevelPanel",
    "LevelStrip",
    "NodeItem",
]
