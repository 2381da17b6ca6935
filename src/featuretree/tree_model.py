"""Read-only index over the levels and nodes of a feature tree."""

from collections.abc import Sequence
from dataclasses import dataclass


class ConfigError(ValueError):
    """Raised when hierarchy input is malformed."""


@dataclass(frozen=True)
class Node:
    """One entry in a level: a branch with a child level, or a leaf."""

    id: str
    label: str
    description: str | None = None
    is_leaf: bool = False


@dataclass(frozen=True)
class Level:
    """One rank of the hierarchy, owned by a parent node (None for root)."""

    id: str
    nodes: tuple[Node, ...]
    parent_node_id: str | None = None
    label: str | None = None


class TreeModel:
    """Index from parent node to child level, built once and validated.

    A level's position in ``levels`` is also its presentation slot.
    """

    def __init__(self, levels: Sequence[Level]) -> None:
        self._levels: tuple[Level, ...] = tuple(levels)
        self._index_by_level_id: dict[str, int] = {}
        self._child_by_parent: dict[str, Level] = {}
        self._nodes: dict[str, Node] = {}
        self._node_level: dict[str, int] = {}
        self._build()
        self._check_reachable()

    def _build(self) -> None:
        if not self._levels:
            raise ConfigError("Hierarchy has no levels")

        for index, level in enumerate(self._levels):
            if level.id in self._index_by_level_id:
                raise ConfigError(f"Duplicate level id: {level.id!r}")
            self._index_by_level_id[level.id] = index

            if index == 0 and level.parent_node_id is not None:
                raise ConfigError(
                    f"Root level {level.id!r} must not have a parent node"
                )
            if index > 0 and level.parent_node_id is None:
                raise ConfigError(f"Level {level.id!r} has no parent node")

            for node in level.nodes:
                if node.id in self._nodes:
                    raise ConfigError(f"Duplicate node id: {node.id!r}")
                self._nodes[node.id] = node
                self._node_level[node.id] = index

        # Parent references are resolved after all nodes are known
        for level in self._levels[1:]:
            parent_id = level.parent_node_id
            if parent_id in self._child_by_parent:
                other = self._child_by_parent[parent_id]
                raise ConfigError(
                    f"Levels {other.id!r} and {level.id!r} share parent node {parent_id!r}"
                )
            parent = self._nodes.get(parent_id)
            if parent is None:
                raise ConfigError(
                    f"Level {level.id!r} refers to unknown parent node {parent_id!r}"
                )
            if parent.is_leaf:
                raise ConfigError(
                    f"Level {level.id!r} has leaf node {parent_id!r} as parent"
                )
            self._child_by_parent[parent_id] = level

    def _check_reachable(self) -> None:
        reached = {0}
        pending = [0]
        while pending:
            index = pending.pop()
            for node in self._levels[index].nodes:
                child = self._child_by_parent.get(node.id)
                if child is None:
                    continue
                child_index = self._index_by_level_id[child.id]
                if child_index not in reached:
                    reached.add(child_index)
                    pending.append(child_index)

        if len(reached) != len(self._levels):
            orphans = [
                level.id
                for index, level in enumerate(self._levels)
                if index not in reached
            ]
            raise ConfigError(
                f"Levels not reachable from the root: {', '.join(orphans)}"
            )

    @property
    def levels(self) -> tuple[Level, ...]:
        return self._levels

    @property
    def root(self) -> Level:
        return self._levels[0]

    def __len__(self) -> int:
        return len(self._levels)

    def child_level_of(self, node_id: str) -> Level | None:
        """Return the level owned by ``node_id``, or None for leaves."""
        return self._child_by_parent.get(node_id)

    def level_index(self, level: Level) -> int:
        """Return the slot of a level belonging to this model."""
        index = self._index_by_level_id[level.id]
        if self._levels[index] != level:
            raise KeyError(level.id)
        return index

    def level_at(self, index: int) -> Level:
        return self._levels[index]

    def nodes_at(self, index: int) -> tuple[Node, ...]:
        """Return the nodes shown on the level at ``index``, in order."""
        return self._levels[index].nodes

    def node(self, node_id: str) -> Node | None:
        return self._nodes.get(node_id)

    def level_index_of_node(self, node_id: str) -> int | None:
        return self._node_level.get(node_id)

    def is_on_level(self, node_id: str, level_index: int) -> bool:
        """Check whether ``node_id`` belongs to the level at ``level_index``."""
        return self._node_level.get(node_id) == level_index
