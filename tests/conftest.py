"""Shared fixtures for featuretree tests."""

import pytest

from featuretree.navigation import NavigationEngine
from featuretree.tree_model import Level, Node, TreeModel


@pytest.fixture
def scenario_levels():
    """Root (A branch, B leaf) -> level 1 (C branch) -> level 2 (D leaf)."""
    return [
        Level(
            id="root",
            label="Benefits",
            nodes=(
                Node("A", "A-label"),
                Node("B", "B-label", description="Terminal", is_leaf=True),
            ),
        ),
        Level(
            id="level-1",
            label="Functions",
            parent_node_id="A",
            nodes=(Node("C", "C-label"),),
        ),
        Level(
            id="level-2",
            label="Details",
            parent_node_id="C",
            nodes=(Node("D", "D-label", is_leaf=True),),
        ),
    ]


@pytest.fixture
def model(scenario_levels):
    return TreeModel(scenario_levels)


@pytest.fixture
def engine(model):
    return NavigationEngine(model, root_label="Benefits")


@pytest.fixture
def config_dirs(tmp_path, monkeypatch):
    """Point the config layer at a temp directory and return it."""
    config_dir = tmp_path / ".config" / "featuretree"
    monkeypatch.setattr("featuretree.config.get_config_dir", lambda: config_dir)
    monkeypatch.setattr(
        "featuretree.config.get_config_path", lambda: config_dir / "config.toml"
    )
    monkeypatch.setattr(
        "featuretree.config.get_default_hierarchy_file",
        lambda: config_dir / "tree.toml",
    )
    return config_dir
