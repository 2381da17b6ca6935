"""Tests for featuretree.hierarchy module."""

from pathlib import Path

import pytest

from featuretree.hierarchy import (
    SAMPLE_HIERARCHY,
    levels_from_records,
    load_hierarchy,
    parse_outline,
    parse_toml_hierarchy,
    slugify,
    write_sample_hierarchy,
)
from featuretree.tree_model import ConfigError

OUTLINE = """\
# Benefits

- Faster onboarding: New people find their way
  - Guided tour
    - Tour steps: One control per step
  - Glossary
- Fewer errors
"""


class TestSlugify:
    def test_basic(self):
        assert slugify("Guided Tour") == "guided-tour"

    def test_punctuation_collapses(self):
        assert slugify("  A & B -- C!  ") == "a-b-c"

    def test_only_symbols(self):
        assert slugify("***") == ""


class TestParseToml:
    def test_sample_document(self):
        model = parse_toml_hierarchy(SAMPLE_HIERARCHY)
        assert len(model) == 3
        assert model.root.label == "Benefits"
        assert model.child_level_of("faster-onboarding").id == "functions"
        assert model.node("fewer-errors").is_leaf
        assert model.node("guided-tour").description.startswith("Step-by-step")

    def test_invalid_toml(self):
        with pytest.raises(ConfigError, match="Invalid TOML"):
            parse_toml_hierarchy("[[levels]\n")

    def test_missing_levels(self):
        with pytest.raises(ConfigError, match="no \\[\\[levels\\]\\]"):
            parse_toml_hierarchy('title = "x"\n')

    def test_duplicate_parent_rejected(self):
        text = """
[[levels]]
id = "root"
[[levels.nodes]]
id = "a"
label = "A"

[[levels]]
id = "one"
parent = "a"

[[levels]]
id = "two"
parent = "a"
"""
        with pytest.raises(ConfigError, match="share parent"):
            parse_toml_hierarchy(text)


class TestLevelsFromRecords:
    def test_missing_node_label(self):
        with pytest.raises(ConfigError, match="'label'"):
            levels_from_records([{"id": "root", "nodes": [{"id": "a"}]}])

    def test_missing_level_id(self):
        with pytest.raises(ConfigError, match="'id'"):
            levels_from_records([{"nodes": []}])

    def test_list_parent_rejected(self):
        text = """
[[levels]]
id = "root"
[[levels.nodes]]
id = "a"
label = "A"

[[levels]]
id = "one"
parent = ["a"]
"""
        with pytest.raises(ConfigError, match="'parent'"):
            parse_toml_hierarchy(text)

    def test_empty_parent_rejected(self):
        with pytest.raises(ConfigError, match="'parent'"):
            levels_from_records([{"id": "one", "parent": ""}])

    def test_non_string_level_label_rejected(self):
        with pytest.raises(ConfigError, match="'label'"):
            levels_from_records([{"id": "root", "label": 3}])

    def test_non_string_description_rejected(self):
        record = {"id": "root", "nodes": [{"id": "a", "label": "A", "description": 1}]}
        with pytest.raises(ConfigError, match="'description'"):
            levels_from_records([record])

    def test_string_leaf_rejected(self):
        record = {"id": "root", "nodes": [{"id": "a", "label": "A", "leaf": "false"}]}
        with pytest.raises(ConfigError, match="'leaf'"):
            levels_from_records([record])

    def test_nodes_not_array_rejected(self):
        with pytest.raises(ConfigError, match="'nodes'"):
            levels_from_records([{"id": "root", "nodes": "a"}])

    def test_leaf_true(self):
        [level] = levels_from_records(
            [{"id": "root", "nodes": [{"id": "a", "label": "A", "leaf": True}]}]
        )
        assert level.nodes[0].is_leaf is True

    def test_defaults(self):
        [level] = levels_from_records(
            [{"id": "root", "nodes": [{"id": "a", "label": "A", "description": ""}]}]
        )
        assert level.parent_node_id is None
        assert level.label is None
        assert level.nodes[0].description is None
        assert level.nodes[0].is_leaf is False


class TestParseOutline:
    def test_levels_breadth_first(self):
        model = parse_outline(OUTLINE)
        assert [level.id for level in model.levels] == ["level-0", "level-1", "level-2"]
        assert [n.label for n in model.nodes_at(0)] == ["Faster onboarding", "Fewer errors"]
        assert [n.label for n in model.nodes_at(1)] == ["Guided tour", "Glossary"]
        assert [n.label for n in model.nodes_at(2)] == ["Tour steps"]

    def test_heading_labels_root(self):
        model = parse_outline(OUTLINE)
        assert model.root.label == "Benefits"
        assert model.level_at(1).label == "Faster onboarding"

    def test_ids_and_leaves(self):
        model = parse_outline(OUTLINE)
        tour = model.node("faster-onboarding/guided-tour")
        assert tour is not None and not tour.is_leaf
        assert model.node("fewer-errors").is_leaf
        child = model.child_level_of("faster-onboarding/guided-tour")
        assert child.nodes[0].id == "faster-onboarding/guided-tour/tour-steps"

    def test_descriptions(self):
        model = parse_outline(OUTLINE)
        assert model.node("faster-onboarding").description == "New people find their way"
        assert model.node("fewer-errors").description is None

    def test_tabs_and_markers(self):
        model = parse_outline("* Root\n\t+ Child\n")
        assert model.node("root/child") is not None

    def test_no_items(self):
        with pytest.raises(ConfigError, match="no list items"):
            parse_outline("# Title\n\nJust text.\n")

    def test_duplicate_sibling_labels_rejected(self):
        with pytest.raises(ConfigError, match="Duplicate node"):
            parse_outline("- Same\n- Same\n")


class TestLoadHierarchy:
    def test_load_toml(self, tmp_path):
        path = tmp_path / "tree.toml"
        write_sample_hierarchy(path)
        assert len(load_hierarchy(path)) == 3

    def test_load_markdown(self, tmp_path):
        path = tmp_path / "tree.md"
        path.write_text(OUTLINE)
        assert len(load_hierarchy(path)) == 3

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "tree.json"
        path.write_text("{}")
        with pytest.raises(ConfigError, match="Unsupported"):
            load_hierarchy(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Cannot read"):
            load_hierarchy(tmp_path / "missing.toml")

    def test_write_sample_creates_parents(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "tree.toml"
        write_sample_hierarchy(path)
        assert path.read_text() == SAMPLE_HIERARCHY
