"""Hierarchy loading from TOML documents and Markdown outlines."""

import logging
import re
import tomllib
from collections import deque
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .tree_model import ConfigError, Level, Node, TreeModel

logger = logging.getLogger(__name__)

TOML_SUFFIXES = {".toml"}
OUTLINE_SUFFIXES = {".md", ".markdown"}

# Bullet list item: indentation, marker (-, * or +), text
OUTLINE_ITEM_PATTERN = re.compile(r"^(?P<indent>[ \t]*)[-*+]\s+(?P<text>\S.*?)\s*$")

# Top-level heading naming the root level
OUTLINE_HEADING_PATTERN = re.compile(r"^#\s+(?P<title>.+?)\s*$")

SLUG_PATTERN = re.compile(r"[^a-z0-9]+")


def slugify(label: str) -> str:
    """Turn a label into a lowercase, hyphen-separated identifier part."""
    return SLUG_PATTERN.sub("-", label.lower()).strip("-")


def load_hierarchy(path: Path) -> TreeModel:
    """Load a hierarchy document, choosing the parser by file suffix."""
    suffix = path.suffix.lower()
    if suffix not in TOML_SUFFIXES | OUTLINE_SUFFIXES:
        raise ConfigError(f"Unsupported hierarchy format: {path.name}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read hierarchy file {path}: {e}") from e

    if suffix in TOML_SUFFIXES:
        model = parse_toml_hierarchy(text)
    else:
        model = parse_outline(text)
    logger.info("Loaded %d level(s) from %s", len(model), path)
    return model


def _require_str(record: dict[str, Any], key: str, where: str) -> str:
    value = record.get(key)
    if not isinstance(value, str) or not value:
        raise ConfigError(f"{where} is missing {key!r}")
    return value


def _optional_str(record: dict[str, Any], key: str, where: str) -> str | None:
    value = record.get(key)
    if value is None:
        return None
    if not isinstance(value, str) or not value:
        raise ConfigError(f"{where}: {key!r} must be a non-empty string")
    return value


def levels_from_records(records: list[dict[str, Any]]) -> list[Level]:
    """Convert level records (``id``, ``label``, ``parent``, ``nodes``) to Levels."""
    levels = []
    for position, record in enumerate(records):
        if not isinstance(record, dict):
            raise ConfigError(f"Level #{position} is not a table")
        level_id = _require_str(record, "id", f"Level #{position}")

        node_records = record.get("nodes", [])
        if not isinstance(node_records, list):
            raise ConfigError(f"Level {level_id!r}: 'nodes' must be an array of tables")

        nodes = []
        for node_record in node_records:
            where = f"Node in level {level_id!r}"
            if not isinstance(node_record, dict):
                raise ConfigError(f"{where} is not a table")
            description = node_record.get("description")
            if description is not None and not isinstance(description, str):
                raise ConfigError(f"{where}: 'description' must be a string")
            leaf = node_record.get("leaf", False)
            if not isinstance(leaf, bool):
                raise ConfigError(f"{where}: 'leaf' must be true or false")
            nodes.append(
                Node(
                    id=_require_str(node_record, "id", where),
                    label=_require_str(node_record, "label", where),
                    description=description or None,
                    is_leaf=leaf,
                )
            )

        levels.append(
            Level(
                id=level_id,
                nodes=tuple(nodes),
                parent_node_id=_optional_str(record, "parent", f"Level {level_id!r}"),
                label=_optional_str(record, "label", f"Level {level_id!r}"),
            )
        )
    return levels


def parse_toml_hierarchy(text: str) -> TreeModel:
    """Parse a TOML document with a ``[[levels]]`` array of tables."""
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML hierarchy: {e}") from e

    records = data.get("levels")
    if not isinstance(records, list):
        raise ConfigError("Hierarchy document has no [[levels]] array")
    return TreeModel(levels_from_records(records))


@dataclass
class _OutlineItem:
    label: str
    description: str | None = None
    children: list["_OutlineItem"] = field(default_factory=list)


def _parse_item_text(text: str) -> _OutlineItem:
    label, sep, description = text.partition(": ")
    if not sep:
        return _OutlineItem(label=text)
    return _OutlineItem(label=label.strip(), description=description.strip() or None)


def parse_outline(text: str) -> TreeModel:
    """Parse a Markdown nested bullet list into a TreeModel.

    Each group of sibling items becomes one level, ordered breadth-first.
    Items with nested items are branches, the rest are leaves. Text after
    the first ``": "`` of an item is its description.
    """
    title: str | None = None
    roots: list[_OutlineItem] = []
    stack: list[tuple[int, _OutlineItem]] = []

    for line in text.splitlines():
        heading = OUTLINE_HEADING_PATTERN.match(line)
        if heading and not roots:
            title = heading.group("title")
            continue

        match = OUTLINE_ITEM_PATTERN.match(line)
        if not match:
            continue

        indent = len(match.group("indent").expandtabs(4))
        item = _parse_item_text(match.group("text"))
        while stack and stack[-1][0] >= indent:
            stack.pop()
        if stack:
            stack[-1][1].children.append(item)
        else:
            roots.append(item)
        stack.append((indent, item))

    if not roots:
        raise ConfigError("Outline has no list items")

    levels: list[Level] = []
    pending: deque[tuple[str | None, str | None, list[_OutlineItem]]] = deque()
    pending.append((None, title, roots))

    while pending:
        parent_id, caption, items = pending.popleft()
        nodes = []
        for position, item in enumerate(items):
            slug = slugify(item.label) or f"item-{position}"
            node_id = f"{parent_id}/{slug}" if parent_id else slug
            nodes.append(
                Node(
                    id=node_id,
                    label=item.label,
                    description=item.description,
                    is_leaf=not item.children,
                )
            )
            if item.children:
                pending.append((node_id, item.label, item.children))

        levels.append(
            Level(
                id=f"level-{len(levels)}",
                nodes=tuple(nodes),
                parent_node_id=parent_id,
                label=caption,
            )
        )

    return TreeModel(levels)


SAMPLE_HIERARCHY = """\
# Sample feature tree. Each [[levels]] table is one level; every level but
# the first names the node it belongs to with "parent".

[[levels]]
id = "benefits"
label = "Benefits"

[[levels.nodes]]
id = "faster-onboarding"
label = "Faster onboarding"
description = "New team members find their way without help."

[[levels.nodes]]
id = "fewer-errors"
label = "Fewer errors"
description = "Validation catches mistakes before they ship."
leaf = true

[[levels]]
id = "functions"
label = "Functions"
parent = "faster-onboarding"

[[levels.nodes]]
id = "guided-tour"
label = "Guided tour"
description = "Step-by-step walkthrough of the main screens."

[[levels.nodes]]
id = "glossary"
label = "Glossary"
description = "Definitions of the terms used across the product."
leaf = true

[[levels]]
id = "details"
label = "Details"
parent = "guided-tour"

[[levels.nodes]]
id = "tour-steps"
label = "Tour steps"
description = "Each step highlights one control and explains what it does."
leaf = true
"""


def write_sample_hierarchy(path: Path) -> None:
    """Write the sample hierarchy document to ``path``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(SAMPLE_HIERARCHY)
    logger.info("Wrote sample hierarchy to %s", path)
