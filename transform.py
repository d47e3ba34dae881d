# transform.py

import logging
from enum import Enum

from colors import rgb_from_paint_color
from luminance import extreme_adjust_luminance

logger = logging.getLogger(__name__)


class NodeKind(Enum):
    FILLED_CONTAINER = "filled_container"
    FILLED = "filled"
    CONTAINER = "container"
    LEAF = "leaf"


def classify_node(node: dict) -> NodeKind:
    # Text nodes with mixed fills carry a non-list marker instead of a list
    has_fills = isinstance(node.get("fills"), list)
    has_children = isinstance(node.get("children"), list)

    if has_fills and has_children:
        return NodeKind.FILLED_CONTAINER
    if has_fills:
        return NodeKind.FILLED
    if has_children:
        return NodeKind.CONTAINER
    return NodeKind.LEAF


def recolor_paint(paint: dict) -> dict:
    if paint.get("type") != "SOLID" or "color" not in paint:
        return paint

    color = paint["color"]
    new_color = extreme_adjust_luminance(rgb_from_paint_color(color))
    return {
        **paint,
        "color": {**color, "r": new_color.r, "g": new_color.g, "b": new_color.b},
    }


def recolor_fills(fills: list) -> list:
    return [recolor_paint(fill) for fill in fills]


def process_layers(node: dict) -> dict:
    """Return a copy of ``node`` with every solid fill in its subtree recolored.

    Children are processed depth-first in their original order. The input
    tree is left untouched.
    """
    kind = classify_node(node)
    transformed = dict(node)

    if kind in (NodeKind.FILLED_CONTAINER, NodeKind.FILLED):
        transformed["fills"] = recolor_fills(node["fills"])
        logger.debug("Recolored fills on node %s", node.get("id", node.get("name")))

    if kind in (NodeKind.FILLED_CONTAINER, NodeKind.CONTAINER):
        transformed["children"] = [process_layers(c) for c in node["children"]]

    return transformed


def count_solid_fills(node: dict) -> int:
    kind = classify_node(node)
    count = 0

    if kind in (NodeKind.FILLED_CONTAINER, NodeKind.FILLED):
        count += sum(1 for f in node["fills"] if f.get("type") == "SOLID" and "color" in f)

    if kind in (NodeKind.FILLED_CONTAINER, NodeKind.CONTAINER):
        count += sum(count_solid_fills(c) for c in node["children"])

    return count
