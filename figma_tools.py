import os
import logging
import requests
from dotenv import load_dotenv
from mcp_server import mcp
from colors import rgb_from_hex, rgb_to_hex
from luminance import transform_color as _transform_color
from plugin import apply_to_selection
from transform import count_solid_fills

load_dotenv()
FIGMA_API_KEY = os.getenv("FIGMA_API_KEY")
FIGMA_API_BASE_URL = os.getenv("FIGMA_API_BASE_URL", "https://api.figma.com/v1")
FIGMA_API_TIMEOUT = float(os.getenv("FIGMA_API_TIMEOUT", "30"))

logger = logging.getLogger(__name__)


def figma_api_get(path, params=None):
    if not FIGMA_API_KEY:
        raise RuntimeError("Missing FIGMA_API_KEY in .env")
    headers = {"X-Figma-Token": FIGMA_API_KEY}
    url = f"{FIGMA_API_BASE_URL}{path}"
    res = requests.get(url, headers=headers, params=params, timeout=FIGMA_API_TIMEOUT)
    res.raise_for_status()
    return res.json()


def fetch_nodes(fileKey: str, nodeIds: str) -> list:
    """Fetch node documents for a comma-separated list of node ids, in order."""
    ids = [i.strip().replace("-", ":") for i in nodeIds.split(",") if i.strip()]
    if not ids:
        return []

    raw = figma_api_get(f"/files/{fileKey}/nodes", params={"ids": ",".join(ids)})
    nodes = raw.get("nodes") or {}

    documents = []
    for node_id in ids:
        entry = nodes.get(node_id)
        if not entry or not entry.get("document"):
            raise KeyError(f"Node ID '{node_id}' not found. Available nodes: {list(nodes.keys())}")
        documents.append(entry["document"])
    return documents


def dark_mode_for_nodes(fileKey: str, nodeIds: str) -> dict:
    selection = fetch_nodes(fileKey, nodeIds)
    result = apply_to_selection(selection)
    return {
        "notice": result.notice,
        "design": result.nodes,
        "recolored_fills": sum(count_solid_fills(n) for n in selection),
    }


def transform_hex(hex_color: str) -> dict:
    recolored = _transform_color(rgb_from_hex(hex_color))
    return {
        "input": rgb_to_hex(rgb_from_hex(hex_color)),
        "output": rgb_to_hex(recolored),
        "rgb": recolored._asdict(),
    }


@mcp.tool(
    name="apply_dark_mode",
    description="""
    Applies the extreme dark-mode recolor to the given Figma nodes.

    Every solid fill in each node and its descendants gets its lightness inverted
    and squared and its saturation cut to 30%. Returns the recolored node trees.
    `nodeIds` is a comma-separated list; an empty list reports that nothing is selected.
    """
)
def apply_dark_mode(fileKey: str, nodeIds: str = ""):
    try:
        logger.info("Applying dark mode to %s in file %s", nodeIds or "<nothing>", fileKey)
        return dark_mode_for_nodes(fileKey, nodeIds)
    except Exception as e:
        logger.exception("apply_dark_mode failed")
        return {"error": f"Failed to apply dark mode: {e}"}


@mcp.tool(
    name="transform_color",
    description="""
    Shows what the extreme dark-mode recolor does to a single hex color (e.g. "#336699").
    """
)
def transform_color(hexColor: str):
    try:
        return transform_hex(hexColor)
    except Exception as e:
        logger.exception("transform_color failed")
        return {"error": f"Failed to transform color: {e}"}
