# plugin.py

import logging
from typing import List, NamedTuple, Optional

from transform import process_layers

logger = logging.getLogger(__name__)

APPLY_MESSAGE_TYPE = "apply-dark-mode"
SUCCESS_NOTICE = "Extreme contrast colors have been applied!"
NO_SELECTION_NOTICE = "Please select a frame or layers."


class PluginResult(NamedTuple):
    nodes: List[dict]
    notice: str
    close_plugin: bool = False


def apply_to_selection(selection: List[dict]) -> PluginResult:
    if not selection:
        logger.info("Nothing selected, skipping recolor")
        return PluginResult(nodes=[], notice=NO_SELECTION_NOTICE)

    nodes = [process_layers(node) for node in selection]
    logger.info("Recolored %d selected node(s)", len(nodes))
    return PluginResult(nodes=nodes, notice=SUCCESS_NOTICE)


def handle_message(msg: dict, selection: List[dict]) -> Optional[PluginResult]:
    """Handle a message posted from the UI panel.

    Only ``apply-dark-mode`` is acted on. The plugin closes after applying,
    whether or not anything was selected.
    """
    if msg.get("type") != APPLY_MESSAGE_TYPE:
        logger.debug("Ignoring message of type %r", msg.get("type"))
        return None

    return apply_to_selection(selection)._replace(close_plugin=True)
