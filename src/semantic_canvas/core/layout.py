"""
Canvas geometry: node sizes, spacing and edge side selection.
"""

import uuid
from typing import Callable, Tuple

from ..shared.models.canvas import CanvasNode

IdFactory = Callable[[], str]

MARGIN = 50
COLUMN_GAP = 200

ANCHOR_WIDTH = 400
ANCHOR_HEIGHT = 400

CARD_WIDTH = 250
CARD_HEIGHT = 60
LONG_CARD_WIDTH = 400
LONG_CARD_HEIGHT = 120
LONG_TEXT_THRESHOLD = 15

FILE_WIDTH = 400
FILE_HEIGHT = 300
URL_WIDTH = 400
URL_HEIGHT = 300

# Single values stack at x=0; groups get their own column to the right
SINGLE_COLUMN_X = 0
GROUP_COLUMN_X = LONG_CARD_WIDTH + COLUMN_GAP


def new_node_id() -> str:
    """16 hex characters, the id shape canvas editors generate."""
    return uuid.uuid4().hex[:16]


def node_center(node: CanvasNode) -> Tuple[float, float]:
    return node.x + node.width / 2, node.y + node.height / 2


def select_sides(from_node: CanvasNode, to_node: CanvasNode) -> Tuple[str, str]:
    """
    Pick ``(from_side, to_side)`` for an edge between two nodes.

    The axis with the larger displacement between centers decides between
    top/bottom and left/right; its sign decides which end gets which side.
    """
    from_x, from_y = node_center(from_node)
    to_x, to_y = node_center(to_node)
    dx = to_x - from_x
    dy = to_y - from_y

    if abs(dy) > abs(dx):
        return ("bottom", "top") if dy > 0 else ("top", "bottom")
    return ("right", "left") if dx >= 0 else ("left", "right")
