# astar_lab/app/palette.py
"""
Colours per node classification (visuals only; no logic).

Every NodeType needs an entry in FILL; the viewer looks colours up here and
never branches on the classification itself.
"""

from typing import Dict, Optional, Tuple

from astar_lab.core.types import NodeType

RGB = Tuple[int, int, int]

# ---- palette ----
BLACK        = (0, 0, 0)
WHITE        = (255, 255, 255)
GREEN        = (0x22, 0xdd, 0x22)
BLUE         = (0x44, 0x44, 0xdd)
RED          = (0xdd, 0x22, 0x22)

BACKGROUND   = BLACK
BORDER       = WHITE
TEXT         = BLACK

# None means "leave the background showing"
FILL: Dict[NodeType, Optional[RGB]] = {
    NodeType.EMPTY:     None,
    NodeType.WALL:      WHITE,
    NodeType.START:     GREEN,
    NodeType.END:       GREEN,
    NodeType.POTENTIAL: BLUE,
    NodeType.CHECKED:   RED,
    NodeType.SELECTED:  GREEN,
}

# Cells drawn with a centred label instead of their costs
LABEL: Dict[NodeType, str] = {
    NodeType.START: "START",
    NodeType.END:   "END",
}

# Cells whose g / h / f are drawn
SHOWS_COSTS = frozenset({NodeType.POTENTIAL, NodeType.CHECKED, NodeType.SELECTED})


def fill_for(kind: NodeType) -> Optional[RGB]:
    return FILL[kind]
