"""Accept/reject decision for tentative avatar moves."""
from __future__ import annotations

import logging

from .bounds import BoundingVolume
from .scene import Transform

logger = logging.getLogger(__name__)


def resolve(
    previous: Transform,
    proposed_volume: BoundingVolume,
    obstacle_volume: BoundingVolume,
) -> bool:
    """Return ``False`` when the proposed avatar box overlaps the obstacle.

    The whole attempted move is judged at once; there is no per-axis retry.
    Restoring ``previous`` on rejection is the caller's job.
    """

    if proposed_volume.intersects(obstacle_volume):
        logger.debug(f"Move from {previous.position.tolist()} rejected: obstacle overlap")
        return False
    return True
