"""OverlapDetector — pairwise room comparison using 2D AABB overlap.

Rectangles are half-open: two rooms that only share an edge do not
overlap.  Each unordered pair is compared once.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from blueprintgen.models.blueprint import Room

logger = logging.getLogger(__name__)

Box = tuple[float, float, float, float]


class OverlapResult:
    """A single overlap between two rooms."""

    def __init__(
        self,
        room_a_id: str,
        room_b_id: str,
        overlap_area: float,
        message: str,
    ) -> None:
        self.room_a_id = room_a_id
        self.room_b_id = room_b_id
        self.overlap_area = overlap_area
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {
            "room_a_id": self.room_a_id,
            "room_b_id": self.room_b_id,
            "overlap_area": self.overlap_area,
            "message": self.message,
        }


def boxes_overlap(a: Box, b: Box) -> bool:
    """True unless one box lies entirely left/right/above/below the other."""
    return not (a[2] <= b[0] or a[0] >= b[2] or a[3] <= b[1] or a[1] >= b[3])


def overlap_area(a: Box, b: Box) -> float:
    """Area of the intersection of two boxes (0.0 when disjoint)."""
    dx = min(a[2], b[2]) - max(a[0], b[0])
    dy = min(a[3], b[3]) - max(a[1], b[1])
    if dx <= 0 or dy <= 0:
        return 0.0
    return dx * dy


class OverlapDetector:
    """Detect overlapping rooms in a layout."""

    def detect(self, rooms: Sequence[Room]) -> list[OverlapResult]:
        """Return one OverlapResult per overlapping unordered pair."""
        results: list[OverlapResult] = []
        boxes = [room.bounds() for room in rooms]

        # O(n^2), fine for room-level checks
        for i in range(len(rooms)):
            for j in range(i + 1, len(rooms)):
                if not boxes_overlap(boxes[i], boxes[j]):
                    continue
                a, b = rooms[i], rooms[j]
                results.append(OverlapResult(
                    room_a_id=a.id,
                    room_b_id=b.id,
                    overlap_area=round(overlap_area(boxes[i], boxes[j]), 2),
                    message=f"{a.name} overlaps with {b.name}",
                ))

        if results:
            logger.debug("Found %d overlapping room pairs", len(results))
        return results
