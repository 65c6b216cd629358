"""Guide management and guide-only snapping.

The room tool snaps clicked points to guides only (no grid or object
features), so guide snapping is available on its own here in addition to
being one candidate source of :class:`~floorplan_engine.snapping.resolver.SnapResolver`.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

from floorplan_engine.models.geometry import Point2D
from floorplan_engine.models.guides import Guide, GuideOrientation

logger = logging.getLogger(__name__)


@dataclass
class GuideSnap:
    """Result of snapping a point to guides."""

    snapped: bool
    point: Point2D
    guide: Optional[Guide] = None
    distance: float = 0.0


class GuideSet:
    """The guides of one editing session."""

    def __init__(
        self,
        guides: list[Guide] | None = None,
        tolerance: float = 10.0,
        enabled: bool = True,
    ) -> None:
        self.guides: list[Guide] = list(guides or [])
        self.tolerance = tolerance
        self.enabled = enabled

    def get(self, guide_id: str) -> Guide | None:
        return next((g for g in self.guides if g.id == guide_id), None)

    def horizontal(self) -> list[Guide]:
        return [g for g in self.guides if g.orientation == GuideOrientation.HORIZONTAL]

    def vertical(self) -> list[Guide]:
        return [g for g in self.guides if g.orientation == GuideOrientation.VERTICAL]

    # ── Management ────────────────────────────────────────────────────

    def add(
        self,
        orientation: GuideOrientation | str,
        offset: float,
        temporary: bool = False,
    ) -> str:
        """Add a guide and return its id. Temporary guides get a 'Temp' label."""
        guide = Guide(
            orientation=GuideOrientation(orientation),
            offset=offset,
            is_temporary=temporary,
            label="Temp" if temporary else None,
        )
        self.guides.append(guide)
        return guide.id

    def remove(self, guide_id: str) -> None:
        before = len(self.guides)
        self.guides = [g for g in self.guides if g.id != guide_id]
        if len(self.guides) == before:
            logger.debug("remove: no guide %s", guide_id)

    def move(self, guide_id: str, offset: float) -> None:
        guide = self.get(guide_id)
        if guide is None:
            logger.debug("move: no guide %s", guide_id)
            return
        guide.offset = offset

    def make_permanent(self, guide_id: str, label: str | None = None) -> None:
        guide = self.get(guide_id)
        if guide is None:
            logger.debug("make_permanent: no guide %s", guide_id)
            return
        guide.is_temporary = False
        guide.label = label

    def clear_temporary(self) -> None:
        self.guides = [g for g in self.guides if not g.is_temporary]

    def clear(self) -> None:
        self.guides = []

    # ── Snapping ──────────────────────────────────────────────────────

    def snap(self, point: Point2D) -> GuideSnap:
        """Snap ``point`` to the nearest guide within tolerance.

        Single-axis snaps move one coordinate. When a horizontal and a
        vertical guide are both in range, their crossing is used if the sum
        of both deviations is strictly smaller than the best single-axis
        deviation.
        """
        if not self.enabled or not self.guides:
            return GuideSnap(snapped=False, point=point)

        best = GuideSnap(snapped=False, point=point, distance=math.inf)

        for guide in self.horizontal():
            distance = abs(point.y - guide.offset)
            if distance <= self.tolerance and distance < best.distance:
                best = GuideSnap(
                    snapped=True,
                    point=Point2D(x=point.x, y=guide.offset),
                    guide=guide,
                    distance=distance,
                )

        for guide in self.vertical():
            distance = abs(point.x - guide.offset)
            if distance <= self.tolerance and distance < best.distance:
                best = GuideSnap(
                    snapped=True,
                    point=Point2D(x=guide.offset, y=point.y),
                    guide=guide,
                    distance=distance,
                )

        crossing = self.crossing_near(point)
        if crossing is not None:
            h_guide, v_guide = crossing
            h_dist = abs(point.y - h_guide.offset)
            v_dist = abs(point.x - v_guide.offset)
            total = h_dist + v_dist
            if total < best.distance:
                best = GuideSnap(
                    snapped=True,
                    point=Point2D(x=v_guide.offset, y=h_guide.offset),
                    guide=h_guide if h_dist < v_dist else v_guide,
                    distance=total,
                )

        if not best.snapped:
            best.distance = 0.0
        return best

    def crossing_near(self, point: Point2D) -> tuple[Guide, Guide] | None:
        """First horizontal and first vertical guide both within tolerance."""
        h_guide = next(
            (g for g in self.horizontal() if abs(point.y - g.offset) <= self.tolerance),
            None,
        )
        v_guide = next(
            (g for g in self.vertical() if abs(point.x - g.offset) <= self.tolerance),
            None,
        )
        if h_guide is None or v_guide is None:
            return None
        return h_guide, v_guide
