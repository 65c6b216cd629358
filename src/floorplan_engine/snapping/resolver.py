"""Snap resolution: turn an imprecise pointer position into an exact one.

Candidates are gathered from four sources (grid, object features, guides,
line intersections), each behind its own switch in :class:`SnapConfig`.
The closest candidate wins if it lies within tolerance; otherwise the query
point is returned unchanged. The full candidate list is always returned so
the canvas can draw snap indicators.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from floorplan_engine.config import SnapConfig
from floorplan_engine.models.geometry import Point2D, segment_intersection
from floorplan_engine.models.guides import Guide, GuideOrientation
from floorplan_engine.models.objects import PlanObject, ShapeKind
from floorplan_engine.snapping.features import CandidateKind, object_features

# Objects whose box is farther than this many tolerances from the query are skipped
FEATURE_SEARCH_FACTOR = 5
# Intersections farther than this many tolerances are not offered
INTERSECTION_SEARCH_FACTOR = 2


@dataclass
class SnapCandidate:
    """A proposed corrected coordinate tagged with its origin."""

    point: Point2D
    kind: CandidateKind
    label: str
    distance: float
    source_object_id: Optional[str] = None


@dataclass
class SnapContext:
    """Read-only scene the resolver snaps against."""

    objects: list[PlanObject] = field(default_factory=list)
    guides: list[Guide] = field(default_factory=list)


@dataclass
class SnapResult:
    """Outcome of one resolve call."""

    point: Point2D
    accepted: bool
    candidates: list[SnapCandidate] = field(default_factory=list)
    snapped_to: Optional[SnapCandidate] = None


@dataclass
class WallConnections:
    """Existing walls/lines a new wall's endpoints would join."""

    start: Optional[PlanObject] = None
    end: Optional[PlanObject] = None


def grid_round(value: float, grid_size: float) -> float:
    """Nearest multiple of ``grid_size``; halves round up."""
    return math.floor(value / grid_size + 0.5) * grid_size


class SnapResolver:
    """Resolves pointer positions against one snap configuration."""

    def __init__(self, config: SnapConfig | None = None) -> None:
        self.config = config or SnapConfig()

    def resolve(self, query: Point2D, context: SnapContext | None = None) -> SnapResult:
        """Snap ``query`` to the closest candidate within tolerance."""
        context = context or SnapContext()
        candidates: list[SnapCandidate] = []
        candidates.extend(self.grid_candidates(query))
        candidates.extend(self.feature_candidates(query, context.objects))
        candidates.extend(self.guide_candidates(query, context.guides))
        candidates.extend(self.intersection_candidates(query, context.objects))

        best: SnapCandidate | None = None
        for candidate in candidates:
            if best is None or candidate.distance < best.distance:
                best = candidate

        if best is not None and best.distance <= self.config.tolerance:
            return SnapResult(
                point=best.point,
                accepted=True,
                candidates=candidates,
                snapped_to=best,
            )
        return SnapResult(point=query, accepted=False, candidates=candidates)

    # ── Candidate sources ─────────────────────────────────────────────

    def grid_candidates(self, query: Point2D) -> list[SnapCandidate]:
        if not self.config.snap_to_grid:
            return []
        size = self.config.grid_size
        point = Point2D(x=grid_round(query.x, size), y=grid_round(query.y, size))
        return [
            SnapCandidate(
                point=point,
                kind=CandidateKind.GRID,
                label=f"Grid ({point.x:g}, {point.y:g})",
                distance=query.distance_to(point),
            )
        ]

    def feature_candidates(
        self, query: Point2D, objects: list[PlanObject]
    ) -> list[SnapCandidate]:
        if not self.config.snap_to_objects:
            return []
        reach = self.config.tolerance * FEATURE_SEARCH_FACTOR
        candidates: list[SnapCandidate] = []
        for obj in objects:
            if obj.bounds().distance_to(query) > reach:
                continue
            for feature in object_features(obj):
                candidates.append(
                    SnapCandidate(
                        point=feature.point,
                        kind=feature.kind,
                        label=feature.label,
                        distance=query.distance_to(feature.point),
                        source_object_id=feature.object_id,
                    )
                )
        return candidates

    def guide_candidates(self, query: Point2D, guides: list[Guide]) -> list[SnapCandidate]:
        if not self.config.snap_to_guides:
            return []
        tolerance = self.config.tolerance
        candidates: list[SnapCandidate] = []
        near_h: Guide | None = None
        near_v: Guide | None = None

        for index, guide in enumerate(guides, start=1):
            if guide.orientation == GuideOrientation.HORIZONTAL:
                point = Point2D(x=query.x, y=guide.offset)
                label = f"Horizontal guide {index}"
                if near_h is None and abs(query.y - guide.offset) <= tolerance:
                    near_h = guide
            else:
                point = Point2D(x=guide.offset, y=query.y)
                label = f"Vertical guide {index}"
                if near_v is None and abs(query.x - guide.offset) <= tolerance:
                    near_v = guide
            candidates.append(
                SnapCandidate(
                    point=point,
                    kind=CandidateKind.GUIDE,
                    label=label,
                    distance=query.distance_to(point),
                )
            )

        if near_h is not None and near_v is not None:
            # Distance is the sum of both axis deviations
            candidates.append(
                SnapCandidate(
                    point=Point2D(x=near_v.offset, y=near_h.offset),
                    kind=CandidateKind.GUIDE,
                    label="Guide intersection",
                    distance=abs(query.x - near_v.offset) + abs(query.y - near_h.offset),
                )
            )
        return candidates

    def intersection_candidates(
        self, query: Point2D, objects: list[PlanObject]
    ) -> list[SnapCandidate]:
        if not self.config.snap_to_objects:
            return []
        reach = self.config.tolerance * INTERSECTION_SEARCH_FACTOR
        segments = [obj.segment() for obj in objects if obj.kind == ShapeKind.LINEAR]
        candidates: list[SnapCandidate] = []
        for i in range(len(segments)):
            for j in range(i + 1, len(segments)):
                crossing = segment_intersection(*segments[i], *segments[j])
                if crossing is None:
                    continue
                distance = query.distance_to(crossing)
                if distance <= reach:
                    candidates.append(
                        SnapCandidate(
                            point=crossing,
                            kind=CandidateKind.INTERSECTION,
                            label="Line intersection",
                            distance=distance,
                        )
                    )
        return candidates

    # ── Wall drawing helpers ──────────────────────────────────────────

    def auto_connect(
        self,
        start: Point2D,
        end: Point2D,
        objects: list[PlanObject],
    ) -> WallConnections:
        """Find walls/lines whose endpoints a new wall's ends would join.

        The last matching object wins for each end.
        """
        tolerance = self.config.tolerance
        connections = WallConnections()
        for obj in objects:
            if obj.kind != ShapeKind.LINEAR:
                continue
            wall_start, wall_end = obj.segment()
            if min(start.distance_to(wall_start), start.distance_to(wall_end)) <= tolerance:
                connections.start = obj
            if min(end.distance_to(wall_start), end.distance_to(wall_end)) <= tolerance:
                connections.end = obj
        return connections
