"""Pointer snapping: grid, object features, guides and line intersections."""

from floorplan_engine.snapping.features import CandidateKind, Feature, object_features
from floorplan_engine.snapping.guides import GuideSet, GuideSnap
from floorplan_engine.snapping.resolver import (
    SnapCandidate,
    SnapContext,
    SnapResolver,
    SnapResult,
    WallConnections,
)

__all__ = [
    "CandidateKind",
    "Feature",
    "object_features",
    "GuideSet",
    "GuideSnap",
    "SnapCandidate",
    "SnapContext",
    "SnapResolver",
    "SnapResult",
    "WallConnections",
]
