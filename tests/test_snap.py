"""Tests for snap resolution."""

import pytest

from floorplan_engine.config import SnapConfig
from floorplan_engine.models.geometry import Point2D
from floorplan_engine.models.guides import Guide, GuideOrientation
from floorplan_engine.models.objects import PlanObject
from floorplan_engine.snapping.features import CandidateKind, object_features
from floorplan_engine.snapping.resolver import SnapContext, SnapResolver, grid_round


def _grid_only(**overrides) -> SnapResolver:
    config = SnapConfig(snap_to_objects=False, snap_to_guides=False, **overrides)
    return SnapResolver(config)


def _wall(wall_id: str, x1: float, y1: float, x2: float, y2: float) -> PlanObject:
    return PlanObject(
        id=wall_id, type="wall", position=Point2D(x=0, y=0),
        properties={"points": [x1, y1, x2, y2]},
    )


# ── Fixtures ──────────────────────────────────────────────────────


@pytest.fixture
def crossing_walls() -> list[PlanObject]:
    """Two walls crossing at (100, 100)."""
    return [_wall("w1", 0, 100, 200, 100), _wall("w2", 100, 0, 100, 200)]


@pytest.fixture
def table() -> PlanObject:
    return PlanObject(
        id="t1", type="rectangle", position=Point2D(x=100, y=100),
        properties={"width": 40, "height": 20},
    )


# ── Grid ──────────────────────────────────────────────────────────


class TestGridSnap:
    def test_snaps_to_nearest_grid_point(self):
        result = _grid_only().resolve(Point2D(x=23, y=38))
        assert result.accepted
        assert result.point == Point2D(x=20, y=40)
        assert result.snapped_to.kind == CandidateKind.GRID

    def test_tolerance_boundary_inclusive(self):
        """Distance exactly 10 from (0, 0) with tolerance 10 is accepted."""
        result = _grid_only(tolerance=10, grid_size=20).resolve(Point2D(x=6, y=8))
        assert result.accepted
        assert result.point == Point2D(x=0, y=0)

    def test_just_outside_tolerance_rejected(self):
        query = Point2D(x=6.00006, y=8.00008)  # 10.0001 from (0, 0)
        result = _grid_only(tolerance=10, grid_size=20).resolve(query)
        assert not result.accepted
        assert result.point.x == query.x and result.point.y == query.y
        assert len(result.candidates) == 1

    def test_halves_round_up(self):
        assert grid_round(10, 20) == 20
        assert grid_round(-10, 20) == 0

    def test_idempotent(self):
        resolver = _grid_only()
        first = resolver.resolve(Point2D(x=47, y=61))
        second = resolver.resolve(first.point)
        assert second.point == first.point

    def test_disabled_grid_returns_query(self):
        resolver = SnapResolver(SnapConfig(snap_to_grid=False, snap_to_objects=False))
        result = resolver.resolve(Point2D(x=3, y=3))
        assert not result.accepted
        assert result.candidates == []


# ── Object features ───────────────────────────────────────────────


class TestObjectFeatures:
    def test_rectangle_has_nine_features(self, table: PlanObject):
        features = object_features(table)
        assert len(features) == 9
        kinds = [f.kind for f in features]
        assert kinds.count(CandidateKind.OBJECT_CORNER) == 4
        assert kinds.count(CandidateKind.OBJECT_EDGE) == 4
        assert kinds.count(CandidateKind.OBJECT_CENTER) == 1

    def test_circle_features(self):
        obj = PlanObject(id="c", type="circle", position=Point2D(x=0, y=0),
                         properties={"radius": 5})
        points = {f.point for f in object_features(obj)}
        assert Point2D(x=5, y=0) in points
        assert Point2D(x=0, y=-5) in points
        assert len(points) == 5

    def test_line_features(self):
        features = object_features(_wall("w", 0, 0, 100, 0))
        assert [f.label for f in features] == ["Line start", "Line end", "Line midpoint"]
        assert features[2].point == Point2D(x=50, y=0)

    def test_degenerate_shapes_single_point(self):
        circle = PlanObject(id="c", type="circle", position=Point2D(x=1, y=1),
                            properties={"radius": 0})
        line = _wall("w", 5, 5, 5, 5)
        box = PlanObject(id="r", type="rectangle", position=Point2D(x=2, y=2),
                         properties={"width": 0, "height": 0})
        assert len(object_features(circle)) == 1
        assert len(object_features(line)) == 1
        assert len(object_features(box)) == 1

    def test_snaps_to_corner(self, table: PlanObject):
        resolver = SnapResolver(SnapConfig(snap_to_grid=False))
        result = resolver.resolve(Point2D(x=103, y=98), SnapContext(objects=[table]))
        assert result.accepted
        assert result.point == Point2D(x=100, y=100)
        assert result.snapped_to.source_object_id == "t1"
        assert result.snapped_to.kind == CandidateKind.OBJECT_CORNER

    def test_idempotent_on_edge_far_from_center(self):
        """A long object's edge stays snappable though its center is out of reach."""
        plank = PlanObject(id="p1", type="rectangle", position=Point2D(x=0, y=0),
                           properties={"width": 102, "height": 10})
        resolver = SnapResolver(SnapConfig())
        context = SnapContext(objects=[plank])

        first = resolver.resolve(Point2D(x=1.5, y=5), context)
        assert first.point == Point2D(x=0, y=5)
        assert first.snapped_to.label == "Left edge center"

        second = resolver.resolve(first.point, context)
        assert second.point == Point2D(x=0, y=5)
        assert second.snapped_to.source_object_id == "p1"

    def test_far_objects_pruned(self, table: PlanObject):
        resolver = SnapResolver(SnapConfig(snap_to_grid=False))
        result = resolver.resolve(Point2D(x=500, y=500), SnapContext(objects=[table]))
        assert result.candidates == []

    def test_zero_length_wall_does_not_throw(self):
        resolver = SnapResolver(SnapConfig(snap_to_grid=False))
        walls = [_wall("a", 10, 10, 10, 10), _wall("b", 0, 10, 20, 10)]
        result = resolver.resolve(Point2D(x=11, y=11), SnapContext(objects=walls))
        assert result.accepted
        assert result.point == Point2D(x=10, y=10)


# ── Guides ────────────────────────────────────────────────────────


class TestGuideCandidates:
    def test_horizontal_guide(self):
        resolver = SnapResolver(SnapConfig(snap_to_grid=False, snap_to_objects=False))
        guides = [Guide(orientation=GuideOrientation.HORIZONTAL, offset=50)]
        result = resolver.resolve(Point2D(x=33, y=47), SnapContext(guides=guides))
        assert result.point == Point2D(x=33, y=50)
        assert result.snapped_to.kind == CandidateKind.GUIDE

    def test_vertical_guide(self):
        resolver = SnapResolver(SnapConfig(snap_to_grid=False, snap_to_objects=False))
        guides = [Guide(orientation=GuideOrientation.VERTICAL, offset=80)]
        result = resolver.resolve(Point2D(x=84, y=13), SnapContext(guides=guides))
        assert result.point == Point2D(x=80, y=13)

    def test_crossing_candidate_offered(self):
        resolver = SnapResolver(SnapConfig(snap_to_grid=False, snap_to_objects=False))
        guides = [
            Guide(orientation=GuideOrientation.HORIZONTAL, offset=50),
            Guide(orientation=GuideOrientation.VERTICAL, offset=80),
        ]
        result = resolver.resolve(Point2D(x=83, y=54), SnapContext(guides=guides))
        crossing = next(c for c in result.candidates if c.label == "Guide intersection")
        assert crossing.point == Point2D(x=80, y=50)
        assert crossing.distance == 7  # 3 on x plus 4 on y
        # The single-axis snap is nearer
        assert result.point == Point2D(x=80, y=54)

    def test_guides_disabled(self):
        resolver = SnapResolver(SnapConfig(snap_to_grid=False, snap_to_guides=False))
        guides = [Guide(orientation=GuideOrientation.HORIZONTAL, offset=50)]
        result = resolver.resolve(Point2D(x=33, y=47), SnapContext(guides=guides))
        assert not result.accepted


# ── Intersections ─────────────────────────────────────────────────


class TestIntersections:
    def test_snaps_to_wall_crossing(self, crossing_walls: list[PlanObject]):
        resolver = SnapResolver(SnapConfig(snap_to_grid=False))
        result = resolver.resolve(Point2D(x=104, y=97), SnapContext(objects=crossing_walls))
        crossings = [c for c in result.candidates if c.kind == CandidateKind.INTERSECTION]
        assert len(crossings) == 1
        assert crossings[0].point == Point2D(x=100, y=100)
        assert result.point == Point2D(x=100, y=100)

    def test_far_intersection_not_offered(self, crossing_walls: list[PlanObject]):
        resolver = SnapResolver(SnapConfig(snap_to_grid=False, tolerance=5))
        result = resolver.resolve(Point2D(x=115, y=100), SnapContext(objects=crossing_walls))
        assert not any(c.kind == CandidateKind.INTERSECTION for c in result.candidates)

    def test_parallel_walls_skipped(self):
        walls = [_wall("a", 0, 0, 100, 0), _wall("b", 0, 5, 100, 5)]
        resolver = SnapResolver(SnapConfig(snap_to_grid=False))
        result = resolver.resolve(Point2D(x=50, y=2), SnapContext(objects=walls))
        assert not any(c.kind == CandidateKind.INTERSECTION for c in result.candidates)

    def test_idempotent_on_intersection(self, crossing_walls: list[PlanObject]):
        resolver = SnapResolver(SnapConfig())
        context = SnapContext(objects=crossing_walls)
        first = resolver.resolve(Point2D(x=104, y=97), context)
        assert resolver.resolve(first.point, context).point == first.point


class TestAutoConnect:
    def test_endpoints_join_existing_walls(self, crossing_walls: list[PlanObject]):
        resolver = SnapResolver(SnapConfig(tolerance=10))
        links = resolver.auto_connect(
            Point2D(x=203, y=101), Point2D(x=300, y=300), crossing_walls
        )
        assert links.start is not None and links.start.id == "w1"
        assert links.end is None
