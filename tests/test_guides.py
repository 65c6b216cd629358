"""Tests for guide management and guide snapping."""

import pytest

from floorplan_engine.models.geometry import Point2D
from floorplan_engine.models.guides import Guide, GuideOrientation
from floorplan_engine.snapping.guides import GuideSet


@pytest.fixture
def guides() -> GuideSet:
    gs = GuideSet(tolerance=10)
    gs.add("horizontal", 100)
    gs.add("vertical", 200)
    return gs


class TestGuideManagement:
    def test_add_returns_id(self):
        gs = GuideSet()
        guide_id = gs.add(GuideOrientation.HORIZONTAL, 50)
        assert guide_id.startswith("guide-")
        assert gs.get(guide_id).offset == 50

    def test_temporary_label_and_color(self):
        gs = GuideSet()
        guide = gs.get(gs.add("vertical", 10, temporary=True))
        assert guide.label == "Temp"
        assert guide.color == "#FF6B6B"

    def test_permanent_color(self):
        assert Guide(orientation="horizontal", offset=0).color == "#3B82F6"

    def test_move(self, guides: GuideSet):
        guide = guides.horizontal()[0]
        guides.move(guide.id, 150)
        assert guide.offset == 150

    def test_make_permanent(self):
        gs = GuideSet()
        guide_id = gs.add("horizontal", 10, temporary=True)
        gs.make_permanent(guide_id, label="Counter line")
        guide = gs.get(guide_id)
        assert not guide.is_temporary
        assert guide.label == "Counter line"

    def test_clear_temporary_keeps_permanent(self, guides: GuideSet):
        guides.add("horizontal", 300, temporary=True)
        guides.clear_temporary()
        assert len(guides.guides) == 2

    def test_remove_and_clear(self, guides: GuideSet):
        guides.remove(guides.vertical()[0].id)
        assert guides.vertical() == []
        guides.clear()
        assert guides.guides == []

    def test_unknown_ids_are_ignored(self, guides: GuideSet):
        guides.remove("guide-missing")
        guides.move("guide-missing", 5)
        guides.make_permanent("guide-missing")
        assert len(guides.guides) == 2


class TestGuideSnap:
    def test_horizontal_moves_y_only(self, guides: GuideSet):
        snap = guides.snap(Point2D(x=20, y=96))
        assert snap.snapped
        assert snap.point == Point2D(x=20, y=100)
        assert snap.distance == 4

    def test_vertical_moves_x_only(self, guides: GuideSet):
        snap = guides.snap(Point2D(x=207, y=20))
        assert snap.point == Point2D(x=200, y=20)

    def test_out_of_range(self, guides: GuideSet):
        snap = guides.snap(Point2D(x=20, y=20))
        assert not snap.snapped
        assert snap.point == Point2D(x=20, y=20)
        assert snap.distance == 0

    def test_near_crossing_takes_closer_axis(self, guides: GuideSet):
        snap = guides.snap(Point2D(x=203, y=98))
        assert snap.point == Point2D(x=203, y=100)

    def test_disabled(self, guides: GuideSet):
        guides.enabled = False
        assert not guides.snap(Point2D(x=20, y=96)).snapped

    def test_crossing_near(self, guides: GuideSet):
        h, v = guides.crossing_near(Point2D(x=205, y=105))
        assert h.offset == 100 and v.offset == 200
        assert guides.crossing_near(Point2D(x=0, y=105)) is None
