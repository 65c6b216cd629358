"""Tests for section lines and derived section views."""

import pytest

from floorplan_engine.models.geometry import Point2D
from floorplan_engine.models.objects import PlanObject
from floorplan_engine.models.sections import SectionDirection, SectionLine
from floorplan_engine.sections.engine import SectionDrawState, SectionEngine, arrow_points
from floorplan_engine.sections.slice import line_box_crossing, slice_objects


def _p(x: float, y: float) -> Point2D:
    return Point2D(x=x, y=y)


@pytest.fixture
def plan_objects() -> list[PlanObject]:
    """A horizontal wall at y=100 with a door in it and a window further east."""
    return [
        PlanObject(id="w1", type="wall", position=_p(0, 100),
                   properties={"points": [0, 0, 200, 0], "thickness": 8}),
        PlanObject(id="d1", type="door", position=_p(80, 97),
                   properties={"width": 36, "height": 6}),
        PlanObject(id="win1", type="window", position=_p(300, 97),
                   properties={"width": 48, "height": 6}),
    ]


@pytest.fixture
def engine(plan_objects: list[PlanObject]) -> SectionEngine:
    return SectionEngine(objects=plan_objects)


def _draw(engine: SectionEngine, start: Point2D, end: Point2D):
    engine.begin(start)
    engine.update(end)
    return engine.commit()


# ── Drawing ───────────────────────────────────────────────────────


class TestDrawing:
    def test_begin_enters_drawing(self, engine: SectionEngine):
        line = engine.begin(_p(0, 0))
        assert engine.state == SectionDrawState.DRAWING
        assert line.start == line.end

    def test_short_line_discarded(self, engine: SectionEngine):
        assert _draw(engine, _p(0, 0), _p(5, 0)) is None
        assert engine.lines == []
        assert engine.views == []
        assert engine.state == SectionDrawState.IDLE

    def test_long_line_committed(self, engine: SectionEngine):
        view = _draw(engine, _p(0, 0), _p(0, 30))
        assert view is not None
        assert len(engine.lines) == 1
        assert len(engine.views) == 1
        assert view.section_line_id == engine.lines[0].id
        assert engine.state == SectionDrawState.COMMITTED

    def test_names_follow_sequence(self, engine: SectionEngine):
        _draw(engine, _p(0, 0), _p(30, 0))
        _draw(engine, _p(0, 50), _p(30, 50))
        assert [line.name for line in engine.lines] == ["Section 1", "Section 2"]
        assert engine.views[1].name == "Section 2 View"

    def test_update_without_begin_ignored(self, engine: SectionEngine):
        engine.update(_p(10, 10))
        assert engine.current is None
        assert engine.commit() is None

    def test_cancel(self, engine: SectionEngine):
        engine.begin(_p(0, 0))
        engine.cancel()
        assert engine.state == SectionDrawState.IDLE
        assert engine.current is None

    def test_disabled(self, plan_objects: list[PlanObject]):
        engine = SectionEngine(objects=plan_objects, enabled=False)
        assert engine.begin(_p(0, 0)) is None


# ── Slicing ───────────────────────────────────────────────────────


class TestSlice:
    def test_cuts_wall_and_door(self, engine: SectionEngine):
        view = _draw(engine, _p(100, 0), _p(100, 200))
        assert [w.id for w in view.slice.walls] == ["w1"]
        assert [d.id for d in view.slice.doors] == ["d1"]
        assert view.slice.windows == []

    def test_sliced_wall_defaults(self, engine: SectionEngine):
        wall = _draw(engine, _p(100, 0), _p(100, 200)).slice.walls[0]
        assert wall.position == _p(100, 100)
        assert wall.thickness == 8
        assert wall.height == 96
        assert wall.material == "Drywall"

    def test_sliced_door_defaults(self, engine: SectionEngine):
        door = _draw(engine, _p(100, 0), _p(100, 200)).slice.doors[0]
        assert door.type == "single"
        assert door.height == 6

    def test_miss_returns_empty_slice(self, engine: SectionEngine):
        view = _draw(engine, _p(500, 0), _p(500, 50))
        assert view.slice.element_count == 0
        assert view.slice.max_height == 96

    def test_window_top_raises_max_height(self):
        window = PlanObject(id="win", type="window", position=_p(0, 0),
                            properties={"width": 48, "height": 48, "sill_height": 60})
        line = SectionLine(start=_p(10, -10), end=_p(10, 100))
        result = slice_objects(line, [window])
        assert result.windows[0].top == 108
        assert result.max_height == 108

    def test_line_box_crossing_returns_center(self, plan_objects: list[PlanObject]):
        door = plan_objects[1]
        assert line_box_crossing(_p(90, 0), _p(90, 200), door.bounds()) == _p(98, 100)
        assert line_box_crossing(_p(0, 0), _p(50, 0), door.bounds()) is None


# ── Editing ───────────────────────────────────────────────────────


class TestEditing:
    def test_moving_endpoints_rebuilds_view(self, engine: SectionEngine):
        view = _draw(engine, _p(500, 0), _p(500, 200))
        line_id = view.section_line_id
        assert view.slice.element_count == 0

        rebuilt = engine.update_line(line_id, start=_p(100, 0), end=_p(100, 200))
        assert rebuilt.slice.element_count == 2
        assert engine.get_view(line_id).slice.element_count == 2
        assert len(engine.views) == 1

    def test_style_change_keeps_view(self, engine: SectionEngine):
        view = _draw(engine, _p(100, 0), _p(100, 200))
        line_id = view.section_line_id
        engine.update_line(line_id, color="#000000", id="ignored")
        line = engine.get_line(line_id)
        assert line.color == "#000000"
        assert engine.get_view(line_id) == view

    def test_rename_retitles_view(self, engine: SectionEngine):
        view = _draw(engine, _p(100, 0), _p(100, 200))
        line_id = view.section_line_id
        renamed = engine.update_line(line_id, name="Kitchen Cut")
        assert engine.get_line(line_id).name == "Kitchen Cut"
        assert renamed.name == "Kitchen Cut View"
        assert engine.get_view(line_id).name == "Kitchen Cut View"
        assert renamed.slice == view.slice
        assert len(engine.views) == 1

    def test_remove_line_removes_view(self, engine: SectionEngine):
        view = _draw(engine, _p(100, 0), _p(100, 200))
        engine.remove_line(view.section_line_id)
        assert engine.lines == []
        assert engine.views == []

    def test_refresh_rebuilds_all_views(self, engine: SectionEngine):
        _draw(engine, _p(100, 0), _p(100, 200))
        engine.refresh([])
        assert engine.views[0].slice.element_count == 0

    def test_unknown_line(self, engine: SectionEngine):
        assert engine.update_line("section-missing", color="#000000") is None


class TestArrow:
    def test_arrow_at_end(self):
        line = SectionLine(start=_p(0, 0), end=_p(100, 0))
        tip, left, right = arrow_points(line)
        assert tip == _p(100, 0)
        assert left == _p(88, 6)
        assert right == _p(88, -6)

    def test_arrow_at_start_when_reversed(self):
        line = SectionLine(start=_p(0, 0), end=_p(100, 0),
                           direction=SectionDirection.RIGHT_TO_LEFT)
        assert arrow_points(line)[0] == _p(0, 0)

    def test_zero_length_has_no_arrow(self):
        assert arrow_points(SectionLine(start=_p(1, 1), end=_p(1, 1))) == []
