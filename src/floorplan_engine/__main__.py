"""Floor-plan engine CLI.

Usage:
    python -m floorplan_engine <command> <snapshot.json> [options]

Every command reads a plan snapshot (objects, rooms, guides, snap
settings) exported by the editor and prints JSON to stdout. Nothing is
written back to the snapshot.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from floorplan_engine.models.geometry import Point2D
from floorplan_engine.models.snapshot import PlanSnapshot
from floorplan_engine.rooms.manager import boundary_path
from floorplan_engine.sections.engine import SectionEngine
from floorplan_engine.snapping.resolver import SnapContext, SnapResolver
from floorplan_engine.validators.engine import ValidationEngine
from floorplan_engine.validators.spaces import SQ_INCHES_PER_SQ_FOOT

app = typer.Typer(
    name="floorplan_engine",
    help="Floor-plan engine CLI for snapping, sections, rooms and validation.",
    no_args_is_help=True,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _load_snapshot(path: Path) -> PlanSnapshot:
    """Load a snapshot JSON file or exit with a JSON error."""
    if not path.exists():
        _output({"ok": False, "error": f"Snapshot not found: {path}"})
        raise typer.Exit(1)
    try:
        return PlanSnapshot.load(path)
    except ValidationError as exc:
        _output({"ok": False, "error": f"Invalid snapshot: {exc.error_count()} error(s)",
                 "details": json.loads(exc.json())})
        raise typer.Exit(1)


def _point(p: Point2D) -> dict:
    return {"x": p.x, "y": p.y}


def _output(data: dict) -> None:
    """Print JSON output to stdout."""
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.command()
def version() -> None:
    """Show version."""
    from floorplan_engine import __version__

    typer.echo(f"floorplan-engine v{__version__}")


@app.command()
def validate(
    snapshot: Path = typer.Argument(..., help="Snapshot JSON file"),
    category: Optional[str] = typer.Option(None, "--category", "-c", help="Only this category"),
    severity: Optional[str] = typer.Option(None, "--severity", "-s", help="Only this severity"),
):
    """Run all validation rules on a snapshot."""
    plan = _load_snapshot(snapshot)
    report = ValidationEngine().report(plan.objects, plan.rooms)

    issues = report.sorted()
    try:
        if category:
            wanted = {id(i) for i in report.by_category(category)}
            issues = [i for i in issues if id(i) in wanted]
        if severity:
            wanted = {id(i) for i in report.by_severity(severity)}
            issues = [i for i in issues if id(i) in wanted]
    except ValueError as exc:
        _output({"ok": False, "error": str(exc)})
        raise typer.Exit(1)

    _output({
        "ok": True,
        "summary": report.summary().to_dict(),
        "issues": [i.to_dict() for i in issues],
    })


@app.command()
def snap(
    snapshot: Path = typer.Argument(..., help="Snapshot JSON file"),
    x: float = typer.Argument(..., help="Query x"),
    y: float = typer.Argument(..., help="Query y"),
    tolerance: Optional[float] = typer.Option(None, "--tolerance", "-t", help="Override tolerance"),
    grid_size: Optional[float] = typer.Option(None, "--grid-size", "-g", help="Override grid pitch"),
    candidates: bool = typer.Option(False, "--candidates", help="Include all candidates"),
):
    """Resolve a pointer position against the snapshot."""
    plan = _load_snapshot(snapshot)
    try:
        config = plan.snap.with_overrides(tolerance=tolerance, grid_size=grid_size)
    except ValidationError as exc:
        _output({"ok": False, "error": f"Invalid snap settings: {exc.error_count()} error(s)"})
        raise typer.Exit(1)

    result = SnapResolver(config).resolve(
        Point2D(x=x, y=y),
        SnapContext(objects=plan.objects, guides=plan.guides),
    )
    data: dict = {
        "ok": True,
        "point": _point(result.point),
        "accepted": result.accepted,
        "snapped_to": (
            {"kind": result.snapped_to.kind.value, "label": result.snapped_to.label,
             "source_object_id": result.snapped_to.source_object_id}
            if result.snapped_to else None
        ),
        "candidate_count": len(result.candidates),
    }
    if candidates:
        data["candidates"] = [
            {"point": _point(c.point), "kind": c.kind.value, "label": c.label,
             "distance": round(c.distance, 4), "source_object_id": c.source_object_id}
            for c in result.candidates
        ]
    _output(data)


@app.command()
def section(
    snapshot: Path = typer.Argument(..., help="Snapshot JSON file"),
    x1: float = typer.Argument(...),
    y1: float = typer.Argument(...),
    x2: float = typer.Argument(...),
    y2: float = typer.Argument(...),
):
    """Cut a section line through the plan and print the derived slice."""
    plan = _load_snapshot(snapshot)
    engine = SectionEngine(objects=plan.objects)
    engine.begin(Point2D(x=x1, y=y1))
    engine.update(Point2D(x=x2, y=y2))
    view = engine.commit()

    if view is None:
        _output({"ok": True, "committed": False, "reason": "Section line too short"})
        return
    _output({"ok": True, "committed": True, "view": view.model_dump(mode="json")})


@app.command()
def rooms(snapshot: Path = typer.Argument(..., help="Snapshot JSON file")):
    """List committed rooms with area and perimeter."""
    plan = _load_snapshot(snapshot)
    _output({
        "ok": True,
        "rooms": [
            {
                "id": room.id,
                "name": room.name,
                "closed": room.closed,
                "points": len(room.points),
                "area": round(room.area, 2),
                "area_sq_ft": round(room.area / SQ_INCHES_PER_SQ_FOOT, 1),
                "perimeter": round(room.perimeter, 2),
                "path": [_point(p) for p in boundary_path(room)],
            }
            for room in plan.rooms
        ],
    })


if __name__ == "__main__":
    app()
