"""Validation issue records.

Issues are not persisted: every validation pass regenerates them, and
their ids are derived from the ids of the objects involved so that two
passes over the same snapshot produce identical lists.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from floorplan_engine.models.geometry import Point2D


class IssueKind(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class IssueCategory(str, Enum):
    GEOMETRY = "geometry"
    ARCHITECTURE = "architecture"
    ACCESSIBILITY = "accessibility"
    BUILDING_CODE = "building_code"


class Severity(str, Enum):
    """Urgency ranking, orthogonal to :class:`IssueKind`."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """0 for critical up to 3 for low."""
        return SEVERITY_ORDER.index(self)


SEVERITY_ORDER = [Severity.CRITICAL, Severity.HIGH, Severity.MEDIUM, Severity.LOW]


@dataclass
class ValidationIssue:
    """A single finding of a validation rule."""

    id: str
    kind: IssueKind
    category: IssueCategory
    title: str
    description: str
    severity: Severity
    related_object_ids: list[str] = field(default_factory=list)
    position: Optional[Point2D] = None
    suggestion: Optional[str] = None
    auto_fix: Optional[Callable[[], None]] = field(default=None, compare=False, repr=False)

    def to_dict(self) -> dict:
        """Plain dict for JSON output (``auto_fix`` is dropped)."""
        return {
            "id": self.id,
            "kind": self.kind.value,
            "category": self.category.value,
            "title": self.title,
            "description": self.description,
            "severity": self.severity.value,
            "related_object_ids": list(self.related_object_ids),
            "position": (
                {"x": self.position.x, "y": self.position.y} if self.position else None
            ),
            "suggestion": self.suggestion,
        }
