"""Rule registry and validation runs.

Validation is pull-based: callers run it after whatever graph changes they
want reflected. A rule that raises is logged and contributes no issues for
that pass; the other rules still run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from floorplan_engine.models.objects import PlanObject
from floorplan_engine.models.rooms import RoomBoundary
from floorplan_engine.validators.accessibility import check_door_clearance
from floorplan_engine.validators.codes import check_egress
from floorplan_engine.validators.geometry import check_overlaps
from floorplan_engine.validators.issues import (
    IssueCategory,
    IssueKind,
    Severity,
    ValidationIssue,
)
from floorplan_engine.validators.openings import check_door_placement, check_window_placement
from floorplan_engine.validators.spaces import check_room_sizes

logger = logging.getLogger(__name__)

RuleFn = Callable[[list[PlanObject], list[RoomBoundary]], list[ValidationIssue]]


@dataclass
class ValidationRule:
    """An independent check over the object graph and committed rooms."""

    id: str
    name: str
    category: IssueCategory
    evaluate: RuleFn
    enabled: bool = True


@dataclass
class ValidationSummary:
    """Issue counts per severity and per kind."""

    total: int = 0
    critical: int = 0
    high: int = 0
    medium: int = 0
    low: int = 0
    errors: int = 0
    warnings: int = 0
    info: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "total": self.total,
            "critical": self.critical,
            "high": self.high,
            "medium": self.medium,
            "low": self.low,
            "errors": self.errors,
            "warnings": self.warnings,
            "info": self.info,
        }


@dataclass
class ValidationReport:
    """Issues of one validation pass, with filters and a summary."""

    issues: list[ValidationIssue] = field(default_factory=list)

    def by_category(self, category: IssueCategory | str) -> list[ValidationIssue]:
        category = IssueCategory(category)
        return [i for i in self.issues if i.category == category]

    def by_severity(self, severity: Severity | str) -> list[ValidationIssue]:
        severity = Severity(severity)
        return [i for i in self.issues if i.severity == severity]

    def by_kind(self, kind: IssueKind | str) -> list[ValidationIssue]:
        kind = IssueKind(kind)
        return [i for i in self.issues if i.kind == kind]

    def for_object(self, object_id: str) -> list[ValidationIssue]:
        return [i for i in self.issues if object_id in i.related_object_ids]

    def sorted(self) -> list[ValidationIssue]:
        """Most severe first; rule order kept within a severity."""
        return sorted(self.issues, key=lambda i: i.severity.rank)

    def summary(self) -> ValidationSummary:
        s = ValidationSummary(total=len(self.issues))
        for issue in self.issues:
            setattr(s, issue.severity.value, getattr(s, issue.severity.value) + 1)
            if issue.kind == IssueKind.ERROR:
                s.errors += 1
            elif issue.kind == IssueKind.WARNING:
                s.warnings += 1
            else:
                s.info += 1
        return s


def default_rules() -> list[ValidationRule]:
    """Fresh instances of the built-in rules, in evaluation order."""
    return [
        ValidationRule(
            id="overlapping-objects",
            name="Overlapping Objects",
            category=IssueCategory.GEOMETRY,
            evaluate=check_overlaps,
        ),
        ValidationRule(
            id="door-placement",
            name="Door Placement",
            category=IssueCategory.ARCHITECTURE,
            evaluate=check_door_placement,
        ),
        ValidationRule(
            id="window-placement",
            name="Window Placement",
            category=IssueCategory.ARCHITECTURE,
            evaluate=check_window_placement,
        ),
        ValidationRule(
            id="room-size",
            name="Room Size Validation",
            category=IssueCategory.ARCHITECTURE,
            evaluate=check_room_sizes,
        ),
        ValidationRule(
            id="door-clearance",
            name="Door Clearance",
            category=IssueCategory.ACCESSIBILITY,
            evaluate=check_door_clearance,
        ),
        ValidationRule(
            id="egress-requirements",
            name="Egress Requirements",
            category=IssueCategory.BUILDING_CODE,
            evaluate=check_egress,
        ),
    ]


class ValidationEngine:
    """Runs registered rules against a plan snapshot."""

    def __init__(self, rules: list[ValidationRule] | None = None, enabled: bool = True) -> None:
        self.rules: list[ValidationRule] = default_rules() if rules is None else list(rules)
        self.enabled = enabled

    def get_rule(self, rule_id: str) -> ValidationRule | None:
        return next((r for r in self.rules if r.id == rule_id), None)

    def register(self, rule: ValidationRule) -> None:
        """Add a rule, replacing any rule with the same id in place."""
        for index, existing in enumerate(self.rules):
            if existing.id == rule.id:
                self.rules[index] = rule
                return
        self.rules.append(rule)

    def unregister(self, rule_id: str) -> None:
        self.rules = [r for r in self.rules if r.id != rule_id]

    def set_enabled(self, rule_id: str, enabled: bool) -> None:
        rule = self.get_rule(rule_id)
        if rule is None:
            logger.debug("set_enabled: no rule %s", rule_id)
            return
        rule.enabled = enabled

    def run(
        self,
        objects: list[PlanObject],
        rooms: list[RoomBoundary],
    ) -> list[ValidationIssue]:
        """Evaluate every enabled rule and concatenate their issues."""
        if not self.enabled:
            return []

        issues: list[ValidationIssue] = []
        for rule in self.rules:
            if not rule.enabled:
                continue
            try:
                found = list(rule.evaluate(objects, rooms))
            except Exception:
                logger.exception("Validation rule %s failed", rule.id)
                continue
            issues.extend(found)
        return issues

    def report(
        self,
        objects: list[PlanObject],
        rooms: list[RoomBoundary],
    ) -> ValidationReport:
        return ValidationReport(issues=self.run(objects, rooms))
