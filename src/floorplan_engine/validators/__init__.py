"""Rule-based validation of floor plans.

Built-in rules:
- geometry: overlapping objects
- openings: door placement/width, window placement/corner distance
- spaces: minimum room size by room type
- accessibility: door swing clearance
- codes: egress door for every room

engine: rule registry, per-rule fault isolation, report filters and summary.
"""

from floorplan_engine.validators.engine import (
    ValidationEngine,
    ValidationReport,
    ValidationRule,
    ValidationSummary,
    default_rules,
)
from floorplan_engine.validators.issues import (
    IssueCategory,
    IssueKind,
    Severity,
    ValidationIssue,
)

__all__ = [
    "ValidationEngine",
    "ValidationReport",
    "ValidationRule",
    "ValidationSummary",
    "default_rules",
    "IssueCategory",
    "IssueKind",
    "Severity",
    "ValidationIssue",
]
