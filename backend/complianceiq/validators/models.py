"""Validation models — issue types, severity levels, scoring, and result structure.

All validation is deterministic: same input → same output, no randomness, no I/O.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel


class Category(str, Enum):
    """What kind of defect a finding describes."""

    STRUCTURE = "Structure"  # Required section missing
    METADATA = "Metadata"    # Header fields malformed or absent
    CONTENT = "Content"      # Body text incomplete or weak


class Severity(str, Enum):
    """Issue severity levels. Drives scoring weight and UI styling."""

    CRITICAL = "Critical"  # Blocks approval
    MAJOR = "Major"        # May impact audit outcomes
    MINOR = "Minor"        # Best-practice gap


# Score deduction units per severity. Each unit costs SCORE_MULTIPLIER points.
SEVERITY_WEIGHTS = {
    Severity.CRITICAL: 3,
    Severity.MAJOR: 2,
    Severity.MINOR: 1,
}

SCORE_MULTIPLIER = 5
MAX_SCORE = 100


class Issue(BaseModel):
    """A single detected rule violation."""

    id: str
    category: Category
    severity: Severity
    description: str
    location: str
    rule: str

    class Config:
        use_enum_values = True
        frozen = True


class ComplianceRule(BaseModel):
    """Catalog entry mapping a rule name to its default category and severity."""

    name: str
    category: Category
    severity: Severity
    enabled: bool = True

    class Config:
        use_enum_values = True
        frozen = True


def compute_score(issues: list[Issue]) -> int:
    """Severity-weighted linear deduction from 100, floored at 0."""
    deductions = sum(SEVERITY_WEIGHTS[Severity(issue.severity)] for issue in issues)
    return round(max(0, MAX_SCORE - deductions * SCORE_MULTIPLIER))


def score_status(score: int) -> str:
    """Map a score to its display band."""
    if score >= 90:
        return "Audit Ready"
    if score >= 70:
        return "Minor Issues"
    return "Needs Work"


class ValidationResult(BaseModel):
    """Complete evaluation of one document — the output of the validation engine.

    Immutable once built; re-validation produces a fresh result.
    """

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "alias_generator": to_camel,
    }

    document_id: Optional[str] = None
    score: int = Field(ge=0, le=MAX_SCORE, description="Compliance score 0-100")
    issues: tuple[Issue, ...] = ()
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    process_time: float = Field(default=0.0, description="Elapsed evaluation time in seconds")
    summary: dict[str, int] = Field(
        default_factory=lambda: {s.value: 0 for s in Severity},
        description="Count of issues by severity",
    )
    status: str = ""

    @model_validator(mode="after")
    def _check_invariants(self) -> "ValidationResult":
        ids = [issue.id for issue in self.issues]
        if len(ids) != len(set(ids)):
            duplicates = sorted({i for i in ids if ids.count(i) > 1})
            raise ValueError(f"Duplicate issue ids: {', '.join(duplicates)}")
        if (self.score == MAX_SCORE) != (len(self.issues) == 0):
            raise ValueError(
                f"Score {self.score} is inconsistent with {len(self.issues)} issue(s)"
            )
        return self

    @classmethod
    def build(
        cls,
        issues: list[Issue],
        document_id: Optional[str] = None,
        process_time: float = 0.0,
    ) -> "ValidationResult":
        """Build a complete result from an ordered list of issues."""
        summary = {s.value: 0 for s in Severity}
        for issue in issues:
            summary[issue.severity] += 1

        score = compute_score(issues)

        return cls(
            document_id=document_id,
            score=score,
            issues=tuple(issues),
            process_time=round(process_time, 4),
            summary=summary,
            status=score_status(score),
        )
