import pytest
from pydantic import ValidationError

from complianceiq.validators.models import (
    Category,
    ComplianceRule,
    Issue,
    Severity,
    ValidationResult,
    compute_score,
    score_status,
)


def _issue(id, severity=Severity.CRITICAL, category=Category.CONTENT):
    return Issue(
        id=id,
        category=category,
        severity=severity,
        description="test",
        location="Document content",
        rule="Test Rule",
    )


def test_single_issue_costs_by_severity():
    assert compute_score([_issue("a", Severity.CRITICAL)]) == 85
    assert compute_score([_issue("a", Severity.MAJOR)]) == 90
    assert compute_score([_issue("a", Severity.MINOR)]) == 95


def test_score_is_100_without_issues():
    assert compute_score([]) == 100


def test_score_floors_at_zero():
    issues = [_issue(f"i{n}") for n in range(10)]
    assert compute_score(issues) == 0


def test_score_never_increases_as_issues_are_added():
    severities = [Severity.MINOR, Severity.CRITICAL, Severity.MAJOR, Severity.MINOR, Severity.CRITICAL] * 3
    issues = []
    previous = compute_score(issues)
    for n, severity in enumerate(severities):
        issues.append(_issue(f"i{n}", severity))
        current = compute_score(issues)
        assert current <= previous
        previous = current


def test_issue_rejects_unknown_severity():
    with pytest.raises(ValidationError):
        Issue(
            id="x",
            category="Content",
            severity="Blocker",
            description="d",
            location="l",
            rule="r",
        )


def test_issue_stores_plain_enum_values():
    issue = _issue("x", Severity.MAJOR, Category.METADATA)
    assert issue.severity == "Major"
    assert issue.category == "Metadata"


def test_build_counts_severities_and_sets_status():
    result = ValidationResult.build(
        [_issue("a", Severity.CRITICAL), _issue("b", Severity.MINOR), _issue("c", Severity.MINOR)],
        document_id="doc_1",
        process_time=0.0123456,
    )

    assert result.score == 75
    assert result.summary == {"Critical": 1, "Major": 0, "Minor": 2}
    assert result.status == "Minor Issues"
    assert result.document_id == "doc_1"
    assert result.process_time == 0.0123


def test_build_preserves_issue_order():
    ids = ["z", "a", "m"]
    result = ValidationResult.build([_issue(i) for i in ids])
    assert [issue.id for issue in result.issues] == ids


def test_duplicate_issue_ids_are_rejected():
    with pytest.raises(ValidationError, match="Duplicate issue ids"):
        ValidationResult.build([_issue("same"), _issue("same", Severity.MINOR)])


def test_perfect_score_requires_no_issues():
    with pytest.raises(ValidationError):
        ValidationResult(score=100, issues=(_issue("a"),))
    with pytest.raises(ValidationError):
        ValidationResult(score=90, issues=())


def test_result_is_immutable():
    result = ValidationResult.build([])
    with pytest.raises(ValidationError):
        result.score = 50


def test_result_serializes_with_camel_case_keys():
    result = ValidationResult.build([_issue("a")], document_id="doc_1", process_time=1.5)
    data = result.model_dump(mode="json", by_alias=True)

    assert data["documentId"] == "doc_1"
    assert data["processTime"] == 1.5
    assert data["issues"][0]["severity"] == "Critical"

    restored = ValidationResult.model_validate(data)
    assert restored == result


@pytest.mark.parametrize("score,label", [
    (100, "Audit Ready"),
    (90, "Audit Ready"),
    (85, "Minor Issues"),
    (70, "Minor Issues"),
    (65, "Needs Work"),
    (0, "Needs Work"),
])
def test_score_status_bands(score, label):
    assert score_status(score) == label


def test_compliance_rule_defaults_to_enabled():
    rule = ComplianceRule(name="Purpose Section", category="Structure", severity="Major")
    assert rule.enabled is True
