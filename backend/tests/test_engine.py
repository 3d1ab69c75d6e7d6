import pytest

from complianceiq.samples import COMPLIANT_SOP, DEFICIENT_SOP, OUTDATED_REFERENCES_SOP
from complianceiq.validators import (
    ComplianceRule,
    EvaluationError,
    InvalidInputError,
    ProcessingFailureError,
    ValidationEngine,
    load_rule_catalog,
)
from complianceiq.validators.base import BaseValidator
from complianceiq.validators.models import Category, Severity

EMPTY_DOCUMENT_IDS = [
    "missing-title",
    "missing-document-id",
    "missing-version-section",
    "missing-effective-date-section",
    "missing-purpose",
    "missing-scope",
    "missing-responsibilities",
    "missing-definitions",
    "missing-procedure",
    "missing-references",
    "missing-revision-history",
    "missing-approvals",
    "invalid-doc-id",
    "missing-version",
    "missing-effective-date",
    "incomplete-revision-history",
    "missing-prepared-by",
    "missing-reviewed-by",
    "missing-approved-by",
    "insufficient-steps",
]


class CrashingValidator(BaseValidator):
    @property
    def name(self) -> str:
        return "CrashingValidator"

    def validate(self, text, rules):
        raise KeyError("boom")


class FixedValidator(BaseValidator):
    def __init__(self, issue_id):
        self.issue_id = issue_id

    @property
    def name(self) -> str:
        return f"FixedValidator[{self.issue_id}]"

    def validate(self, text, rules):
        return [self._issue(
            id=self.issue_id,
            category=Category.CONTENT,
            severity=Severity.MINOR,
            description="fixed",
            location="Document content",
            rule="Fixed",
        )]


def test_compliant_document_scores_100(engine, compliant_text):
    result = engine.evaluate(compliant_text)

    assert result.issues == ()
    assert result.score == 100
    assert result.status == "Audit Ready"


def test_compliant_document_scores_100_with_catalog(engine, compliant_text):
    result = engine.evaluate(compliant_text, rule_catalog=load_rule_catalog())
    assert result.score == 100


def test_empty_text_fires_every_structural_and_metadata_check(engine):
    result = engine.evaluate("")

    assert [issue.id for issue in result.issues] == EMPTY_DOCUMENT_IDS
    assert result.score == 0
    assert all(issue.severity == "Critical" for issue in result.issues)
    assert sum(1 for i in result.issues if i.category == "Structure") == 12


def test_whitespace_only_text_is_not_an_error(engine):
    result = engine.evaluate("   \n\n\t")
    assert result.score == 0
    assert len(result.issues) == len(EMPTY_DOCUMENT_IDS)


def test_lorem_ipsum_and_tbd_give_two_placeholder_issues(engine, compliant_text):
    text = compliant_text + "\nNote: lorem ipsum remains in section 4, owner TBD.\n"
    result = engine.evaluate(text)

    placeholders = [i for i in result.issues if i.id.startswith("placeholder-")]
    assert [i.id for i in placeholders] == ["placeholder-tbd", "placeholder-lorem-ipsum"]
    assert all(i.severity == "Major" for i in placeholders)
    assert result.score == 80


def test_reference_with_standard_year_passes(engine, compliant_text):
    text = compliant_text.replace(
        "- ISO 13485:2016 Medical devices, Quality management systems\n"
        "- 21 CFR Part 820 Quality System Regulation (2018)\n",
        "- ISO 13485:2016\n",
    )
    result = engine.evaluate(text)

    assert result.score == 100


def test_outdated_reference_is_a_minor_issue(engine):
    result = engine.evaluate(OUTDATED_REFERENCES_SOP)

    [issue] = result.issues
    assert issue.id == "outdated-references"
    assert "2000" in issue.description
    assert result.score == 95


def test_issue_ids_are_unique(engine):
    for text in ("", COMPLIANT_SOP, DEFICIENT_SOP, OUTDATED_REFERENCES_SOP):
        ids = [issue.id for issue in engine.evaluate(text).issues]
        assert len(ids) == len(set(ids))


def test_evaluation_is_idempotent(engine):
    first = engine.evaluate(DEFICIENT_SOP)
    second = engine.evaluate(DEFICIENT_SOP)

    assert first.issues == second.issues
    assert first.score == second.score


def test_deficient_sample_issues_in_check_order(engine):
    result = engine.evaluate(DEFICIENT_SOP)

    assert [issue.id for issue in result.issues] == [
        "missing-responsibilities",
        "missing-definitions",
        "missing-revision-history",
        "invalid-doc-id",
        "missing-effective-date",
        "incomplete-revision-history",
        "placeholder-tbd",
        "placeholder-lorem-ipsum",
        "missing-prepared-by",
        "missing-reviewed-by",
        "missing-approved-by",
        "insufficient-steps",
        "missing-reference-years",
    ]
    assert result.score == 0
    assert result.summary == {"Critical": 10, "Major": 3, "Minor": 0}


def test_score_bounds_hold_for_assorted_inputs(engine):
    texts = ["", "x", COMPLIANT_SOP, DEFICIENT_SOP, COMPLIANT_SOP[:200], COMPLIANT_SOP + "TBD"]
    for text in texts:
        result = engine.evaluate(text)
        assert 0 <= result.score <= 100
        assert (result.score == 100) == (len(result.issues) == 0)


def test_document_id_and_timing_are_recorded(engine, compliant_text):
    result = engine.evaluate(compliant_text, document_id="doc_42")

    assert result.document_id == "doc_42"
    assert result.process_time >= 0
    assert result.timestamp.tzinfo is not None


def test_enabled_catalog_rule_overrides_section_severity(engine, compliant_text):
    text = compliant_text.replace("Definitions:", "Glossary")
    catalog = [ComplianceRule(name="Definitions Section", category="Structure", severity="Minor")]

    result = engine.evaluate(text, rule_catalog=catalog)

    [issue] = result.issues
    assert issue.severity == "Minor"
    assert result.score == 95


def test_disabled_catalog_rule_is_ignored(engine, compliant_text):
    text = compliant_text.replace("Definitions:", "Glossary")
    catalog = {
        "Definitions Section": ComplianceRule(
            name="Definitions Section", category="Structure", severity="Minor", enabled=False
        )
    }

    result = engine.evaluate(text, rule_catalog=catalog)

    [issue] = result.issues
    assert issue.severity == "Critical"
    assert result.score == 85


def test_catalog_entries_may_be_plain_dicts(engine, compliant_text):
    text = compliant_text.replace("Definitions:", "Glossary")
    catalog = [
        {"name": "Definitions Section", "category": "Structure", "severity": "Minor", "enabled": True},
        {"name": "Purpose Section", "category": "Structure", "severity": "Minor", "enabled": False},
    ]

    result = engine.evaluate(text, rule_catalog=catalog)

    [issue] = result.issues
    assert issue.severity == "Minor"
    assert result.score == 95


@pytest.mark.parametrize(
    "catalog",
    [
        [{"name": "Purpose Section", "category": "Structure", "severity": "Fatal"}],
        [{"category": "Structure", "severity": "Minor"}],
        ["Purpose Section"],
        42,
    ],
)
def test_malformed_catalog_is_rejected_as_invalid_input(engine, catalog):
    with pytest.raises(InvalidInputError) as exc_info:
        engine.evaluate("", rule_catalog=catalog)

    assert isinstance(exc_info.value, EvaluationError)
    assert exc_info.value.__cause__ is not None


def test_catalog_does_not_change_non_section_checks(engine, compliant_text):
    text = compliant_text.replace("SOP-123", "DOC-123")
    catalog = [ComplianceRule(name="Document ID Format", category="Content", severity="Minor")]

    [issue] = engine.evaluate(text, rule_catalog=catalog).issues
    assert issue.severity == "Critical"
    assert issue.category == "Metadata"


def test_utf8_bytes_are_accepted(engine, compliant_text):
    assert engine.evaluate(compliant_text.encode("utf-8")).score == 100


@pytest.mark.parametrize("bad_input", [None, 42, ["Title:"], {"text": "x"}, b"\xff\xfe\xfa"])
def test_non_text_input_is_rejected(engine, bad_input):
    with pytest.raises(InvalidInputError):
        engine.evaluate(bad_input)


def test_invalid_input_is_a_value_error(engine):
    with pytest.raises(ValueError):
        engine.evaluate(None)


def test_crashing_validator_is_wrapped():
    engine = ValidationEngine([FixedValidator("first"), CrashingValidator()])

    with pytest.raises(ProcessingFailureError) as exc_info:
        engine.evaluate(COMPLIANT_SOP)

    assert exc_info.value.validator == "CrashingValidator"
    assert isinstance(exc_info.value.__cause__, KeyError)
    assert isinstance(exc_info.value, EvaluationError)


def test_duplicate_ids_from_custom_validators_fail_the_run():
    engine = ValidationEngine([FixedValidator("same"), FixedValidator("same")])

    with pytest.raises(ProcessingFailureError):
        engine.evaluate(COMPLIANT_SOP)


def test_add_and_remove_validator(compliant_text):
    engine = ValidationEngine()
    engine.add_validator(FixedValidator("extra"))

    result = engine.evaluate(compliant_text)
    assert [i.id for i in result.issues] == ["extra"]

    engine.remove_validator("FixedValidator[extra]")
    assert engine.evaluate(compliant_text).score == 100
