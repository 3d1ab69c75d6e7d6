"""Metadata Validator — document ID, version, effective date and revision history formats."""

from complianceiq.validators.base import BaseValidator, RuleLookup
from complianceiq.validators.models import Category, Issue, Severity
from complianceiq.validators.reference_data import (
    DOCUMENT_ID_PATTERN,
    EFFECTIVE_DATE_PATTERN,
    REVISION_HISTORY_MARKERS,
    VERSION_PATTERN,
)


class MetadataValidator(BaseValidator):
    """Validates the document header fields and revision history block."""

    @property
    def name(self) -> str:
        return "MetadataValidator"

    def validate(self, text: str, rules: RuleLookup) -> list[Issue]:
        issues = []

        # 1. Document ID: SOP- followed by exactly three digits
        if not DOCUMENT_ID_PATTERN.search(text):
            issues.append(self._issue(
                id="invalid-doc-id",
                category=Category.METADATA,
                severity=Severity.CRITICAL,
                description="Document ID must follow SOP-### format",
                location="Document header",
                rule="Document ID Format",
            ))

        # 2. Version/Revision number
        if not VERSION_PATTERN.search(text):
            issues.append(self._issue(
                id="missing-version",
                category=Category.METADATA,
                severity=Severity.CRITICAL,
                description="Version or revision must be given as <major>.<minor> (e.g. Version: 1.0)",
                location="Document header",
                rule="Version Format",
            ))

        # 3. Effective date
        if not EFFECTIVE_DATE_PATTERN.search(text):
            issues.append(self._issue(
                id="missing-effective-date",
                category=Category.METADATA,
                severity=Severity.CRITICAL,
                description="Effective date must be in YYYY-MM-DD format",
                location="Document header",
                rule="Effective Date",
            ))

        # 4. Revision history must hold at least one real entry
        history = self._section_block(text, "revision history")
        if history is None or not history.strip():
            description = "Revision history is missing or has no entries"
        elif self._contains_any(history, REVISION_HISTORY_MARKERS):
            description = "Revision history contains placeholder entries ([Empty] or TBD)"
        else:
            description = None

        if description:
            issues.append(self._issue(
                id="incomplete-revision-history",
                category=Category.METADATA,
                severity=Severity.CRITICAL,
                description=description,
                location="Revision History section",
                rule="Revision History",
            ))

        return issues
